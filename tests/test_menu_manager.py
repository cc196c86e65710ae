import pytest

from design_patterns.menu_manager import MenuController, MenuState
from design_patterns.patterns_registry import PatternCatalog

from conftest import explode, make_demo


class ScriptedInput:
    """依序回傳預先準備的輸入，用完時模擬輸入結束。"""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class KeyWaiter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def catalog(console):
    return PatternCatalog(
        factories=[
            make_demo("Beta", "Creational"),
            make_demo("Alpha", "Creational"),
            make_demo("Zeta", "Behavioral", action=explode),
        ],
        console=console,
    )


def build(catalog, console, *lines):
    reader = ScriptedInput(*lines)
    waiter = KeyWaiter()
    controller = MenuController(catalog=catalog, console=console, read_line=reader,
                                wait_for_key=waiter, clear_screen=False)
    return controller, reader, waiter


def test_run_prints_banner_and_quits(catalog, console, output):
    controller, reader, _ = build(catalog, console, "Q")

    controller.run()

    text = output.getvalue()
    assert text.startswith("Design Patterns Demo - 23 GoF Patterns\n" + "=" * 38)
    assert "1. Creational Patterns" in text
    assert "Q. Quit" in text
    assert text.rstrip().endswith("Exiting...")
    assert reader.prompts == ["Select: "]
    assert controller.state == MenuState.TERMINATED


def test_empty_input_is_ignored_silently(catalog, console, output):
    controller, reader, _ = build(catalog, console, "", "   ", "q")

    controller.run()

    assert "Invalid option" not in output.getvalue()
    assert reader.prompts == ["Select: "] * 3
    assert controller.state == MenuState.TERMINATED


def test_unknown_main_menu_option(catalog, console, output):
    controller, _, _ = build(catalog, console)

    state = controller.handle_menu_choice("9")

    assert state == MenuState.MAIN_MENU
    assert "Invalid option. Try again." in output.getvalue()


def test_end_of_input_terminates_loop(catalog, console, output):
    controller, _, _ = build(catalog, console, "9")

    controller.run()

    assert controller.state == MenuState.TERMINATED
    assert "Exiting..." in output.getvalue()


def test_category_lists_sorted_patterns_and_runs_selection(catalog, console, output):
    controller, reader, waiter = build(catalog, console, "1")

    state = controller.handle_menu_choice("1")

    text = output.getvalue()
    assert "Creational Patterns:" in text
    assert text.index("1. Alpha") < text.index("2. Beta") < text.index("0. Back to Main Menu")
    assert "Alpha Pattern\n-------------\nDescription: Alpha description" in text
    assert reader.prompts == ["Select a pattern: "]
    assert catalog.find("Alpha").runs == 1
    assert catalog.find("Beta").runs == 0
    assert waiter.calls == 1
    assert state == MenuState.MAIN_MENU


def test_back_option_returns_without_running(catalog, console):
    controller, _, waiter = build(catalog, console, "0")

    state = controller.handle_menu_choice("1")

    assert state == MenuState.MAIN_MENU
    assert all(getattr(p, "runs", 0) == 0 for p in catalog)
    assert waiter.calls == 0


@pytest.mark.parametrize("selection", ["3", "-1", "abc", ""])
def test_invalid_pattern_selection(catalog, console, output, selection):
    controller, _, waiter = build(catalog, console, selection)

    state = controller.handle_menu_choice("1")

    assert "Invalid selection." in output.getvalue()
    assert waiter.calls == 1
    assert state == MenuState.MAIN_MENU
    assert all(getattr(p, "runs", 0) == 0 for p in catalog)


def test_empty_category_returns_immediately(catalog, console, output):
    controller, reader, waiter = build(catalog, console)

    state = controller.handle_menu_choice("2")

    assert "No patterns found for category: Structural" in output.getvalue()
    assert reader.prompts == []
    assert waiter.calls == 0
    assert state == MenuState.MAIN_MENU


def test_failing_demonstration_is_reported_and_menu_continues(catalog, console, output):
    controller, _, waiter = build(catalog, console, "3", "1", "q")

    controller.run()

    text = output.getvalue()
    assert "Zeta Pattern" in text
    assert "Error during demonstration: boom" in text
    assert waiter.calls == 1
    assert controller.state == MenuState.TERMINATED
    assert text.count("Main Menu:") == 2


def test_demonstrate_pattern_reports_success(catalog, console):
    controller, _, _ = build(catalog, console)

    assert controller.demonstrate_pattern(catalog.find("Beta")) is True
    assert controller.demonstrate_pattern(catalog.find("Zeta")) is False
    assert controller.state == MenuState.PATTERN_DETAIL


def test_show_all_groups_by_category(catalog, console, output):
    controller, _, waiter = build(catalog, console)

    state = controller.handle_menu_choice("4")

    text = output.getvalue()
    assert "All Available Patterns:" in text
    assert text.index("Behavioral:") < text.index("  - Zeta") < text.index("Creational:")
    assert text.index("  - Alpha") < text.index("  - Beta")
    assert waiter.calls == 1
    assert state == MenuState.MAIN_MENU


def test_names_with_brackets_are_printed_verbatim(console, output):
    catalog = PatternCatalog(factories=[make_demo("[Odd] Name", "Creational")], console=console)
    controller, _, _ = build(catalog, console, "0")

    controller.handle_menu_choice("1")

    assert "1. [Odd] Name" in output.getvalue()
