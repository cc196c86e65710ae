import pytest
from typer.testing import CliRunner

import main

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"clear_screen": false}', encoding="utf-8")
    return str(path)


def test_list_shows_all_categories(config_file):
    result = runner.invoke(main.app, ["--config", config_file, "list"])

    assert result.exit_code == 0
    assert "All Available Patterns (23):" in result.output
    for expected in ("Behavioral:", "Creational:", "Structural:", "  - Abstract Factory", "  - Visitor"):
        assert expected in result.output
    assert result.output.index("Behavioral:") < result.output.index("Creational:") < result.output.index("Structural:")


def test_run_single_pattern(config_file):
    result = runner.invoke(main.app, ["--config", config_file, "run", "builder"])

    assert result.exit_code == 0
    assert "Builder Pattern" in result.output
    assert "Description:" in result.output


def test_run_unknown_pattern_fails(config_file):
    result = runner.invoke(main.app, ["--config", config_file, "run", "nope"])

    assert result.exit_code == 1
    assert "No pattern named 'nope'." in result.output


def test_menu_command_reads_stdin(config_file):
    result = runner.invoke(main.app, ["--no-clear", "--config", config_file, "menu"], input="9\nq\n")

    assert result.exit_code == 0
    assert "Design Patterns Demo - 23 GoF Patterns" in result.output
    assert "Invalid option. Try again." in result.output
    assert "Exiting..." in result.output


def test_no_subcommand_starts_menu(config_file):
    result = runner.invoke(main.app, ["--no-clear", "--config", config_file], input="q\n")

    assert result.exit_code == 0
    assert "Main Menu:" in result.output


def test_menu_runs_a_demo_and_returns(config_file):
    result = runner.invoke(main.app, ["--no-clear", "--config", config_file, "menu"], input="1\n2\n\nq\n")

    assert result.exit_code == 0
    assert "Builder Pattern" in result.output
    assert result.output.count("Main Menu:") == 2


def test_cli_reports_unexpected_errors(monkeypatch, capsys):
    def broken_app():
        raise RuntimeError("boom")

    monkeypatch.setattr(main, "app", broken_app)

    with pytest.raises(SystemExit) as exc_info:
        main.cli()

    assert exc_info.value.code == 1
    assert "Application error: boom" in capsys.readouterr().out
