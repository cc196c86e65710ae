from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from design_patterns.behavioral.command import (CommandScheduler, LightOnCommand, MacroCommand,
                                                SetTemperatureCommand, SmartHomeRemote, SmartLight,
                                                SmartThermostat)
from design_patterns.behavioral.interpreter import parse_rule
from design_patterns.behavioral.iterator import Book, BookCollection
from design_patterns.behavioral.memento import EditorHistory, TextEditor
from design_patterns.behavioral.strategy import (BubbleSortStrategy, DataSorter, Dimensions,
                                                 MergeSortStrategy, Package, QuickSortStrategy,
                                                 ShippingCalculator, StandardShippingStrategy)
from design_patterns.behavioral.visitor import AreaCalculator, Rectangle
from design_patterns.creational.builder import DatabaseConfigurationBuilder
from design_patterns.creational.factory_method import CreditCardProcessor, PaymentProcessorFactory
from design_patterns.creational.prototype import create_invoice_template
from design_patterns.creational.singleton import ApiClient, BasicLogger, ConfigurationManager, ModernCache
from design_patterns.patterns_registry import DEMO_CLASSES
from design_patterns.structural.composite import File, Folder
from design_patterns.structural.decorator import MilkDecorator, SimpleCoffee, SugarDecorator
from design_patterns.structural.flyweight import Forest, TreeTypeFactory
from design_patterns.structural.proxy import ImageProxy


@pytest.mark.parametrize("demo_class", DEMO_CLASSES, ids=lambda cls: cls.name)
def test_every_demo_runs_and_prints(demo_class, capsys):
    demo = demo_class()

    demo.demonstrate()

    assert demo.name
    assert demo.description
    assert capsys.readouterr().out.strip()


def test_builder_chains_and_resets():
    builder = DatabaseConfigurationBuilder.create_new()
    config = (builder.for_server("db01").with_database("shop").with_encryption()
              .with_connection_pooling(20).with_retry_logic(3).build())

    assert config.connection_string == "Server=db01;Database=shop;Encrypt=true;"
    assert config.connection_pooling_enabled and config.pool_size == 20
    assert config.retry_logic_enabled and config.max_retries == 3

    fresh = builder.reset().build()
    assert fresh.connection_string == ""
    assert fresh.timeout_seconds == 30
    assert not fresh.connection_pooling_enabled


def test_factory_method_creates_processors_and_rejects_unknown_types():
    assert isinstance(PaymentProcessorFactory.create_processor("Credit-Card"), CreditCardProcessor)

    with pytest.raises(ValueError, match="Unsupported payment type: cheque"):
        PaymentProcessorFactory.create_processor("cheque")


def test_prototype_clone_is_independent(capsys):
    original = create_invoice_template()
    clone = original.clone()

    clone.metadata.tags.append("custom")
    clone.company_info.name = "Other Corp"

    assert "custom" not in original.metadata.tags
    assert original.company_info.name == "Acme Corporation"


def test_singletons_share_instances_and_context_object_is_passed_explicitly(capsys):
    assert BasicLogger.instance() is BasicLogger.instance()
    assert ModernCache() is ModernCache()

    config = ConfigurationManager()
    config.set_value("ApiTimeout", "45")
    first, second = ApiClient(config), ApiClient(config)

    assert first.config is second.config
    assert second.describe() == "timeout=45s"


def test_decorators_add_up_cost(capsys):
    latte = SugarDecorator(MilkDecorator(MilkDecorator(SimpleCoffee())))

    assert latte.get_cost() == Decimal("3.25")
    assert latte.get_description() == "Simple Coffee, Milk, Milk, Sugar"


def test_composite_sums_nested_sizes():
    root = Folder("root")
    documents = Folder("documents")
    documents.add(File("a.txt", 100))
    documents.add(File("b.txt", 30))
    root.add(documents)
    root.add(File("c.bin", 300))

    assert root.get_size() == 430

    root.remove(documents)
    assert root.get_size() == 300


def test_flyweight_shares_tree_types(capsys):
    factory = TreeTypeFactory()
    forest = Forest(factory)
    for i in range(50):
        forest.plant_tree(i, i * 2, "Oak", "Green", "oak.png")
    forest.plant_tree(0, 0, "Pine", "DarkGreen", "pine.png")

    assert forest.tree_count == 51
    assert factory.created_types == 2
    assert forest.trees[0].type is forest.trees[49].type


def test_proxy_loads_lazily_once(capsys):
    proxy = ImageProxy("photo.jpg")
    assert not proxy.is_loaded

    proxy.display()
    proxy.display()

    assert proxy.is_loaded
    assert capsys.readouterr().out.count("Loading") == 1


def test_iterator_exhaustion():
    collection = BookCollection()
    collection.add_book(Book("Dune", "Frank Herbert"))
    iterator = collection.create_iterator()

    assert iterator.next().title == "Dune"
    assert not iterator.has_next()
    with pytest.raises(IndexError):
        iterator.next()
    assert [book.title for book in collection] == ["Dune"]


def test_memento_undo_restores_previous_states(capsys):
    editor, history = TextEditor(), EditorHistory()
    editor.write("Hello")
    history.save(editor)
    editor.write(" World")

    assert history.undo(editor)
    assert editor.content == "Hello"
    assert not history.undo(editor)
    assert "No more states to restore" in capsys.readouterr().out


def test_standard_shipping_cost():
    package = Package(weight=Decimal("5.5"),
                      dimensions=Dimensions(Decimal(12), Decimal(8), Decimal(6)),
                      is_fragile=True)
    calculator = ShippingCalculator()
    calculator.set_strategy(StandardShippingStrategy())

    assert calculator.calculate_shipping_cost(package) == Decimal("76.35")


def test_shipping_calculator_requires_strategy():
    with pytest.raises(RuntimeError):
        ShippingCalculator().calculate_shipping_cost(
            Package(weight=Decimal(1), dimensions=Dimensions(Decimal(1), Decimal(1), Decimal(1))))


@pytest.mark.parametrize("strategy", [BubbleSortStrategy(), QuickSortStrategy(), MergeSortStrategy()],
                         ids=lambda s: s.algorithm_name)
def test_sort_strategies_sort_in_place(strategy):
    data = [64, 34, 25, 12, 22, 11, 90, 5, 25]
    sorter = DataSorter()
    sorter.set_sorting_strategy(strategy)

    sorter.sort(data)

    assert data == [5, 11, 12, 22, 25, 25, 34, 64, 90]


def test_visitor_returns_computed_value(capsys):
    assert Rectangle(3, 4).accept(AreaCalculator()) == 12


def test_interpreter_evaluates_rules():
    rule = parse_rule("total >= 100 and not (items < 3 or vip == 0)")

    assert rule.interpret({"total": Decimal(150), "items": Decimal(3), "vip": Decimal(1)}) is True
    assert rule.interpret({"total": Decimal(150), "items": Decimal(2), "vip": Decimal(1)}) is False
    assert parse_rule("2 + 3 * 4").interpret({}) == Decimal(14)
    assert parse_rule("(2 + 3) * 4").interpret({}) == Decimal(20)


@pytest.mark.parametrize("text", ["1 +", "(1 + 2", "1 2", "total $ 3"])
def test_interpreter_rejects_malformed_rules(text):
    with pytest.raises(SyntaxError):
        parse_rule(text)


def test_interpreter_reports_unknown_variables():
    with pytest.raises(KeyError):
        parse_rule("price > 10").interpret({})


def test_remote_undo_and_macro(capsys):
    light = SmartLight("Living Room")
    thermostat = SmartThermostat("Main")
    remote = SmartHomeRemote()

    remote.set_command(MacroCommand("Evening", [LightOnCommand(light, 40), SetTemperatureCommand(thermostat, 72)]))
    remote.press_button()
    assert light.get_state() == (True, 40)
    assert thermostat.temperature == 72

    remote.press_undo()
    assert light.get_state()[0] is False
    assert thermostat.temperature == 70

    remote.press_undo()
    assert "Nothing to undo" in capsys.readouterr().out


def test_scheduler_runs_only_due_commands(capsys):
    light = SmartLight("Porch")
    scheduler = CommandScheduler()
    now = datetime(2024, 1, 1, 20, 0, 0)
    scheduler.schedule_command(LightOnCommand(light), now - timedelta(seconds=1), "porch on")
    scheduler.schedule_command(LightOnCommand(light, 10), now + timedelta(hours=1), "later")

    assert scheduler.execute_scheduled_commands(now) == 1
    assert light.is_on
    assert scheduler.pending == 1
    assert scheduler.execute_scheduled_commands(now) == 0
