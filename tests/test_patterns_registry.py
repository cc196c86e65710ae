import logging

from design_patterns.pattern_demo import PatternCategory, PatternDemo
from design_patterns.patterns_registry import DEMO_CLASSES, PatternCatalog, category_of

from conftest import make_demo


def test_registry_lists_all_23_patterns():
    assert len(DEMO_CLASSES) == 23
    assert len(set(DEMO_CLASSES)) == 23


def test_discover_builds_one_instance_per_demo_sorted_by_name(console):
    catalog = PatternCatalog(console=console)

    names = [p.name for p in catalog.patterns]
    assert len(names) == 23
    assert len(set(names)) == 23
    assert names == sorted(names)
    assert names.index("Abstract Factory") < names.index("Adapter") < names.index("Visitor")
    assert all(isinstance(p, PatternDemo) for p in catalog)


def test_every_registered_demo_has_a_known_category(console):
    catalog = PatternCatalog(console=console)
    known = {PatternCategory.CREATIONAL.value, PatternCategory.STRUCTURAL.value, PatternCategory.BEHAVIORAL.value}

    assert {category_of(p) for p in catalog} == known
    assert len(catalog.filter_by_category("Creational")) == 5
    assert len(catalog.filter_by_category("Structural")) == 7
    assert len(catalog.filter_by_category("Behavioral")) == 11


def test_failing_constructor_is_skipped_and_reported(console, output, caplog, sample_factories):
    class BrokenDemo(PatternDemo):
        name = "Broken"

        def __init__(self):
            raise ValueError("cannot build")

        def demonstrate(self):
            pass

    with caplog.at_level(logging.WARNING):
        catalog = PatternCatalog(factories=sample_factories + [BrokenDemo], console=console)

    assert [p.name for p in catalog] == ["Alpha", "Beta", "Zeta"]
    assert "Warning: Could not create instance of BrokenDemo: cannot build" in output.getvalue()
    assert "BrokenDemo" in caplog.text


def test_empty_registry_gives_empty_catalog(console):
    catalog = PatternCatalog(factories=[], console=console)

    assert catalog.discover() == []
    assert len(catalog) == 0
    assert catalog.group_by_category() == {}


def test_filter_by_category_is_exact_and_case_sensitive(console):
    factories = [
        make_demo("Builder", "Creational"),
        make_demo("Adapter", "Structural"),
        make_demo("Proxy", "Structural"),
        make_demo("State", "Behavioral"),
    ]
    catalog = PatternCatalog(factories=factories, console=console)

    assert [p.name for p in catalog.filter_by_category("Structural")] == ["Adapter", "Proxy"]
    assert catalog.filter_by_category("structural") == []
    assert catalog.filter_by_category("Missing") == []


def test_group_by_category_sorted_keys_and_values(console, sample_factories):
    catalog = PatternCatalog(factories=sample_factories, console=console)

    groups = catalog.group_by_category()

    assert list(groups) == ["Behavioral", "Creational"]
    assert [p.name for p in groups["Behavioral"]] == ["Zeta"]
    assert [p.name for p in groups["Creational"]] == ["Alpha", "Beta"]
    assert {id(p) for ps in groups.values() for p in ps} == {id(p) for p in catalog}
    assert [p.name for p in catalog.discover()] == ["Alpha", "Beta", "Zeta"]


def test_name_ordering_is_case_sensitive(console):
    catalog = PatternCatalog(factories=[make_demo("beta", "Creational"), make_demo("Gamma", "Creational")],
                             console=console)

    assert [p.name for p in catalog] == ["Gamma", "beta"]


def test_missing_category_falls_back_to_unknown(console):
    catalog = PatternCatalog(factories=[make_demo("Loose", ""), make_demo("Tagged", "Structural")], console=console)

    assert [p.name for p in catalog.filter_by_category("Unknown")] == ["Loose"]
    assert list(catalog.group_by_category()) == ["Structural", "Unknown"]


def test_find_is_case_insensitive(console):
    catalog = PatternCatalog(console=console)

    assert catalog.find("abstract factory").name == "Abstract Factory"
    assert catalog.find("  Template Method ").name == "Template Method"
    assert catalog.find("Nope") is None
