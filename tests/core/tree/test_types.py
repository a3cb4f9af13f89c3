from pipeconf.core.tree.types import (
    TYPE_BROKER,
    TYPE_FILTER_PARTS,
    Broker,
    Component,
    ComponentCategory,
    ConfigTree,
    FilterParts,
)


def test_variants_expose_type_name():
    assert Component("stdin").type_name == "stdin"
    assert Broker(category=ComponentCategory.INPUT).type_name == TYPE_BROKER
    assert FilterParts(condition=Component("text")).type_name == TYPE_FILTER_PARTS


def test_broker_children_key_follows_category():
    assert Broker(category=ComponentCategory.INPUT).children_key == "inputs"
    assert Broker(category=ComponentCategory.OUTPUT).children_key == "outputs"


def test_category_values_are_stable_strings():
    assert [c.value for c in ComponentCategory] == [
        "input", "output", "processor", "condition", "cache", "rate_limit",
    ]
    assert ComponentCategory("rate_limit") is ComponentCategory.RATE_LIMIT


def test_tree_defaults_are_independent():
    a = ConfigTree(input=Component("stdin"), output=Component("stdout"))
    b = ConfigTree(input=Component("stdin"), output=Component("stdout"))

    a.pipeline.processors.append(Component("noop"))
    a.manager.caches["example"] = Component("memory")

    assert b.pipeline.processors == []
    assert b.manager.caches == {}
