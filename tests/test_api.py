"""Tests for the public API functions: inspect_value, describe, display."""

from __future__ import annotations

import pytest

from object_node import (
    FieldEntry,
    NodeConfig,
    NodeDescription,
    Undefined,
    ValueNode,
    construct,
    create,
    describe,
    display,
    function,
    inspect_value,
    literal,
)


class TestInspectValue:
    def test_returns_value_node(self) -> None:
        obj = literal()
        node = inspect_value(obj)
        assert isinstance(node, ValueNode)
        assert node.value is obj

    def test_default_name_is_root(self) -> None:
        assert inspect_value(literal()).name() == "root"

    def test_custom_name(self) -> None:
        assert inspect_value(literal(), name="x").supplied_name == "x"

    def test_rejects_values_outside_the_model(self) -> None:
        with pytest.raises(TypeError, match="Unsupported value type"):
            inspect_value([1, 2])


class TestDescribe:
    def test_full_snapshot(self) -> None:
        my_class = function("MyClass")
        obj = construct(my_class)
        obj.set("count", 2)
        obj.set("run", function("run"))

        description = describe(obj)

        assert isinstance(description, NodeDescription)
        assert description.id.startswith("node")
        assert description.name == "root"
        assert description.type == "MyClass"
        assert description.fields == (
            FieldEntry(name="count", value="2", id="f0"),
            FieldEntry(name="run", value="run()", id="f1"),
        )
        assert description.supertype == FieldEntry(
            name="<prototype>", value="MyClass.prototype", id="proto"
        )
        assert description.children == (("f1", "run"), ("proto", "<prototype>"))

    def test_without_supertype(self) -> None:
        description = describe(create(None, {"a": Undefined}))
        assert description.type == "<null>"
        assert description.supertype is None
        assert description.children == ()

    def test_honours_config(self) -> None:
        config = NodeConfig(prototype_id="up", prototype_label="^")
        description = describe(literal(), config=config)
        assert description.supertype == FieldEntry(
            name="^", value="Object.prototype", id="up"
        )
        assert description.children == (("up", "^"),)

    def test_each_call_has_a_fresh_id(self) -> None:
        obj = literal()
        assert describe(obj).id != describe(obj).id


class TestDisplay:
    def test_matches_field_conversion(self) -> None:
        assert display(function("f")) == "f()"
        assert display(literal()) == "{Object}"
        assert display("s") == '"s"'

    def test_with_config(self) -> None:
        assert display(function(), NodeConfig(anonymous_label="λ")) == "λ()"
