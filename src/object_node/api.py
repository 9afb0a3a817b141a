"""Public API functions for object-node.

This module provides three user-facing functions: inspect_value, describe
and display. None of them keep state between calls.
"""

from __future__ import annotations

from typing import Any

from object_node.config import NodeConfig
from object_node.naming import to_display
from object_node.node import ValueNode
from object_node.result import NodeDescription

__all__ = ["describe", "display", "inspect_value"]


def inspect_value(
    value: Any,
    name: str = "root",
    config: NodeConfig | None = None,
) -> ValueNode:
    """Wrap ``value`` in a ValueNode reached under ``name``.

    Raises:
        TypeError: If ``value`` is not part of the object model.
    """
    return ValueNode(name, value, config)


def describe(
    value: Any,
    name: str = "root",
    config: NodeConfig | None = None,
) -> NodeDescription:
    """Return a NodeDescription snapshot of ``value``.

    Args:
        value:  Any model value (primitive, JSObject or JSFunction).
        name:   Name the value was reached under. Defaults to "root".
        config: Labelling configuration. Defaults to ``NodeConfig()`` when None.

    Returns:
        A frozen ``NodeDescription`` with id, name, type, fields, supertype
        and the ``(id, name)`` pairs of the node's sub-nodes.
    """
    node = ValueNode(name, value, config)
    return NodeDescription(
        id=node.id(),
        name=node.name(),
        type=node.type(),
        fields=tuple(node.fields()),
        supertype=node.supertype_link(),
        children=tuple((sub.id, sub.name) for sub in node.sub_nodes()),
    )


def display(value: Any, config: NodeConfig | None = None) -> str:
    """Return the display string of ``value`` as it would appear in a field."""
    return to_display(value, config)
