"""NodeDescription dataclass: a one-shot snapshot of a ValueNode.

This module provides the result type returned by describe() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from object_node.node import FieldEntry

__all__ = ["NodeDescription"]


@dataclass(frozen=True, slots=True)
class NodeDescription:
    """Everything a renderer needs to draw one node.

    Attributes:
        id: The node's opaque per-instance id.
        name: Resolved display name.
        type: Type label.
        fields: Own enumerable fields in enumeration order.
        supertype: The supertype-link entry, or None when there is no supertype.
        children: ``(id, name)`` of each field that leads to a sub-node,
            followed by the supertype link when present.
    """

    id: str
    name: str
    type: str
    fields: tuple[FieldEntry, ...]
    supertype: FieldEntry | None
    children: tuple[tuple[str, str], ...]
