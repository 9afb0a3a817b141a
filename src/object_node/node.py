"""ValueNode: identity-aware description of one value in an object graph.

A graph builder wraps a root value in a ValueNode, reads its fields and
supertype link for display, then walks ``sub_nodes()`` to reach the values
that deserve nodes of their own. Nodes are immutable and compute everything
on demand; nothing is cached except the identity token drawn at construction.

Identity vs. equality:
    ``id()`` is unique per node instance and is meant as a rendering key.
    ``equals()`` (and ``==``) compares the wrapped values (records by identity,
    primitives by value) and is the only signal to use for de-duplication
    across a traversal.

Example::

    node = ValueNode("root", value)
    seen = {node}
    for child in node.sub_nodes():
        if child.node not in seen:
            ...
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from object_node.config import NodeConfig
from object_node.model import JSObject, ValueKind, kind_of
from object_node.naming import object_name, to_display, type_name

__all__ = ["FieldEntry", "SubNode", "ValueNode"]

# Process-wide source of node ids; next() on a count is atomic under the GIL.
_node_ids = itertools.count()


@dataclass(frozen=True, slots=True)
class FieldEntry:
    """One displayable field of a node.

    Attributes:
        name:  Property key, or the prototype label for the supertype link.
        value: The field's value already converted to its display string.
        id:    Positional id (``f0``, ``f1``, ...) or the prototype id.
    """

    name: str
    value: str
    id: str


@dataclass(frozen=True, slots=True)
class SubNode:
    """A child node together with the id and name of the field it came from."""

    node: ValueNode
    id: str
    name: str


class ValueNode:
    """Wraps one model value and the name it was reached under."""

    __slots__ = ("_config", "_id", "_supplied_name", "_value")

    def __init__(
        self, name: str, value: Any, config: NodeConfig | None = None
    ) -> None:
        kind_of(value)
        self._id = f"node{next(_node_ids)}"
        self._supplied_name = name
        self._value = value
        self._config = config or NodeConfig()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def supplied_name(self) -> str:
        return self._supplied_name

    @property
    def value(self) -> Any:
        return self._value

    @property
    def config(self) -> NodeConfig:
        return self._config

    # ------------------------------------------------------------------
    # Identity and naming
    # ------------------------------------------------------------------

    def id(self) -> str:
        """Opaque token unique to this node instance."""
        return self._id

    def equals(self, other: ValueNode) -> bool:
        """True when both nodes wrap the same value, whatever their names.

        Records and callables match by identity. Primitives are their own value,
        so they match by kind and ``==``; NaN never matches, not even itself.
        """
        if isinstance(self._value, JSObject) or isinstance(other._value, JSObject):
            return self._value is other._value
        return kind_of(self._value) is kind_of(other._value) and bool(
            self._value == other._value
        )

    def name(self) -> str:
        """Structural name of the value, or the supplied name when it has none."""
        name = object_name(self._value, self._config)
        return self._supplied_name if name is None else name

    def type(self) -> str:
        """Type label derived from the supertype's constructor."""
        return type_name(self._value, self._config)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def fields(self) -> list[FieldEntry]:
        """Own enumerable fields in enumeration order, with display values."""
        return [
            FieldEntry(name=key, value=to_display(value, self._config), id=field_id)
            for field_id, key, value in self._enumerate()
        ]

    def supertype_link(self) -> FieldEntry | None:
        """Entry for the supertype link, or None when there is no supertype."""
        proto = self._supertype()
        if proto is None:
            return None
        return FieldEntry(
            name=self._config.prototype_label,
            value=to_display(proto, self._config),
            id=self._config.prototype_id,
        )

    # ------------------------------------------------------------------
    # Sub-nodes
    # ------------------------------------------------------------------

    def sub_nodes(self) -> Iterator[SubNode]:
        """Yield a child for every object or callable field, then the supertype.

        Primitive, null and undefined fields are skipped. The id and name of
        each child match the entry ``fields()`` reports for the same field.
        """
        for field_id, key, value in self._enumerate():
            if kind_of(value) in (ValueKind.FUNCTION, ValueKind.OBJECT):
                yield SubNode(self._child(key, value), field_id, key)

        proto = self._supertype()
        if proto is not None:
            label = self._config.prototype_label
            yield SubNode(self._child(label, proto), self._config.prototype_id, label)

    def for_each_sub_node(self, callback: Callable[[ValueNode, str, str], Any]) -> None:
        """Call ``callback(node, id, name)`` for each sub-node, in order."""
        for sub in self.sub_nodes():
            callback(sub.node, sub.id, sub.name)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _enumerate(self) -> Iterator[tuple[str, str, Any]]:
        if not isinstance(self._value, JSObject):
            return
        for index, (key, value) in enumerate(self._value.own_enumerable_items()):
            yield self._config.field_id(index), key, value

    def _supertype(self) -> JSObject | None:
        if not isinstance(self._value, JSObject):
            return None
        return self._value.proto

    def _child(self, key: str, value: Any) -> ValueNode:
        name = f"{self.name()}.{key}" if self._config.qualify_child_names else key
        return ValueNode(name, value, self._config)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueNode):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if isinstance(self._value, JSObject):
            return id(self._value)
        return hash((kind_of(self._value), self._value))

    def __repr__(self) -> str:
        return (
            f"ValueNode({self._supplied_name!r}, "
            f"{to_display(self._value, self._config)})"
        )
