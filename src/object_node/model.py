"""Dynamic value model inspected by ValueNode.

Values are either primitives or records:

- Primitives: ``Undefined``, ``None`` (null), bool, int, float, str, and the
  numpy scalar counterparts of bool/int/float.
- ``JSObject``: a record with an optional supertype (``proto``) and an ordered
  mapping of own properties, each carrying an ``enumerable`` flag.
- ``JSFunction``: a callable record with a declared name. Creating one also
  creates its link-target object (the ``prototype`` property), whose
  ``constructor`` property points back at the function.

The module builds a small realm at import time (``Object``, ``Function``,
``Array`` and their prototypes) wired the same way a JavaScript engine wires
its built-ins.

Example::

    from object_node.model import construct, function

    MyClass = function("MyClass")
    instance = construct(MyClass)
    instance.set("a", 1)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

import numpy as np

__all__ = [
    "ARRAY_PROTOTYPE",
    "FUNCTION_PROTOTYPE",
    "OBJECT_PROTOTYPE",
    "Array",
    "Function",
    "JSFunction",
    "JSObject",
    "Object",
    "Property",
    "Undefined",
    "ValueKind",
    "construct",
    "create",
    "function",
    "kind_of",
    "literal",
]


class ValueKind(StrEnum):
    """The seven kinds of value the model knows about.

    StrEnum values are the lowercased member names.
    """

    UNDEFINED = auto()
    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    FUNCTION = auto()
    OBJECT = auto()


class _Undefined:
    """Singleton for the absent value, distinct from ``None`` (null)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False


Undefined = _Undefined()


def kind_of(value: Any) -> ValueKind:
    """Classify ``value`` as one of the model's value kinds.

    Raises:
        TypeError: If ``value`` is not part of the model (e.g. a Python list).
    """
    if value is Undefined:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float, np.integer, np.floating)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, JSFunction):
        return ValueKind.FUNCTION
    if isinstance(value, JSObject):
        return ValueKind.OBJECT

    msg = f"Unsupported value type: {type(value)!r}"
    raise TypeError(msg)


@dataclass(slots=True)
class Property:
    """An own property slot: the stored value and whether it is enumerable."""

    value: Any
    enumerable: bool = True


class JSObject:
    """A record with an optional supertype and ordered own properties.

    Equality and hashing are inherited from ``object`` (identity), so two
    records with the same contents are still different values.

    The supertype is fixed at construction and read-only afterwards, so a
    supertype chain can never loop back on itself.
    """

    __slots__ = ("_props", "_proto")

    def __init__(self, proto: JSObject | None = None) -> None:
        self._proto = proto
        self._props: dict[str, Property] = {}

    @property
    def proto(self) -> JSObject | None:
        return self._proto

    def get_own(self, key: str) -> Property | None:
        return self._props.get(key)

    def has_own(self, key: str) -> bool:
        return key in self._props

    def set(self, key: str, value: Any, *, enumerable: bool = True) -> None:
        """Define or overwrite an own property.

        Overwriting keeps the key's original position in enumeration order.

        Raises:
            TypeError: If ``value`` is not part of the model.
        """
        kind_of(value)
        existing = self._props.get(key)
        if existing is None:
            self._props[key] = Property(value, enumerable)
        else:
            existing.value = value
            existing.enumerable = enumerable

    def lookup(self, key: str) -> Any:
        """Return the first own value for ``key`` along the supertype chain.

        Returns ``Undefined`` when no record in the chain owns ``key``.
        """
        current: JSObject | None = self
        while current is not None:
            prop = current.get_own(key)
            if prop is not None:
                return prop.value
            current = current.proto
        return Undefined

    def own_enumerable_items(self) -> Iterator[tuple[str, Any]]:
        for key, prop in self._props.items():
            if prop.enumerable:
                yield key, prop.value

    def own_keys(self) -> list[str]:
        return list(self._props)


class JSFunction(JSObject):
    """A callable record.

    Args:
        name: Declared name; empty for anonymous functions.
        proto: Supertype; defaults to ``FUNCTION_PROTOTYPE``.
        with_prototype: When True (default), create the link-target object
            and wire the ``prototype``/``constructor`` pair.
    """

    __slots__ = ("name",)

    def __init__(
        self,
        name: str = "",
        *,
        proto: JSObject | None = None,
        with_prototype: bool = True,
    ) -> None:
        super().__init__(FUNCTION_PROTOTYPE if proto is None else proto)
        self.name = name
        if with_prototype:
            link_target = JSObject(OBJECT_PROTOTYPE)
            link_target.set("constructor", self, enumerable=False)
            self.set("prototype", link_target, enumerable=False)

    def __repr__(self) -> str:
        return f"JSFunction({self.name!r})"


# ---------------------------------------------------------------------------
# Realm
# ---------------------------------------------------------------------------


def _link(constructor: JSFunction, link_target: JSObject) -> None:
    constructor.set("prototype", link_target, enumerable=False)
    link_target.set("constructor", constructor, enumerable=False)


OBJECT_PROTOTYPE = JSObject(None)
FUNCTION_PROTOTYPE = JSFunction("", proto=OBJECT_PROTOTYPE, with_prototype=False)
ARRAY_PROTOTYPE = JSObject(OBJECT_PROTOTYPE)

Object = JSFunction("Object", with_prototype=False)
Function = JSFunction("Function", with_prototype=False)
Array = JSFunction("Array", with_prototype=False)

_link(Object, OBJECT_PROTOTYPE)
_link(Function, FUNCTION_PROTOTYPE)
_link(Array, ARRAY_PROTOTYPE)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def create(proto: JSObject | None, fields: Mapping[str, Any] | None = None) -> JSObject:
    """Create a record with the given supertype and enumerable own fields."""
    obj = JSObject(proto)
    for key, value in (fields or {}).items():
        obj.set(key, value)
    return obj


def literal(fields: Mapping[str, Any] | None = None) -> JSObject:
    """Create a record whose supertype is ``Object.prototype``."""
    return create(OBJECT_PROTOTYPE, fields)


def function(name: str = "") -> JSFunction:
    return JSFunction(name)


def construct(constructor: JSFunction) -> JSObject:
    """Instantiate ``constructor``.

    The new record's supertype is the constructor's current ``prototype``
    property, or ``Object.prototype`` when that property is not a record.
    """
    link_target = constructor.lookup("prototype")
    if isinstance(link_target, JSObject):
        return JSObject(link_target)
    return JSObject(OBJECT_PROTOTYPE)
