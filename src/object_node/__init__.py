"""Object node - identity-aware descriptions of values in an object graph."""

from __future__ import annotations

import logging

from object_node.api import describe, display, inspect_value
from object_node.config import NodeConfig
from object_node.model import (
    ARRAY_PROTOTYPE,
    FUNCTION_PROTOTYPE,
    OBJECT_PROTOTYPE,
    Array,
    Function,
    JSFunction,
    JSObject,
    Object,
    Undefined,
    ValueKind,
    construct,
    create,
    function,
    literal,
)
from object_node.node import FieldEntry, SubNode, ValueNode
from object_node.result import NodeDescription

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ARRAY_PROTOTYPE",
    "FUNCTION_PROTOTYPE",
    "OBJECT_PROTOTYPE",
    "Array",
    "FieldEntry",
    "Function",
    "JSFunction",
    "JSObject",
    "NodeConfig",
    "NodeDescription",
    "Object",
    "SubNode",
    "Undefined",
    "ValueKind",
    "ValueNode",
    "construct",
    "create",
    "describe",
    "display",
    "function",
    "inspect_value",
    "literal",
]
