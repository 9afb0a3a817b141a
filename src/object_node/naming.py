"""Value-driven naming: callable names, object names, type labels, display form.

These functions work on bare model values. ValueNode builds on them, but a
renderer can also call them directly to label a value without wrapping it.

Name resolution for an object (first match wins):

1. The root function prototype: ``"Function.prototype"``. It is itself a
   nameless callable, so it is tested before rule 2.
2. A callable: ``"name()"``, or ``"<anon>()"`` when nameless.
3. A record with an *own* ``constructor`` property holding a callable whose
   own ``prototype`` property is this very record: ``"Name.prototype"``.
4. Nothing: the caller falls back (to the supplied name, or to ``{Type}``).
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any

import numpy as np

from object_node.config import NodeConfig
from object_node.model import (
    FUNCTION_PROTOTYPE,
    Function,
    JSFunction,
    JSObject,
    ValueKind,
    kind_of,
)

__all__ = ["format_number", "function_name", "object_name", "to_display", "type_name"]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = NodeConfig()

# JavaScript writes magnitudes in [1e-6, 1e21) without an exponent
_SMALL_THRESHOLD = 1e-6
_EXPONENT_THRESHOLD = 1e21


def function_name(fn: JSFunction, config: NodeConfig | None = None) -> str:
    """Return the declared name of ``fn``, or the anonymous label."""
    config = config or _DEFAULT_CONFIG
    return fn.name or config.anonymous_label


def object_name(value: Any, config: NodeConfig | None = None) -> str | None:
    """Return the structural name of ``value``, or None when it has none."""
    config = config or _DEFAULT_CONFIG

    if value is FUNCTION_PROTOTYPE:
        return f"{function_name(Function, config)}.prototype"

    if isinstance(value, JSFunction):
        return f"{function_name(value, config)}()"

    if isinstance(value, JSObject):
        own = value.get_own("constructor")
        if own is None or not isinstance(own.value, JSFunction):
            return None
        constructor = own.value
        link_target = constructor.get_own("prototype")
        if link_target is None or link_target.value is not value:
            logger.debug(
                "constructor %r does not link back to its holder; no structural name",
                constructor,
            )
            return None
        return f"{function_name(constructor, config)}.prototype"

    return None


def type_name(value: Any, config: NodeConfig | None = None) -> str:
    """Return the type label of ``value``.

    The label comes from the ``constructor`` property found on the value's
    supertype or further up that supertype's chain.
    """
    config = config or _DEFAULT_CONFIG

    if not isinstance(value, JSObject) or value.proto is None:
        return config.null_type_label

    constructor = value.proto.lookup("constructor")
    if not isinstance(constructor, JSFunction):
        logger.debug(
            "supertype constructor is %r, not a callable; type is anonymous",
            constructor,
        )
        return config.anonymous_label
    return function_name(constructor, config)


def format_number(number: Any) -> str:
    """Format a number the way JavaScript's ``String(number)`` does.

    Integral values drop their fraction (``1.0`` -> ``"1"``, ``-0.0`` -> ``"0"``);
    non-finite values become ``NaN``, ``Infinity`` and ``-Infinity``. Digits are
    the shortest round-trip form; magnitudes in ``[1e-6, 1e21)`` are written out
    in full, anything else uses an unpadded exponent (``1e-7``, ``1e+21``).
    """
    integral = isinstance(number, (int, np.integer))
    if integral and abs(int(number)) < _EXPONENT_THRESHOLD:
        return str(int(number))

    v = float(number)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == 0:
        return "0"

    digits = repr(v)
    if _SMALL_THRESHOLD <= abs(v) < _EXPONENT_THRESHOLD:
        text = format(Decimal(digits), "f")
        return text[:-2] if text.endswith(".0") else text

    # outside that range repr always carries an exponent, e.g. "1.5e-07"
    mantissa, _, exponent = digits.partition("e")
    power = int(exponent)
    sign = "+" if power > 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"


def to_display(value: Any, config: NodeConfig | None = None) -> str:
    """Convert any model value to the string shown in a field.

    Raises:
        TypeError: If ``value`` is not part of the model.
    """
    config = config or _DEFAULT_CONFIG
    kind = kind_of(value)

    if kind is ValueKind.UNDEFINED:
        return "undefined"
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return format_number(value)
    if kind is ValueKind.STRING:
        return f'"{value}"'

    name = object_name(value, config)
    if name is not None:
        return name
    return f"{{{type_name(value, config)}}}"
