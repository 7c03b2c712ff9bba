"""Numeric coercion and formatting helpers operating on Number and Vec2."""
from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from tick_osb.types import EventShapeError, Number, Vec2

DEFAULT_POSITION: Vec2 = (320, 240)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_time(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_vec2(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, str)
        and len(value) == 2
        and all(is_number(c) for c in value)
    )


def number(value: Any) -> Number:
    """Return ``value`` unchanged if it is an int or float.

    Raises:
        EventShapeError: If ``value`` is not numeric (bools are rejected).
    """
    if not is_number(value):
        raise EventShapeError(
            (value,), f"Expected a number, got {type(value).__name__}"
        )
    return value


def vec2(*args: Any) -> Vec2:
    """Build a Vec2 from ``(x, y)`` or from a single 2-item sequence."""
    if len(args) == 1 and is_vec2(args[0]):
        x, y = args[0]
        return (x, y)
    if len(args) == 2:
        return (number(args[0]), number(args[1]))
    raise EventShapeError(args, f"Cannot build a 2D vector from {args!r}")


def format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        text = repr(value)
        if "e" in text:
            # Fixed point, never exponent notation.
            return format(Decimal(text), "f")
        return text
    return str(value)


def format_value(value: Number | Vec2) -> str:
    if isinstance(value, tuple):
        return ",".join(format_number(c) for c in value)
    return format_number(value)
