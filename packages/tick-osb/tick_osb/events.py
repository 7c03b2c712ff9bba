"""Timed transformation events and the shape adapters that build them.

Every event kind (move, fade, rotate, scale) comes in two shapes:

- ``StaticEvent``: a single value at a single time, always linear.
- ``DynamicEvent``: interpolated from a start value to an end value over
  ``[start_time, end_time]`` with an explicit easing.

Unordered ranges (``start_time > end_time``) are accepted and rendered
as given.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

from tick_osb.easing import Easing
from tick_osb.types import EventShapeError, Number, Vec2
from tick_osb.values import format_value, is_time, number, vec2

Value = Union[Number, Vec2]


class EventKind(Enum):
    """Event family. The value is the command token; order is the group order."""

    MOVE = "M"
    FADE = "F"
    ROTATE = "R"
    SCALE = "S"


@dataclass(frozen=True)
class StaticEvent:
    kind: EventKind
    time: int
    value: Value
    depth: int = 0

    @property
    def easing(self) -> Easing:
        return Easing.LINEAR

    @property
    def start_time(self) -> int:
        return self.time

    @property
    def end_time(self) -> int:
        return self.time

    def set_depth(self, depth: int) -> None:
        # Depth is the only field that changes after creation.
        object.__setattr__(self, "depth", depth)

    def to_line(self) -> str:
        return (
            f"{' ' * self.depth} {self.kind.value},{Easing.LINEAR.id()},"
            f"{self.time},,{format_value(self.value)}"
        )


@dataclass(frozen=True)
class DynamicEvent:
    kind: EventKind
    easing: Easing
    start_time: int
    end_time: int
    start_value: Value
    end_value: Value
    depth: int = 0

    def set_depth(self, depth: int) -> None:
        # Depth is the only field that changes after creation.
        object.__setattr__(self, "depth", depth)

    def to_line(self) -> str:
        return (
            f"{' ' * self.depth} {self.kind.value},{self.easing.id()},"
            f"{self.start_time},{self.end_time},"
            f"{format_value(self.start_value)},{format_value(self.end_value)}"
        )


Event = Union[StaticEvent, DynamicEvent]


def _time(kind: EventKind, args: tuple[Any, ...], value: Any) -> int:
    if not is_time(value):
        raise EventShapeError(
            args, f"{kind.name.lower()} time must be an int, got {value!r}"
        )
    return value


def _value(kind: EventKind, value: Any) -> Value:
    if kind is EventKind.MOVE:
        return vec2(value)
    return number(value)


def _join_components(args: tuple[Any, ...]) -> tuple[Any, ...]:
    # (time, x, y) and (start, end, x1, y1, x2, y2)
    if len(args) == 3:
        return (args[0], (args[1], args[2]))
    if len(args) == 6:
        return (args[0], args[1], (args[2], args[3]), (args[4], args[5]))
    return args


def make_event(kind: EventKind, *args: Any) -> Event:
    """Normalize one of the accepted argument shapes into an event of ``kind``.

    Accepted shapes:
        ``(time, value)`` -> static, linear.
        ``(start_time, end_time, start_value, end_value)`` -> dynamic, linear.
        ``(easing, start_time, end_time, start_value, end_value)`` -> dynamic.

    Move values are 2D vectors and may also be given as split components,
    e.g. ``(time, x, y)``. A single tuple argument is unpacked, and an
    event of the same kind is copied so the caller keeps its own instance.

    Raises:
        EventShapeError: If the arguments match none of the shapes.
    """
    if len(args) == 1:
        (arg,) = args
        if isinstance(arg, (StaticEvent, DynamicEvent)):
            if arg.kind is not kind:
                raise EventShapeError(
                    args,
                    f"Expected a {kind.name.lower()} event, got {arg.kind.name.lower()}",
                )
            return replace(arg)
        if isinstance(arg, tuple):
            args = arg

    given = args
    easing: Easing | None = None
    if args and isinstance(args[0], Easing):
        easing, args = args[0], args[1:]

    if kind is EventKind.MOVE:
        args = _join_components(args)

    if len(args) == 2 and easing is None:
        return StaticEvent(
            kind=kind,
            time=_time(kind, given, args[0]),
            value=_value(kind, args[1]),
        )
    if len(args) == 4:
        return DynamicEvent(
            kind=kind,
            easing=Easing.LINEAR if easing is None else easing,
            start_time=_time(kind, given, args[0]),
            end_time=_time(kind, given, args[1]),
            start_value=_value(kind, args[2]),
            end_value=_value(kind, args[3]),
        )
    raise EventShapeError(
        given, f"No {kind.name.lower()} event shape accepts {given!r}"
    )


def move(*args: Any) -> Event:
    return make_event(EventKind.MOVE, *args)


def fade(*args: Any) -> Event:
    return make_event(EventKind.FADE, *args)


def rotate(*args: Any) -> Event:
    return make_event(EventKind.ROTATE, *args)


def scale(*args: Any) -> Event:
    return make_event(EventKind.SCALE, *args)
