"""Sprite: a positioned image plus its timed events."""
from __future__ import annotations

from typing import Any

from tick_osb.collection import EventCollection
from tick_osb.config import SpriteConfig, as_sprite_config
from tick_osb.events import Event, EventKind, make_event
from tick_osb.types import Layer, Number, Origin, Vec2
from tick_osb.values import format_number


class Sprite:
    """A storyboard sprite.

    Construct with any shape ``as_sprite_config`` accepts, e.g.
    ``Sprite("sb/star.png")``, ``Sprite(Origin.TOP_LEFT, "sb/bg.png", 0, 0)``
    or ``Sprite(SpriteConfig(path="sb/star.png", layer=Layer.FOREGROUND))``.

    Each ``append_*`` call widens the sprite's ``(start_time, end_time)``
    window with the event's own start and end fields, stamps the event
    with ``current_depth`` and stores it in its kind's group.
    """

    def __init__(self, *args: Any, **options: Any) -> None:
        config = as_sprite_config(*args, **options)
        self._path = config.path
        self._origin = config.origin
        self._position = config.position
        self._layer = config.layer
        self._events = EventCollection()
        self._start_time: int | None = None
        self._end_time: int | None = None
        self.current_depth = 0

    @property
    def config(self) -> SpriteConfig:
        return SpriteConfig(
            path=self._path,
            origin=self._origin,
            position=self._position,
            layer=self._layer,
        )

    @property
    def path(self) -> str:
        return self._path

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def layer(self) -> Layer:
        return self._layer

    @property
    def position(self) -> Vec2:
        return self._position

    @property
    def x(self) -> Number:
        """Initial x position. Not the position at any later time."""
        return self._position[0]

    @property
    def y(self) -> Number:
        """Initial y position. Not the position at any later time."""
        return self._position[1]

    @property
    def events(self) -> EventCollection:
        return self._events

    @property
    def start_time(self) -> int | None:
        """Earliest event start seen, or None before the first append."""
        return self._start_time

    @property
    def end_time(self) -> int | None:
        """Latest event end seen, or None before the first append."""
        return self._end_time

    def set_layer(self, layer: Layer) -> None:
        self._layer = layer

    def append_move(self, *args: Any) -> Event:
        return self._append(EventKind.MOVE, args)

    def append_fade(self, *args: Any) -> Event:
        return self._append(EventKind.FADE, args)

    def append_rotate(self, *args: Any) -> Event:
        return self._append(EventKind.ROTATE, args)

    def append_scale(self, *args: Any) -> Event:
        return self._append(EventKind.SCALE, args)

    def _append(self, kind: EventKind, args: tuple[Any, ...]) -> Event:
        event = make_event(kind, *args)
        self._widen(event.start_time, event.end_time)
        event.set_depth(self.current_depth)
        self._events.push(event)
        return event

    def _widen(self, start: int, end: int) -> None:
        # Raw start/end fields, not min/max of the pair.
        if self._start_time is None or start < self._start_time:
            self._start_time = start
        if self._end_time is None or end > self._end_time:
            self._end_time = end

    def render(self) -> str:
        header = (
            f'Sprite,{self._layer.value},{self._origin.value},"{self._path}",'
            f"{format_number(self.x)},{format_number(self.y)}"
        )
        return f"{header}\n{self._events.to_text()}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Sprite(path={self._path!r}, origin={self._origin}, "
            f"position={self._position!r}, layer={self._layer}, events={len(self._events)})"
        )
