"""tick-osb - Storyboard sprite scripting for the osu! storyboard format."""
from __future__ import annotations

from tick_osb.collection import EventCollection
from tick_osb.config import SpriteConfig, as_sprite_config
from tick_osb.easing import Easing
from tick_osb.events import (
    DynamicEvent,
    Event,
    EventKind,
    StaticEvent,
    fade,
    make_event,
    move,
    rotate,
    scale,
)
from tick_osb.sprite import Sprite
from tick_osb.storyboard import Storyboard
from tick_osb.types import EventShapeError, Layer, Number, Origin, Vec2

__all__ = [
    "DynamicEvent",
    "Easing",
    "Event",
    "EventCollection",
    "EventKind",
    "EventShapeError",
    "Layer",
    "Number",
    "Origin",
    "Sprite",
    "SpriteConfig",
    "StaticEvent",
    "Storyboard",
    "Vec2",
    "as_sprite_config",
    "fade",
    "make_event",
    "move",
    "rotate",
    "scale",
]
