"""Shared vocabularies and type aliases for tick-osb."""
from __future__ import annotations

from enum import Enum
from typing import Any, Union

Number = Union[int, float]
Vec2 = tuple[Number, Number]


class Layer(Enum):
    """Render layer of a sprite. Definition order is the document order."""

    BACKGROUND = "Background"
    FAIL = "Fail"
    PASS = "Pass"
    FOREGROUND = "Foreground"
    OVERLAY = "Overlay"

    def __str__(self) -> str:
        return self.value


class Origin(Enum):
    """Anchor point of a sprite image relative to its position."""

    TOP_LEFT = "TopLeft"
    CENTRE = "Centre"
    CENTRE_LEFT = "CentreLeft"
    TOP_RIGHT = "TopRight"
    BOTTOM_CENTRE = "BottomCentre"
    TOP_CENTRE = "TopCentre"
    CUSTOM = "Custom"
    CENTRE_RIGHT = "CentreRight"
    BOTTOM_LEFT = "BottomLeft"
    BOTTOM_RIGHT = "BottomRight"

    def __str__(self) -> str:
        return self.value


class EventShapeError(TypeError):
    """Raised when arguments match no accepted construction shape.

    Covers both event shapes and sprite configuration (``SpriteConfig``
    fields and ``as_sprite_config`` call shapes).
    """

    def __init__(self, args: tuple[Any, ...], message: str) -> None:
        self.shape = args
        super().__init__(message)
