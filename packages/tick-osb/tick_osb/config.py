"""Sprite configuration dataclass and the adapter for legacy call shapes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tick_osb.types import EventShapeError, Layer, Origin, Vec2
from tick_osb.values import DEFAULT_POSITION, is_number, is_vec2, vec2


@dataclass(frozen=True)
class SpriteConfig:
    """Immutable placement of a sprite.

    Attributes:
        path: Image path as the renderer should resolve it.
        origin: Anchor point of the image (default ``Origin.CENTRE``).
        position: Initial (x, y) in canvas coordinates (default centre, 320x240).
        layer: Render layer (default ``Layer.BACKGROUND``).
    """

    path: str
    origin: Origin = Origin.CENTRE
    position: Vec2 = DEFAULT_POSITION
    layer: Layer = Layer.BACKGROUND

    def __post_init__(self) -> None:
        if not isinstance(self.path, str):
            raise EventShapeError(
                (self.path,), f"path must be a str, got {type(self.path).__name__}"
            )
        if not isinstance(self.origin, Origin):
            raise EventShapeError(
                (self.origin,), f"origin must be an Origin, got {self.origin!r}"
            )
        if not isinstance(self.layer, Layer):
            raise EventShapeError(
                (self.layer,), f"layer must be a Layer, got {self.layer!r}"
            )
        object.__setattr__(self, "position", vec2(self.position))


def as_sprite_config(*args: Any, **overrides: Any) -> SpriteConfig:
    """Map any accepted sprite construction shape onto a SpriteConfig.

    Positional shapes: ``(path)``, ``(origin, path)``, ``(path, pos)``,
    ``(path, x, y)``, ``(origin, path, pos)``, ``(origin, path, x, y)``,
    or a single ``SpriteConfig``. Keyword ``origin``, ``position`` and
    ``layer`` override the positional values.

    Raises:
        EventShapeError: If the arguments match none of the shapes.
    """
    if len(args) == 1 and isinstance(args[0], SpriteConfig):
        config = args[0]
        fields: dict[str, Any] = {
            "path": config.path,
            "origin": config.origin,
            "position": config.position,
            "layer": config.layer,
        }
    else:
        fields = _fields_from_args(args)
    unknown = set(overrides) - {"origin", "position", "layer"}
    if unknown:
        raise EventShapeError(args, f"Unknown sprite options: {sorted(unknown)}")
    fields.update(overrides)
    return SpriteConfig(**fields)


def _fields_from_args(args: tuple[Any, ...]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    rest = args
    if rest and isinstance(rest[0], Origin):
        fields["origin"], rest = rest[0], rest[1:]
    if not rest or not isinstance(rest[0], str):
        raise EventShapeError(args, f"No sprite shape accepts {args!r}")
    fields["path"], rest = rest[0], rest[1:]
    if len(rest) == 1 and is_vec2(rest[0]):
        fields["position"] = vec2(rest[0])
    elif len(rest) == 2 and all(is_number(c) for c in rest):
        fields["position"] = vec2(rest[0], rest[1])
    elif rest:
        raise EventShapeError(args, f"No sprite shape accepts {args!r}")
    return fields
