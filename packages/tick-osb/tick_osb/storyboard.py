"""Storyboard: assembles sprite blocks into the renderer's [Events] section."""
from __future__ import annotations

from pathlib import Path

from tick_osb.sprite import Sprite
from tick_osb.types import Layer


class Storyboard:

    def __init__(self) -> None:
        self._sprites: list[Sprite] = []

    def add(self, sprite: Sprite, layer: Layer | None = None) -> Sprite:
        """Add a sprite, optionally moving it to ``layer`` first.

        Adding a sprite that is already on the storyboard only applies
        ``layer``; each sprite is emitted once.
        """
        if layer is not None:
            sprite.set_layer(layer)
        if not any(s is sprite for s in self._sprites):
            self._sprites.append(sprite)
        return sprite

    def sprites(self, layer: Layer | None = None) -> list[Sprite]:
        if layer is None:
            return list(self._sprites)
        return [s for s in self._sprites if s.layer is layer]

    @property
    def start_time(self) -> int | None:
        starts = [s.start_time for s in self._sprites if s.start_time is not None]
        return min(starts) if starts else None

    @property
    def end_time(self) -> int | None:
        ends = [s.end_time for s in self._sprites if s.end_time is not None]
        return max(ends) if ends else None

    def render(self) -> str:
        lines = ["[Events]\n", "//Background and Video events\n"]
        for index, layer in enumerate(Layer):
            lines.append(f"//Storyboard Layer {index} ({layer.value})\n")
            lines.extend(sprite.render() for sprite in self.sprites(layer))
        lines.append("//Storyboard Sound Samples\n")
        return "".join(lines)

    def save(self, path: str | Path) -> Path:
        """Write the rendered document to ``path`` and return it as a Path."""
        target = Path(path)
        target.write_text(self.render(), encoding="utf-8")
        return target

    def __len__(self) -> int:
        return len(self._sprites)
