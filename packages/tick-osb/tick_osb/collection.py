"""EventCollection: a sprite's events grouped by kind."""
from __future__ import annotations

from collections.abc import Iterator

from tick_osb.events import Event, EventKind


class EventCollection:
    """Holds one insertion-ordered list per event kind.

    Rendering walks the groups in ``EventKind`` order (move, fade, rotate,
    scale) so events of one kind stay contiguous in the output.
    """

    def __init__(self) -> None:
        self._groups: dict[EventKind, list[Event]] = {kind: [] for kind in EventKind}

    def push(self, event: Event) -> None:
        self._groups[event.kind].append(event)

    def of_kind(self, kind: EventKind) -> list[Event]:
        """Return a copy of the events of one kind, in insertion order."""
        return list(self._groups[kind])

    def to_text(self) -> str:
        return "".join(event.to_line() + "\n" for event in self)

    def __iter__(self) -> Iterator[Event]:
        for kind in EventKind:
            yield from self._groups[kind]

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups.values())
