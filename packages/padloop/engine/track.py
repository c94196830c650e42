"""
Loop tracks and recorded events.

A LoopTrack is one committed layer of the loop: pad triggers ordered by
their offset inside the cycle, plus a cursor pointing at the next event
that has not yet been replayed in the current cycle.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Any, Iterator

from .timing import Nanos, to_seconds


@dataclass(frozen=True, slots=True)
class RecordedEvent:
    """A single pad trigger captured during recording."""

    key: str
    offset: Nanos  # From the track's recording start, < cycle length

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"key": self.key, "offset": to_seconds(self.offset)}


@dataclass
class LoopTrack:
    """
    Committed loop layer.

    Events never change after commit; only the replay cursor moves.
    """

    events: tuple[RecordedEvent, ...]
    next_index: int = 0

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[RecordedEvent]:
        return iter(self.events)

    def due_events(self, elapsed: Nanos) -> list[RecordedEvent]:
        """
        Pop every event whose offset has been reached.

        Advances the cursor past each returned event.

        Args:
            elapsed: Time since the start of the current cycle

        Returns:
            Events in offset order (may be empty)
        """
        due: list[RecordedEvent] = []
        while self.next_index < len(self.events):
            event = self.events[self.next_index]
            if event.offset > elapsed:
                break
            due.append(event)
            self.next_index += 1
        return due

    def reset(self) -> None:
        """Rewind the cursor to the start of the cycle."""
        self.next_index = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "events": [event.to_dict() for event in self.events],
            "next_index": self.next_index,
        }


@dataclass
class OverdubBuffer:
    """Pending, uncommitted track being recorded."""

    _events: list[RecordedEvent] = field(default_factory=list)
    _offsets: list[Nanos] = field(default_factory=list, repr=False)

    def __len__(self) -> int:
        return len(self._events)

    def add(self, event: RecordedEvent) -> None:
        """Insert keeping offset order (stable for equal offsets)."""
        index = bisect.bisect_right(self._offsets, event.offset)
        self._offsets.insert(index, event.offset)
        self._events.insert(index, event)

    def clear(self) -> None:
        self._events.clear()
        self._offsets.clear()

    @property
    def events(self) -> tuple[RecordedEvent, ...]:
        return tuple(self._events)

    def take(self) -> LoopTrack | None:
        """
        Hand over the recorded events as a new track and empty the buffer.

        Returns:
            The new LoopTrack, or None if nothing was recorded
        """
        if not self._events:
            return None
        track = LoopTrack(events=tuple(self._events))
        self.clear()
        return track
