"""
Loop snapshot.

Flattened, display-friendly view of a LoopState, so that a UI does not
need to match on the state variants itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .loop_state import Idle, LoopState, LoopStatus, Paused, Playing, Ready, Recording
from .timing import Nanos, to_seconds


@dataclass(frozen=True)
class LoopSnapshot:
    """Loop status at one instant."""

    status: LoopStatus
    track_count: int
    cycle_length: Nanos = 0
    ticks_remaining: int | None = None  # Ready only
    current_offset: Nanos | None = None  # Recording / Playing / Paused
    saved_offset: Nanos | None = None  # Paused only
    was_recording: bool | None = None  # Paused only

    @classmethod
    def from_state(cls, state: LoopState, track_count: int, now: Nanos) -> LoopSnapshot:
        """
        Build a snapshot.

        Args:
            state: Engine state
            track_count: Number of committed tracks
            now: Clock reading used for the running offset
        """
        match state:
            case Ready(ticks_remaining=ticks, cycle_length=length):
                return cls(
                    status=state.status,
                    track_count=track_count,
                    cycle_length=length,
                    ticks_remaining=ticks,
                )
            case Recording(start_time=anchor, cycle_length=length) | Playing(
                cycle_start=anchor, cycle_length=length
            ):
                return cls(
                    status=state.status,
                    track_count=track_count,
                    cycle_length=length,
                    current_offset=max(0, now - anchor),
                )
            case Paused(cycle_length=length, saved_offset=saved, was_recording=was_recording):
                return cls(
                    status=state.status,
                    track_count=track_count,
                    cycle_length=length,
                    current_offset=saved,
                    saved_offset=saved,
                    was_recording=was_recording,
                )
            case Idle():
                return cls(status=state.status, track_count=track_count)
        raise TypeError(f"Unknown loop state: {state!r}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for publishing (durations in seconds)."""

        def seconds(value: Nanos | None) -> float | None:
            return None if value is None else to_seconds(value)

        return {
            "status": self.status.value,
            "track_count": self.track_count,
            "cycle_length": to_seconds(self.cycle_length),
            "ticks_remaining": self.ticks_remaining,
            "current_offset": seconds(self.current_offset),
            "saved_offset": seconds(self.saved_offset),
            "was_recording": self.was_recording,
        }
