"""
Loop state variants.

LoopState is a closed union of frozen dataclasses. The engine matches on the
concrete variant; each variant carries only the fields that make sense for
it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .timing import Nanos


class LoopStatus(Enum):
    """Loop status enumeration"""
    IDLE = "idle"
    READY = "ready"
    RECORDING = "recording"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(frozen=True, slots=True)
class Idle:
    """Nothing armed, nothing recorded."""

    status: ClassVar[LoopStatus] = LoopStatus.IDLE


@dataclass(frozen=True, slots=True)
class Ready:
    """Metronome count-in running."""

    ticks_remaining: int
    cycle_length: Nanos

    status: ClassVar[LoopStatus] = LoopStatus.READY


@dataclass(frozen=True, slots=True)
class Recording:
    """Capturing pad triggers into the overdub buffer."""

    start_time: Nanos
    cycle_length: Nanos

    status: ClassVar[LoopStatus] = LoopStatus.RECORDING


@dataclass(frozen=True, slots=True)
class Playing:
    """Replaying committed tracks every cycle."""

    cycle_start: Nanos
    cycle_length: Nanos

    status: ClassVar[LoopStatus] = LoopStatus.PLAYING


@dataclass(frozen=True, slots=True)
class Paused:
    """
    Playback or recording frozen at a phase.

    When was_recording is True, cycle_start holds the interrupted
    recording's start_time.
    """

    cycle_start: Nanos
    cycle_length: Nanos
    saved_offset: Nanos
    was_recording: bool
    paused_at: Nanos

    status: ClassVar[LoopStatus] = LoopStatus.PAUSED


LoopState = Union[Idle, Ready, Recording, Playing, Paused]
