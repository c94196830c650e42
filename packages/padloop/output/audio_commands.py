"""
Audio commands.

Plain records sent from the engine side to an audio worker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class PlayPad:
    """Pad pressed live."""
    key: str


@dataclass(frozen=True, slots=True)
class PlayScheduled:
    """Pad replayed from a loop track."""
    key: str


@dataclass(frozen=True, slots=True)
class PlayMetronome:
    """Metronome tick."""


@dataclass(frozen=True, slots=True)
class PauseAll:
    """Pause every sounding voice."""


@dataclass(frozen=True, slots=True)
class ResumeAll:
    """Resume voices paused by PauseAll."""


AudioCommand = Union[PlayPad, PlayScheduled, PlayMetronome, PauseAll, ResumeAll]
