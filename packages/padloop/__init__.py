"""
padloop

Loop engine for a live-looping pad sampler: metronome count-in, phase-aligned
recording, endless replay, overdub layers and pause/resume.
"""

__version__ = "0.1.0"

from .engine import LoopEngine, LoopSnapshot, LoopState, LoopStatus, SystemClock
from .factory import create_audio_bus, create_loop_engine, create_loop_session
from .protocols import AudioBus, Clock
from .runner import PollRunner
from .session import LoopSession

__all__ = [
    "create_audio_bus",
    "create_loop_engine",
    "create_loop_session",
    "LoopEngine",
    "LoopSession",
    "LoopSnapshot",
    "LoopState",
    "LoopStatus",
    "PollRunner",
    "SystemClock",
    "AudioBus",
    "Clock",
]
