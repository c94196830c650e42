"""padloop Loop Engine"""

from .clock import SystemClock
from .loop_engine import LoopEngine
from .loop_state import Idle, LoopState, LoopStatus, Paused, Playing, Ready, Recording
from .snapshot import LoopSnapshot
from .track import LoopTrack, OverdubBuffer, RecordedEvent

__all__ = [
    "LoopEngine",
    "LoopState",
    "LoopStatus",
    "Idle",
    "Ready",
    "Recording",
    "Playing",
    "Paused",
    "LoopSnapshot",
    "LoopTrack",
    "OverdubBuffer",
    "RecordedEvent",
    "SystemClock",
]
