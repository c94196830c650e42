"""
padloop Protocols

Abstract interfaces for testability via dependency injection.
"""

from .audio import AudioBus, PausableAudioBus
from .clock import Clock

__all__ = [
    "AudioBus",
    "PausableAudioBus",
    "Clock",
]
