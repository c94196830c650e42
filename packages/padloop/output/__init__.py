"""padloop Audio Output Adapters"""

from .audio_commands import (
    AudioCommand,
    PauseAll,
    PlayMetronome,
    PlayPad,
    PlayScheduled,
    ResumeAll,
)
from .fire_and_forget import FireAndForgetAudio, fire_and_forget
from .midi_bus import MidiAudioBus, default_pad_notes
from .osc_bus import OscAudioBus
from .queue_bus import QueueAudioBus

__all__ = [
    "AudioCommand",
    "PlayPad",
    "PlayScheduled",
    "PlayMetronome",
    "PauseAll",
    "ResumeAll",
    "FireAndForgetAudio",
    "fire_and_forget",
    "MidiAudioBus",
    "default_pad_notes",
    "OscAudioBus",
    "QueueAudioBus",
]
