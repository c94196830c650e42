"""
padloop Factory

Factory functions for creating production LoopEngine instances.
Separates object creation from business logic (DI pattern).
"""

from __future__ import annotations

import logging

from .config import Settings
from .engine import LoopEngine, SystemClock
from .output import MidiAudioBus, OscAudioBus, QueueAudioBus
from .protocols import AudioBus, Clock
from .session import LoopSession

logger = logging.getLogger(__name__)


def create_audio_bus(settings: Settings) -> AudioBus:
    """
    Create and connect the audio bus selected by settings.audio_backend.

    A MIDI bus that fails to connect is still returned; its sends are
    no-ops until a port becomes available.
    """
    if settings.audio_backend == "osc":
        osc = OscAudioBus(settings.osc_host, settings.osc_port, settings.osc_prefix)
        osc.connect()
        return osc

    if settings.audio_backend == "midi":
        midi = MidiAudioBus(settings.midi_port, channel=settings.midi_channel)
        if not midi.connect():
            logger.warning("MIDI audio bus not connected; pads will be silent")
        return midi

    return QueueAudioBus(settings.queue_size)


def create_loop_engine(
    settings: Settings | None = None,
    audio: AudioBus | None = None,
    clock: Clock | None = None,
) -> LoopEngine:
    """
    Create a LoopEngine with real I/O dependencies.

    Args:
        settings: Configuration (default: environment / .env)
        audio: AudioBus override (default: from settings.audio_backend)
        clock: Clock override (default: SystemClock)

    Returns:
        Configured LoopEngine instance
    """
    settings = settings if settings is not None else Settings()
    return LoopEngine(
        clock=clock if clock is not None else SystemClock(),
        audio=audio if audio is not None else create_audio_bus(settings),
    )


def create_loop_session(
    settings: Settings | None = None,
    audio: AudioBus | None = None,
    clock: Clock | None = None,
) -> LoopSession:
    """Create a LoopSession around a new engine, with the configured tempo."""
    settings = settings if settings is not None else Settings()
    engine = create_loop_engine(settings, audio=audio, clock=clock)
    return LoopSession(engine, bpm=settings.default_bpm, bars=settings.default_bars)
