"""
Fire-and-forget audio boundary.

All audio side effects leave the engine through FireAndForgetAudio.
"""

from __future__ import annotations

import logging

from ..protocols import AudioBus, PausableAudioBus

logger = logging.getLogger(__name__)


class FireAndForgetAudio:
    """
    Wraps an AudioBus so that every call returns None and never raises.

    Delivery failures are logged at debug level and otherwise ignored;
    the caller has no way to observe them. Optional methods that the
    wrapped bus does not implement (pause_all, resume_all) are no-ops.

    The wrapper does not block by itself. Wrapped buses are expected to
    hand work off without waiting (queue put_nowait, UDP send, MIDI write).
    """

    def __init__(self, bus: AudioBus):
        self._bus = bus
        self._pausable = isinstance(bus, PausableAudioBus)
        self._failures = 0

    @property
    def bus(self) -> AudioBus:
        """The wrapped bus."""
        return self._bus

    @property
    def failure_count(self) -> int:
        """Number of swallowed delivery failures."""
        return self._failures

    @property
    def pausable(self) -> bool:
        """True if the wrapped bus implements pause_all/resume_all."""
        return self._pausable

    def play_metronome_beep(self) -> None:
        self._dispatch("play_metronome_beep")

    def play_pad(self, key: str) -> None:
        self._dispatch("play_pad", key)

    def play_scheduled(self, key: str) -> None:
        self._dispatch("play_scheduled", key)

    def pause_all(self) -> None:
        if self._pausable:
            self._dispatch("pause_all")

    def resume_all(self) -> None:
        if self._pausable:
            self._dispatch("resume_all")

    def _dispatch(self, method: str, *args: str) -> None:
        try:
            getattr(self._bus, method)(*args)
        except Exception as e:
            self._failures += 1
            logger.debug(f"Audio {method} dropped: {e!r}")


def fire_and_forget(bus: AudioBus) -> FireAndForgetAudio:
    """Wrap bus unless it is already wrapped."""
    if isinstance(bus, FireAndForgetAudio):
        return bus
    return FireAndForgetAudio(bus)
