"""
Queue Audio Bus

Hands audio commands to an audio worker thread through a bounded
queue.Queue. The engine side never waits: commands are pushed with
put_nowait and the oldest entry is dropped when the worker falls behind.
"""

from __future__ import annotations

import logging
import queue

from .audio_commands import (
    AudioCommand,
    PauseAll,
    PlayMetronome,
    PlayPad,
    PlayScheduled,
    ResumeAll,
)

logger = logging.getLogger(__name__)

# Default queue size; drop-oldest keeps memory bounded
_DEFAULT_QUEUE_SIZE = 256


class QueueAudioBus:
    """AudioBus backed by a thread-safe queue.Queue."""

    def __init__(self, maxsize: int = _DEFAULT_QUEUE_SIZE) -> None:
        self._queue: queue.Queue[AudioCommand] = queue.Queue(maxsize=maxsize)
        self._closed = False
        self._dropped = 0

    # ----------------------------------------------------------
    # Public accessors
    # ----------------------------------------------------------

    @property
    def queue(self) -> queue.Queue[AudioCommand]:
        """Queue read by the audio worker."""
        return self._queue

    @property
    def dropped(self) -> int:
        """Commands discarded because the queue was full."""
        return self._dropped

    @property
    def is_connected(self) -> bool:
        return not self._closed

    def close(self) -> None:
        """Stop accepting commands; later sends are silently ignored."""
        self._closed = True

    # ----------------------------------------------------------
    # AudioBus protocol methods
    # ----------------------------------------------------------

    def play_metronome_beep(self) -> None:
        self._push(PlayMetronome())

    def play_pad(self, key: str) -> None:
        self._push(PlayPad(key))

    def play_scheduled(self, key: str) -> None:
        self._push(PlayScheduled(key))

    def pause_all(self) -> None:
        self._push(PauseAll())

    def resume_all(self) -> None:
        self._push(ResumeAll())

    # ----------------------------------------------------------
    # Helpers
    # ----------------------------------------------------------

    def _push(self, command: AudioCommand) -> None:
        """Push command, dropping oldest if queue is full."""
        if self._closed:
            return
        try:
            self._queue.put_nowait(command)
        except queue.Full:
            # drop oldest
            try:
                oldest = self._queue.get_nowait()
                self._dropped += 1
                logger.warning(f"Audio queue full, dropped {oldest!r}")
            except queue.Empty:
                pass
            try:
                self._queue.put_nowait(command)
            except queue.Full:
                self._dropped += 1
                logger.warning(f"Audio queue full, dropped {command!r}")
