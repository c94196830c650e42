"""
Audio Protocols

Outbound interface from the loop engine to whatever renders sound.
Uses typing.Protocol for structural subtyping (duck typing).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AudioBus(Protocol):
    """
    Sink for audio side effects.

    Every method is fire-and-forget: the engine never looks at a result
    and wraps the bus in FireAndForgetAudio so that a failing
    implementation cannot stop the loop.

    pause_all() and resume_all() are optional; FireAndForgetAudio treats
    a missing method as a no-op.

    Implementations:
        - QueueAudioBus: commands to an audio worker thread
        - OscAudioBus: OSC messages via pythonosc
        - MidiAudioBus: MIDI notes via mido
        - MockAudioBus: Test double for unit tests
    """

    def play_metronome_beep(self) -> None:
        """Play one metronome tick."""
        ...

    def play_pad(self, key: str) -> None:
        """Play a pad triggered live by the performer."""
        ...

    def play_scheduled(self, key: str) -> None:
        """Play a pad replayed from a loop track."""
        ...


@runtime_checkable
class PausableAudioBus(AudioBus, Protocol):
    """AudioBus that can also silence and resume everything it plays."""

    def pause_all(self) -> None:
        """Pause all sounding voices."""
        ...

    def resume_all(self) -> None:
        """Resume voices paused by pause_all()."""
        ...
