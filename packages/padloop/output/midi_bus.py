"""
padloop MIDI Audio Bus

Plays pads as MIDI drum notes on an external or software instrument.
"""

from __future__ import annotations

import logging

import mido
from mido import Message

from ..pads import PAD_KEYS

logger = logging.getLogger(__name__)


def default_pad_notes(base_note: int = 36) -> dict[str, int]:
    """Map pad keys to consecutive notes starting at base_note (C1 kick)."""
    return {key: (base_note + i) & 0x7F for i, key in enumerate(PAD_KEYS)}


class MidiAudioBus:
    """AudioBus that turns pad triggers into MIDI notes."""

    DRUM_CHANNEL = 9  # GM percussion (channel 10, zero-based)
    METRONOME_NOTE = 76  # GM Hi Wood Block
    METRONOME_VELOCITY = 90
    PAD_VELOCITY = 100
    ALL_NOTES_OFF_CC = 123

    def __init__(
        self,
        port_name: str | None = None,
        channel: int = DRUM_CHANNEL,
        pad_notes: dict[str, int] | None = None,
    ):
        """
        Initialize MIDI audio bus

        Args:
            port_name: MIDI port name. If None, uses first available.
            channel: MIDI channel (0-15) for pads and metronome
            pad_notes: Key to note mapping (default: default_pad_notes())
        """
        self._port_name = port_name
        self._channel = channel & 0x0F
        self._pad_notes = pad_notes if pad_notes is not None else default_pad_notes()
        self._port: mido.ports.BaseOutput | None = None
        self._active_notes: set[int] = set()

    def connect(self) -> bool:
        """
        Connect to MIDI port

        Returns:
            True if connected successfully
        """
        try:
            available_ports = mido.get_output_names()

            if not available_ports:
                logger.warning("No MIDI output ports available")
                return False

            if self._port_name:
                if self._port_name not in available_ports:
                    logger.warning(f"MIDI port '{self._port_name}' not found")
                    return False
                port_name = self._port_name
            else:
                port_name = available_ports[0]

            self._port = mido.open_output(port_name)
            self._port_name = port_name
            logger.info(f"MIDI connected to: {port_name}")
            return True

        except Exception as e:
            logger.error(f"MIDI connection error: {e}")
            return False

    def disconnect(self) -> None:
        """Close MIDI port"""
        if self._port:
            self.pause_all()
            self._port.close()
            self._port = None
            logger.info("MIDI disconnected")

    @property
    def is_connected(self) -> bool:
        return self._port is not None

    @property
    def port_name(self) -> str | None:
        return self._port_name

    def note_for(self, key: str) -> int | None:
        """Note mapped to a pad key, or None."""
        return self._pad_notes.get(key)

    # ================================================================
    # AudioBus protocol
    # ================================================================

    def play_metronome_beep(self) -> None:
        self._strike(self.METRONOME_NOTE, self.METRONOME_VELOCITY)

    def play_pad(self, key: str) -> None:
        self._strike_key(key)

    def play_scheduled(self, key: str) -> None:
        self._strike_key(key)

    def pause_all(self) -> None:
        """Release every sounding note and send All Notes Off."""
        if not self._port:
            return
        try:
            for note in sorted(self._active_notes):
                self._port.send(Message("note_off", channel=self._channel, note=note, velocity=0))
            self._active_notes.clear()
            self._port.send(
                Message("control_change", channel=self._channel, control=self.ALL_NOTES_OFF_CC, value=0)
            )
        except Exception as e:
            logger.error(f"MIDI all_notes_off error: {e}")

    def resume_all(self) -> None:
        """Nothing to resume: drum hits are one-shots."""

    # ================================================================
    # Note Messages
    # ================================================================

    def _strike_key(self, key: str) -> None:
        note = self._pad_notes.get(key)
        if note is None:
            logger.debug(f"No MIDI note mapped for pad '{key}'")
            return
        self._strike(note, self.PAD_VELOCITY)

    def _strike(self, note: int, velocity: int) -> None:
        """Retrigger a note: note-off if still sounding, then note-on."""
        if not self._port:
            return
        try:
            if note in self._active_notes:
                self._port.send(Message("note_off", channel=self._channel, note=note, velocity=0))
            self._port.send(
                Message("note_on", channel=self._channel, note=note & 0x7F, velocity=velocity & 0x7F)
            )
            self._active_notes.add(note)
        except Exception as e:
            logger.error(f"MIDI note_on error: {e}")

    @staticmethod
    def list_ports() -> list[str]:
        """List available MIDI output ports"""
        return list(mido.get_output_names())
