"""
padloop OSC Audio Bus

Sends pad triggers and transport messages to an OSC sampler.
"""

from __future__ import annotations

import logging
from typing import Any

from pythonosc import udp_client

logger = logging.getLogger(__name__)


class OscAudioBus:
    """
    AudioBus that forwards every effect as an OSC message.

    Addresses (with the default prefix):
        /padloop/pad        key    live pad trigger
        /padloop/scheduled  key    pad replayed from a track
        /padloop/metronome         metronome tick
        /padloop/pause             pause all voices
        /padloop/resume            resume all voices
    """

    DEFAULT_HOST = "127.0.0.1"
    DEFAULT_PORT = 57120
    DEFAULT_PREFIX = "/padloop"

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        prefix: str = DEFAULT_PREFIX,
    ):
        self._host = host
        self._port = port
        self._prefix = prefix.rstrip("/")
        self._client: udp_client.SimpleUDPClient | None = None

    def connect(self) -> None:
        """Initialize OSC client"""
        self._client = udp_client.SimpleUDPClient(self._host, self._port)
        logger.info(f"OSC client connected to {self._host}:{self._port}")

    def disconnect(self) -> None:
        """Close OSC client"""
        self._client = None
        logger.info("OSC client disconnected")

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def address(self, name: str) -> str:
        """Full OSC address for a message name."""
        return f"{self._prefix}/{name}"

    def send(self, name: str, args: list[Any] | None = None) -> bool:
        """
        Send one OSC message.

        Args:
            name: Message name appended to the prefix
            args: OSC arguments

        Returns:
            True if sent successfully
        """
        if not self._client:
            logger.debug(f"OSC {name} skipped: client not connected")
            return False

        try:
            self._client.send_message(self.address(name), args or [])
            return True
        except Exception as e:
            logger.error(f"OSC send error: {e}")
            return False

    # AudioBus protocol

    def play_metronome_beep(self) -> None:
        self.send("metronome")

    def play_pad(self, key: str) -> None:
        self.send("pad", [key])

    def play_scheduled(self, key: str) -> None:
        self.send("scheduled", [key])

    def pause_all(self) -> None:
        self.send("pause")

    def resume_all(self) -> None:
        self.send("resume")
