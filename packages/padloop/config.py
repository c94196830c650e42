"""Centralized configuration using Pydantic Settings

All environment variables are managed here (prefix PADLOOP_).
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine.tempo import BARS_MAX, BARS_MIN, BPM_MAX, BPM_MIN, DEFAULT_BARS, DEFAULT_BPM


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="PADLOOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Audio backend selection
    audio_backend: Literal["queue", "osc", "midi"] = "queue"

    # Queue backend
    queue_size: int = Field(default=256, gt=0)

    # OSC Configuration
    osc_host: str = "127.0.0.1"
    osc_port: int = Field(default=57120, gt=0, lt=65536)
    osc_prefix: str = "/padloop"

    # MIDI Configuration
    midi_port: str | None = None
    midi_channel: int = Field(default=9, ge=0, le=15)

    # Polling
    poll_interval: float = Field(default=0.001, gt=0)

    # Initial tempo
    default_bpm: int = Field(default=DEFAULT_BPM, ge=BPM_MIN, le=BPM_MAX)
    default_bars: int = Field(default=DEFAULT_BARS, ge=BARS_MIN, le=BARS_MAX)

