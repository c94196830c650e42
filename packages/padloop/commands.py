"""
Pydantic models for command validation.

Each session command has a corresponding model that validates the payload
structure before anything reaches the loop engine.
"""

from pydantic import BaseModel, Field, field_validator

from .engine.tempo import BARS_MAX, BARS_MIN, BPM_MAX, BPM_MIN
from .pads import pad_index


class SpaceCommand(BaseModel):
    """Space command payload (empty)."""

    pass


class PadCommand(BaseModel):
    """
    Pad trigger command payload.

    Fields:
        key: Single-character key from the pad layout
    """

    key: str = Field(min_length=1, max_length=1)

    @field_validator("key")
    @classmethod
    def key_on_pad_layout(cls, v: str) -> str:
        if pad_index(v) is None:
            raise ValueError(f"'{v}' is not a pad key")
        return v


class CancelCommand(BaseModel):
    """Cancel command payload (empty)."""

    pass


class ClearCommand(BaseModel):
    """Clear-all command payload (empty)."""

    pass


class TempoCommand(BaseModel):
    """
    Tempo change command payload.

    Fields:
        bpm: Beats per minute
        bars: Loop length in 4/4 bars
    """

    bpm: int = Field(ge=BPM_MIN, le=BPM_MAX)
    bars: int = Field(ge=BARS_MIN, le=BARS_MAX)
