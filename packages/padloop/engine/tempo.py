"""Tempo and loop-size limits."""

BPM_MIN = 20
BPM_MAX = 300

BARS_MIN = 1
BARS_MAX = 256

DEFAULT_BPM = 120
DEFAULT_BARS = 16


def clamp_bpm(value: int) -> int:
    """Clamp BPM to [BPM_MIN, BPM_MAX]."""
    return max(BPM_MIN, min(BPM_MAX, int(value)))


def clamp_bars(value: int) -> int:
    """Clamp bar count to [BARS_MIN, BARS_MAX]."""
    return max(BARS_MIN, min(BARS_MAX, int(value)))
