"""
Loop Timing

Pure functions for cycle length, beat interval and phase math.

All durations are integer nanoseconds. Floats only appear while turning a
tempo into a duration; phase arithmetic stays in integers so that long
sessions do not accumulate rounding drift.
"""

from __future__ import annotations

Nanos = int

NANOS_PER_SECOND: Nanos = 1_000_000_000
BEATS_PER_BAR = 4  # 4/4 time
COUNT_IN_BEATS = 4  # One bar of metronome before recording


def from_seconds(seconds: float) -> Nanos:
    """Convert seconds to nanoseconds (rounded)."""
    return round(seconds * NANOS_PER_SECOND)


def to_seconds(nanos: Nanos) -> float:
    """Convert nanoseconds to seconds."""
    return nanos / NANOS_PER_SECOND


def beat_interval(bpm: float) -> Nanos:
    """
    Duration of one beat.

    Args:
        bpm: Beats per minute (upstream guarantees > 0)

    Returns:
        60/bpm seconds in nanoseconds, or 0 for a non-positive bpm

    Example:
        >>> beat_interval(120)
        500000000
    """
    if bpm <= 0:
        return 0
    return from_seconds(60.0 / bpm)


def cycle_length(bpm: float, bars: int) -> Nanos:
    """
    Duration of one full loop cycle.

    Args:
        bpm: Beats per minute (upstream guarantees > 0)
        bars: Number of 4/4 bars in the loop

    Returns:
        bars * 4 beats in nanoseconds, or 0 for non-positive input

    Example:
        >>> cycle_length(120, 4)
        8000000000
    """
    if bpm <= 0 or bars <= 0:
        return 0
    beat_seconds = 60.0 / bpm
    return from_seconds(beat_seconds * BEATS_PER_BAR * bars)


def normalize_offset(elapsed: Nanos, length: Nanos) -> Nanos:
    """
    Wrap an elapsed time into the current cycle.

    Args:
        elapsed: Time since the cycle anchor
        length: Cycle length

    Returns:
        elapsed mod length, always in [0, length); 0 when length is 0
    """
    if length <= 0:
        return 0
    return elapsed % length
