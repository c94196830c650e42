"""
Clock Protocol

Time source for the loop engine.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """
    Monotonic time source.

    Implementations:
        - SystemClock: perf_counter_ns based, epoch at construction
        - FakeClock: manually advanced test double
    """

    def now(self) -> int:
        """Elapsed nanoseconds since an arbitrary fixed epoch."""
        ...
