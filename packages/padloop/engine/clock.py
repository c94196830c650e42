"""System clock for the loop engine."""

from __future__ import annotations

import time


class SystemClock:
    """Monotonic clock with its epoch at construction time."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def now(self) -> int:
        return time.perf_counter_ns() - self._start
