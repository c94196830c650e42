"""
Poll Runner

Drives LoopEngine.update() from an asyncio task at a fixed interval,
standing in for a UI frame loop.
"""

from __future__ import annotations

import asyncio
import logging

from .engine import LoopEngine

logger = logging.getLogger(__name__)


class PollRunner:
    """Calls engine.update() about every `interval` seconds until stopped."""

    DEFAULT_INTERVAL: float = 0.001  # 1ms

    def __init__(self, engine: LoopEngine, interval: float = DEFAULT_INTERVAL):
        self._engine = engine
        self._interval = interval
        self._running = False
        self._polls = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def poll_count(self) -> int:
        """Number of update() calls made so far."""
        return self._polls

    def stop(self) -> None:
        """Ask run() to return after the current poll."""
        self._running = False

    async def run(self) -> None:
        """Poll until stop() is called."""
        self._running = True
        logger.info(f"Poll runner started ({self._interval * 1000:.1f}ms interval)")
        try:
            while self._running:
                try:
                    self._engine.update()
                except Exception:
                    logger.exception("Loop engine update failed")
                    raise
                self._polls += 1
                await asyncio.sleep(self._interval)
        finally:
            self._running = False
            logger.info("Poll runner stopped")
