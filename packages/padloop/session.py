"""
padloop Loop Session

Application-level wrapper around a LoopEngine. Holds the current tempo,
validates incoming commands with Pydantic and forwards them to the engine.
Input layers (keyboard, OSC, HTTP...) talk to a LoopSession, never to the
engine directly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from .commands import CancelCommand, ClearCommand, PadCommand, SpaceCommand, TempoCommand
from .engine import LoopEngine, LoopSnapshot
from .engine.tempo import DEFAULT_BARS, DEFAULT_BPM, clamp_bars, clamp_bpm
from .result import CommandResult

logger = logging.getLogger(__name__)

CommandHandler = Callable[[dict[str, Any]], CommandResult]


class LoopSession:
    """
    Tempo state plus command dispatch for one loop engine.

    Commands:
        space                 start count-in / pause / resume
        pad    {key}          record or overdub a pad trigger
        cancel                abort and drop all tracks
        clear                 hard reset
        tempo  {bpm, bars}    change tempo; drops the loop if it changed
    """

    def __init__(
        self,
        engine: LoopEngine,
        bpm: int = DEFAULT_BPM,
        bars: int = DEFAULT_BARS,
    ):
        self._engine = engine
        self._bpm = clamp_bpm(bpm)
        self._bars = clamp_bars(bars)

        self._handlers: dict[str, CommandHandler] = {
            "space": self._handle_space,
            "pad": self._handle_pad,
            "cancel": self._handle_cancel,
            "clear": self._handle_clear,
            "tempo": self._handle_tempo,
        }

    @property
    def engine(self) -> LoopEngine:
        return self._engine

    @property
    def bpm(self) -> int:
        return self._bpm

    @property
    def bars(self) -> int:
        return self._bars

    @property
    def commands(self) -> list[str]:
        """Registered command names."""
        return list(self._handlers)

    def set_tempo(self, bpm: int, bars: int) -> bool:
        """
        Apply a new tempo, clamped to the valid ranges.

        Returns:
            True if bpm or bars changed (the loop was reset)
        """
        new_bpm = clamp_bpm(bpm)
        new_bars = clamp_bars(bars)
        if (new_bpm, new_bars) == (self._bpm, self._bars):
            return False

        self._bpm = new_bpm
        self._bars = new_bars
        self._engine.reset_for_new_tempo(new_bpm, new_bars)
        return True

    def handle(self, command: str, payload: dict[str, Any] | None = None) -> CommandResult:
        """
        Dispatch a named command.

        Args:
            command: One of the registered command names
            payload: Command arguments (validated per command)

        Returns:
            CommandResult indicating success or failure
        """
        handler = self._handlers.get(command)
        if handler is None:
            return CommandResult.error(f"Unknown command: {command}")
        return handler(payload or {})

    def update(self) -> None:
        """Poll the engine."""
        self._engine.update()

    def snapshot(self) -> LoopSnapshot:
        return self._engine.snapshot()

    # ================================================================
    # Command Handlers
    # ================================================================

    def _handle_space(self, payload: dict[str, Any]) -> CommandResult:
        try:
            SpaceCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid space command: {e}")

        self._engine.handle_space(self._bpm, self._bars)
        return CommandResult.ok(self.snapshot())

    def _handle_pad(self, payload: dict[str, Any]) -> CommandResult:
        try:
            cmd = PadCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid pad command: {e}")

        self._engine.record_event(cmd.key)
        return CommandResult.ok(self.snapshot())

    def _handle_cancel(self, payload: dict[str, Any]) -> CommandResult:
        try:
            CancelCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid cancel command: {e}")

        self._engine.handle_cancel()
        return CommandResult.ok(self.snapshot())

    def _handle_clear(self, payload: dict[str, Any]) -> CommandResult:
        try:
            ClearCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid clear command: {e}")

        self._engine.handle_control_space()
        return CommandResult.ok(self.snapshot())

    def _handle_tempo(self, payload: dict[str, Any]) -> CommandResult:
        """
        Change tempo and loop size.

        An unchanged tempo keeps the running loop; any change drops it,
        since recorded offsets belong to the old cycle length.
        """
        try:
            cmd = TempoCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid tempo command: {e}")

        if self.set_tempo(cmd.bpm, cmd.bars):
            logger.debug(f"Tempo changed to {cmd.bpm} BPM, {cmd.bars} bars")
            return CommandResult.ok(self.snapshot())
        return CommandResult.ok(self.snapshot(), "Tempo unchanged")
