"""
Command result type.

Session commands never raise for bad input; they answer with a
CommandResult. Accepted commands carry the loop snapshot taken right
after the engine handled them, so an input layer can redraw without a
second query.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .engine import LoopSnapshot


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of one session command.

    Attributes:
        success: True if the command was accepted
        message: Rejection reason, or a note such as "Tempo unchanged"
        snapshot: Loop state after an accepted command
    """

    success: bool
    message: str | None = None
    snapshot: LoopSnapshot | None = None

    @classmethod
    def ok(cls, snapshot: LoopSnapshot, message: str | None = None) -> CommandResult:
        return cls(success=True, message=message, snapshot=snapshot)

    @classmethod
    def error(cls, message: str) -> CommandResult:
        return cls(success=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for publishing."""
        return {
            "success": self.success,
            "message": self.message,
            "snapshot": self.snapshot.to_dict() if self.snapshot is not None else None,
        }
