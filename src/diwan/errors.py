"""Exception types raised by the editing core.

Input events never raise; these only surface host programming errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from diwan.buffer.state import Position


class DiwanError(RuntimeError):
    """Base class for every error raised by the package."""


class PositionError(DiwanError):
    """Raised when a host supplies a position outside the document."""

    def __init__(self, message: str, *, position: "Position | None" = None) -> None:
        super().__init__(message)
        self.position = position


class ActionError(DiwanError):
    """Raised when an Action is constructed with an invalid payload."""


__all__ = ["DiwanError", "PositionError", "ActionError"]
