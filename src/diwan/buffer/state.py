"""Cursor position value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based ``(column, row)`` cursor location.

    ``column`` may equal the line length: that is the append position just
    past the last character.
    """

    column: int = 0
    row: int = 0

    def display(self) -> Tuple[int, int]:
        """1-based ``(column, row)`` for human-facing output."""

        return (self.column + 1, self.row + 1)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.column, self.row)


ORIGIN = Position(0, 0)

__all__ = ["Position", "ORIGIN"]
