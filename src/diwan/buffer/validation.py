"""Validation helpers shared across buffer services."""

from __future__ import annotations

from diwan.errors import PositionError

from .document import Document
from .state import Position


def ensure_position(document: Document, position: Position) -> Position:
    if position.row < 0 or position.row >= document.line_count:
        raise PositionError("Row out of range", position=position)
    if position.column < 0 or position.column > document.line_length(position.row):
        raise PositionError("Column out of range", position=position)
    return position


def clamp_position(document: Document, position: Position) -> Position:
    row = max(0, min(position.row, document.last_row))
    column = max(0, min(position.column, document.line_length(row)))
    return Position(column, row)
