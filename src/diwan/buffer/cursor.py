"""Cursor navigation against a document snapshot."""

from __future__ import annotations

from typing import Callable, Dict

from .document import Document
from .state import ORIGIN, Position
from .validation import clamp_position, ensure_position

Motion = Callable[[Document, Position], Position]


def step_left(document: Document, position: Position) -> Position:
    column, row = position.column, position.row
    if column > 0:
        return Position(column - 1, row)
    if row > 0:
        return Position(document.line_length(row - 1), row - 1)
    return position


def step_right(document: Document, position: Position) -> Position:
    column, row = position.column, position.row
    if column < document.line_length(row):
        return Position(column + 1, row)
    if row < document.last_row:
        return Position(0, row + 1)
    return position


def step_up(document: Document, position: Position) -> Position:
    if position.row == 0:
        return position
    target_row = position.row - 1
    return Position(min(position.column, document.line_length(target_row)), target_row)


def step_down(document: Document, position: Position) -> Position:
    if position.row >= document.last_row:
        return position
    target_row = position.row + 1
    return Position(min(position.column, document.line_length(target_row)), target_row)


MOTIONS: Dict[str, Motion] = {
    "left": step_left,
    "right": step_right,
    "up": step_up,
    "down": step_down,
}


class CursorModel:
    """Holds one view's position; never keeps a reference to the document.

    Callers pass the document on every call and the position is clamped
    against it first, so edits made through another view cannot leave this
    cursor out of range.
    """

    def __init__(self, position: Position = ORIGIN) -> None:
        self.position = position

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def row(self) -> int:
        return self.position.row

    def place(self, document: Document, position: Position) -> Position:
        self.position = ensure_position(document, position)
        return self.position

    def set(self, column: int, row: int) -> None:
        self.position = Position(column, row)

    def clamp(self, document: Document) -> bool:
        clamped = clamp_position(document, self.position)
        changed = clamped != self.position
        self.position = clamped
        return changed

    def move(self, document: Document, direction: str) -> bool:
        self.clamp(document)
        target = MOTIONS[direction](document, self.position)
        if target == self.position:
            return False
        self.position = target
        return True

    def move_left(self, document: Document) -> bool:
        return self.move(document, "left")

    def move_right(self, document: Document) -> bool:
        return self.move(document, "right")

    def move_up(self, document: Document) -> bool:
        return self.move(document, "up")

    def move_down(self, document: Document) -> bool:
        return self.move(document, "down")


__all__ = [
    "CursorModel",
    "MOTIONS",
    "step_left",
    "step_right",
    "step_up",
    "step_down",
]
