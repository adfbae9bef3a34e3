"""Status line derived from mode, filename and cursor position."""

from __future__ import annotations

from dataclasses import dataclass

from diwan.modes import Mode

SCRATCH_FILENAME = "[SCRATCH]"
SEPARATOR = " | "


@dataclass(frozen=True, slots=True)
class StatusSnapshot:
    """Display-ready status values; column and row are 1-based."""

    mode: str
    filename: str
    column: int
    row: int

    @property
    def cursor(self) -> str:
        return f"{self.column}:{self.row}"

    @property
    def text(self) -> str:
        return SEPARATOR.join((self.mode, self.filename, self.cursor))

    def __str__(self) -> str:
        return self.text


def snapshot(
    mode: Mode, filename: str | None, column: int, row: int
) -> StatusSnapshot:
    return StatusSnapshot(
        mode=Mode(mode).label,
        filename=filename or SCRATCH_FILENAME,
        column=column + 1,
        row=row + 1,
    )


def render(mode: Mode, filename: str | None, column: int, row: int) -> str:
    """Render e.g. ``"INSERT | notes.txt | 3:1"`` from 0-based coordinates."""

    return snapshot(mode, filename, column, row).text


__all__ = ["StatusSnapshot", "SCRATCH_FILENAME", "render", "snapshot"]
