"""Document storage: one contiguous string with ``\\n`` separated lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

LINE_SEPARATOR = "\n"


@dataclass(slots=True)
class Document:
    """Editable text stored as a single ``str``.

    Lines are a derived view obtained by splitting on ``\\n``; splitting
    always yields at least one line, so the empty document is one empty line.
    Columns and offsets count codepoints (Python string indices), never
    encoded bytes, so a multi-byte character is always one column wide.
    """

    _text: str = ""
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "Document":
        return cls(_text=text, version=0, dirty=False)

    @property
    def text(self) -> str:
        return self._text

    def snapshot(self) -> Sequence[str]:
        """Return the current lines as an immutable tuple."""

        return tuple(self._text.split(LINE_SEPARATOR))

    @property
    def line_count(self) -> int:
        return self._text.count(LINE_SEPARATOR) + 1

    @property
    def last_row(self) -> int:
        return self.line_count - 1

    def get_line(self, row: int) -> str:
        return self.snapshot()[row]

    def line_length(self, row: int) -> int:
        return len(self.get_line(row))

    def offset(self, column: int, row: int) -> int:
        """Flat offset of ``(column, row)``.

        Every preceding line contributes its length plus one for the
        separator it ends with.
        """

        lines = self.snapshot()
        offset = 0
        for index in range(row):
            offset += len(lines[index]) + 1
        return offset + column

    def position_for_offset(self, offset: int) -> Tuple[int, int]:
        """Inverse of ``offset``; returns ``(column, row)``.

        Offsets past the end resolve to the append position of the last line.
        """

        offset = max(0, offset)
        running = 0
        lines = self.snapshot()
        for row, line in enumerate(lines):
            if offset <= running + len(line):
                return (offset - running, row)
            running += len(line) + 1
        return (len(lines[-1]), len(lines) - 1)

    def splice(self, start: int, end: int, text: str) -> str:
        """Replace ``[start:end]`` with ``text`` and return the removed slice."""

        start = max(0, min(start, len(self._text)))
        end = max(start, min(end, len(self._text)))
        removed = self._text[start:end]
        if not removed and not text:
            return removed
        self._text = self._text[:start] + text + self._text[end:]
        self.version += 1
        self.dirty = True
        return removed

    def insert(self, offset: int, text: str) -> None:
        self.splice(offset, offset, text)

    def delete(self, start: int, end: int) -> str:
        return self.splice(start, end, "")

    def mark_clean(self) -> None:
        self.dirty = False


__all__ = ["Document", "LINE_SEPARATOR"]
