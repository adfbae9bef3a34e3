"""Plain file wrappers; I/O errors propagate to the host."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from diwan.runtime import telemetry
from diwan.session import SharedDocument

ENCODING = "utf-8"


def load_document(path: str | Path) -> SharedDocument:
    """Read ``path`` into a shared document; a missing file starts empty.

    Text mode reading folds ``\r\n`` and ``\r`` into ``\n``, so saving a
    CRLF file writes it back with LF endings.
    """

    target = Path(path)
    with telemetry.span(
        "files::load", component="files", metadata={"path": str(target)}
    ) as handle:
        if target.exists():
            text = target.read_text(encoding=ENCODING)
        else:
            handle.add_metadata("new_file", True)
            text = ""
        return SharedDocument.from_text(text, filename=str(target))


def save_document(shared: SharedDocument, path: Optional[str | Path] = None) -> Path:
    """Write the whole document to ``path`` (or its own filename)."""

    destination = path or shared.filename
    if not destination:
        raise ValueError("No filename associated with the document")
    target = Path(destination)
    with shared.lock:
        text = shared.document.text
        with telemetry.span(
            "files::save",
            component="files",
            metadata={"path": str(target), "length": len(text)},
        ):
            target.write_text(text, encoding=ENCODING)
        shared.document.mark_clean()
        if shared.filename is None:
            shared.filename = str(target)
    return target


__all__ = ["load_document", "save_document"]
