"""Executable Textual app hosting an editing session."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use diwan.adapters.textual.app"
    ) from exc

from diwan.files import load_document, save_document
from diwan.runtime import telemetry
from diwan.session import EditorSession, RenderFrame, SharedDocument

from .controller import TextualEditorAdapter, TextualUIHooks

CURSOR_STYLE = "reverse"


def render_lines(frame: RenderFrame) -> Text:
    """Join the frame's lines, highlighting the cursor cell."""

    text = Text()
    for row, line in enumerate(frame.lines):
        if row:
            text.append("\n")
        if row != frame.position.row:
            text.append(line)
            continue
        column = frame.position.column
        text.append(line[:column])
        text.append(line[column : column + 1] or " ", style=CURSOR_STYLE)
        text.append(line[column + 1 :])
    return text


class DiwanApp(App[None]):
    """Minimal Textual UI embedding one editing session."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("alt+q", "quit", "Quit"),
        ("ctrl+s", "save", "Save"),
    ]

    def __init__(self, shared: SharedDocument) -> None:
        super().__init__()
        self.session = EditorSession(shared)
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("diwan.app")

    def compose(self) -> ComposeResult:
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            update_status=self._update_status,
            log=self.logger.debug,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if event.key in {"ctrl+q", "alt+q", "ctrl+s"}:
            return
        self.adapter.handle_textual_key(event.key, text=event.character)
        event.stop()

    def on_paste(self, event: events.Paste) -> None:
        if self.adapter:
            self.adapter.handle_paste(event.text)
            event.stop()

    def action_save(self) -> None:
        if not self.session.shared.filename:
            self._update_status("no file name; start diwan with FILE to save")
            return
        path = save_document(self.session.shared)
        telemetry.record_event("file.save", data={"path": str(path)})
        if self.adapter:
            self.adapter.refresh()

    def _update_frame(self, frame: RenderFrame) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_lines(frame))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="diwan", description="Diwan is a minimal modal text editor."
    )
    parser.add_argument("file", nargs="?", help="The file to open in the editor")
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default="production",
        help="Telemetry preset (default: production, logs to ~/.cache/diwan)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    shared = load_document(args.file) if args.file else SharedDocument()
    DiwanApp(shared).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
