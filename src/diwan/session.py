"""Editing sessions: the single serialization point over a document.

A ``SharedDocument`` pairs one ``Document`` with one lock. Each
``EditorSession`` is a view over it with its own cursor and mode; every
dispatch holds the document lock from translation through status
recomputation and releases it before returning, so a host never holds it
while waiting for the next input event.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from diwan.actions import Action, ActionApplier, ActionResult
from diwan.buffer import CursorModel, Document, Position
from diwan.keymaps import InputEvent, KeymapRegistry, translate
from diwan.modes import Mode, ModeStateMachine
from diwan.runtime import telemetry
from diwan import status as status_model


class EditorBus:
    """Minimal event bus letting hosts observe session changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class SharedDocument:
    """A document plus the lock that serializes every access to it."""

    def __init__(
        self, document: Optional[Document] = None, *, filename: Optional[str] = None
    ) -> None:
        self.document = document if document is not None else Document()
        self.filename = filename
        self.lock = threading.RLock()

    @classmethod
    def from_text(cls, text: str, *, filename: Optional[str] = None) -> "SharedDocument":
        return cls(Document.from_text(text), filename=filename)

    def content(self) -> str:
        with self.lock:
            return self.document.text


@dataclass(frozen=True, slots=True)
class RenderFrame:
    """Everything a renderer needs, captured under the document lock."""

    lines: tuple[str, ...]
    position: Position
    mode: Mode
    status: status_model.StatusSnapshot
    version: int
    dirty: bool

    @property
    def status_text(self) -> str:
        return self.status.text


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Outcome of dispatching one input event."""

    action: Optional[Action]
    result: Optional[ActionResult]
    frame: RenderFrame

    @property
    def consumed(self) -> bool:
        return self.action is not None


class EditorSession:
    def __init__(
        self,
        shared: Optional[SharedDocument] = None,
        *,
        name: str = "main",
        registry: Optional[KeymapRegistry] = None,
        bus: Optional[EditorBus] = None,
    ) -> None:
        self.name = name
        self.shared = shared if shared is not None else SharedDocument()
        self.cursor = CursorModel()
        self.modes = ModeStateMachine()
        self.bus = bus or EditorBus()
        self.registry = registry
        self.applier = ActionApplier(self.shared.document, self.cursor, self.modes)
        self.modes.on_transition(self._publish_mode_switch)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        filename: Optional[str] = None,
        name: str = "main",
        registry: Optional[KeymapRegistry] = None,
    ) -> "EditorSession":
        shared = SharedDocument.from_text(text, filename=filename)
        return cls(shared, name=name, registry=registry)

    @property
    def document(self) -> Document:
        return self.shared.document

    @property
    def mode(self) -> Mode:
        return self.modes.mode

    @property
    def position(self) -> Position:
        with self.shared.lock:
            self.cursor.clamp(self.document)
            return self.cursor.position

    def handle_event(self, event: InputEvent) -> SessionResult:
        """Translate and apply one event; unbound input is not an error."""

        with self.shared.lock:
            with telemetry.span(
                "session::handle_event",
                logger_name="diwan.session",
                component="session",
                metadata={"session": self.name, "mode": self.mode.value},
            ) as handle:
                action = translate(event, self.mode, registry=self.registry)
                if action is None:
                    handle.add_metadata("status", "unbound")
                    return SessionResult(action=None, result=None, frame=self._frame())
                return self._dispatch(action)

    def apply(self, action: Action) -> SessionResult:
        """Apply an already translated action."""

        with self.shared.lock:
            return self._dispatch(action)

    def frame(self) -> RenderFrame:
        with self.shared.lock:
            return self._frame()

    def status(self) -> status_model.StatusSnapshot:
        with self.shared.lock:
            return self._status()

    def content(self) -> str:
        return self.shared.content()

    def place_cursor(self, column: int, row: int) -> Position:
        """Move the cursor to a host-chosen location; raises ``PositionError``."""

        with self.shared.lock:
            return self.cursor.place(self.document, Position(column, row))

    def _dispatch(self, action: Action) -> SessionResult:
        result = self.applier.apply(action)
        if result.text_changed:
            self.bus.emit(
                "buffer.change",
                {
                    "session": self.name,
                    "action": action.kind.value,
                    "version": self.document.version,
                },
            )
        if result.cursor_moved:
            self.bus.emit(
                "cursor.move",
                {"session": self.name, "position": result.after.as_tuple()},
            )
        return SessionResult(action=action, result=result, frame=self._frame())

    def _frame(self) -> RenderFrame:
        self.cursor.clamp(self.document)
        return RenderFrame(
            lines=tuple(self.document.snapshot()),
            position=self.cursor.position,
            mode=self.mode,
            status=self._status(),
            version=self.document.version,
            dirty=self.document.dirty,
        )

    def _status(self) -> status_model.StatusSnapshot:
        self.cursor.clamp(self.document)
        position = self.cursor.position
        return status_model.snapshot(
            self.mode, self.shared.filename, position.column, position.row
        )

    def _publish_mode_switch(self, previous: Mode, current: Mode) -> None:
        self.bus.emit(
            "mode.switch",
            {"session": self.name, "from": previous.value, "to": current.value},
        )


__all__ = [
    "EditorBus",
    "EditorSession",
    "RenderFrame",
    "SessionResult",
    "SharedDocument",
]
