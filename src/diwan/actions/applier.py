"""Apply actions to a document, a cursor and a mode state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from diwan.buffer import CursorModel, Document, Position
from diwan.modes import Mode, ModeStateMachine
from diwan.runtime import telemetry

from .models import Action, ActionKind


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Outcome of one dispatch; ``status`` is ``"ok"`` or ``"noop"``."""

    action: Action
    before: Position
    after: Position
    text_changed: bool = False
    mode_changed: bool = False

    @property
    def cursor_moved(self) -> bool:
        return self.before != self.after

    @property
    def status(self) -> str:
        if self.text_changed or self.mode_changed or self.cursor_moved:
            return "ok"
        return "noop"


class ActionApplier:
    """Ties the document, cursor and mode together for a single view.

    Every boundary case is a clamp or a no-op; ``apply`` never raises for a
    well-formed ``Action``.
    """

    def __init__(
        self,
        document: Document,
        cursor: CursorModel,
        modes: ModeStateMachine,
        *,
        logger_name: str | None = "diwan.actions",
    ) -> None:
        self.document = document
        self.cursor = cursor
        self.modes = modes
        self._logger_name = logger_name
        self._handlers: Dict[ActionKind, Callable[[Action], bool]] = {
            ActionKind.ENTER_INSERT_MODE: self._enter_insert,
            ActionKind.ENTER_NORMAL_MODE: self._enter_normal,
            ActionKind.MOVE_LEFT: self._mover("left"),
            ActionKind.MOVE_RIGHT: self._mover("right"),
            ActionKind.MOVE_UP: self._mover("up"),
            ActionKind.MOVE_DOWN: self._mover("down"),
            ActionKind.INSERT_CHAR: self._insert_char,
            ActionKind.DELETE_CHAR: self._delete_char,
            ActionKind.NEW_LINE: self._new_line,
            ActionKind.PASTE: self._paste,
        }

    def apply(self, action: Action) -> ActionResult:
        self.cursor.clamp(self.document)
        before = self.cursor.position
        mode_before = self.modes.mode
        version_before = self.document.version
        with telemetry.span(
            f"action::{action.kind.value}",
            logger_name=self._logger_name,
            component="actions",
            metadata={"mode": mode_before.value, "cursor": before.as_tuple()},
        ) as handle:
            self._handlers[action.kind](action)
            result = ActionResult(
                action=action,
                before=before,
                after=self.cursor.position,
                text_changed=self.document.version != version_before,
                mode_changed=self.modes.mode is not mode_before,
            )
            handle.add_metadata("status", result.status)
        return result

    # mode transitions -------------------------------------------------

    def _enter_insert(self, action: Action) -> bool:
        return self.modes.transition(Mode.INSERT)

    def _enter_normal(self, action: Action) -> bool:
        return self.modes.transition(Mode.NORMAL)

    # navigation -------------------------------------------------------

    def _mover(self, direction: str) -> Callable[[Action], bool]:
        def handler(action: Action) -> bool:
            return self.cursor.move(self.document, direction)

        return handler

    # text mutation ----------------------------------------------------

    def _insert_char(self, action: Action) -> bool:
        assert action.text is not None
        column, row = self.cursor.column, self.cursor.row
        self.document.insert(self.document.offset(column, row), action.text)
        self.cursor.set(column + 1, row)
        return True

    def _delete_char(self, action: Action) -> bool:
        column, row = self.cursor.column, self.cursor.row
        if column == 0 and row == 0:
            return False
        offset = self.document.offset(column, row)
        if column > 0:
            self.document.delete(offset - 1, offset)
            self.cursor.set(column - 1, row)
            return True
        join_column = self.document.line_length(row - 1)
        self.document.delete(offset - 1, offset)
        self.cursor.set(join_column, row - 1)
        return True

    def _new_line(self, action: Action) -> bool:
        column, row = self.cursor.column, self.cursor.row
        self.document.insert(self.document.offset(column, row), "\n")
        self.cursor.set(0, row + 1)
        return True

    def _paste(self, action: Action) -> bool:
        text = action.text or ""
        if not text:
            return False
        offset = self.document.offset(self.cursor.column, self.cursor.row)
        self.document.insert(offset, text)
        # Row-aware: embedded newlines move the cursor onto the last pasted line.
        self.cursor.set(*self.document.position_for_offset(offset + len(text)))
        return True


__all__ = ["ActionApplier", "ActionResult"]
