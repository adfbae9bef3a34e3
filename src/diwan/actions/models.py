"""Action value objects produced by key translation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from diwan.errors import ActionError


class ActionKind(str, Enum):
    ENTER_INSERT_MODE = "enter_insert_mode"
    ENTER_NORMAL_MODE = "enter_normal_mode"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    INSERT_CHAR = "insert_char"
    DELETE_CHAR = "delete_char"
    NEW_LINE = "new_line"
    PASTE = "paste"


# Kinds that change the document text; Normal mode never produces these
# from plain keys.
TEXT_KINDS = frozenset(
    {
        ActionKind.INSERT_CHAR,
        ActionKind.DELETE_CHAR,
        ActionKind.NEW_LINE,
        ActionKind.PASTE,
    }
)

MOVE_KINDS = frozenset(
    {
        ActionKind.MOVE_LEFT,
        ActionKind.MOVE_RIGHT,
        ActionKind.MOVE_UP,
        ActionKind.MOVE_DOWN,
    }
)


@dataclass(frozen=True, slots=True)
class Action:
    """A single editing intent; lives for exactly one dispatch."""

    kind: ActionKind
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ActionKind.INSERT_CHAR:
            if self.text is None or len(self.text) != 1:
                raise ActionError("InsertChar requires exactly one character")
            if not self.text.isprintable():
                raise ActionError(
                    f"InsertChar requires a printable character, got {self.text!r}"
                )
        elif self.kind is ActionKind.PASTE:
            if self.text is None:
                raise ActionError("Paste requires text")
        elif self.text is not None:
            raise ActionError(f"{self.kind.value} carries no text")

    @property
    def mutates_text(self) -> bool:
        return self.kind in TEXT_KINDS

    @property
    def is_motion(self) -> bool:
        return self.kind in MOVE_KINDS

    @classmethod
    def insert_char(cls, char: str) -> "Action":
        return cls(ActionKind.INSERT_CHAR, char)

    @classmethod
    def paste(cls, text: str) -> "Action":
        return cls(ActionKind.PASTE, text)

    def __repr__(self) -> str:
        if self.text is None:
            return f"Action({self.kind.name})"
        return f"Action({self.kind.name}, {self.text!r})"


ENTER_INSERT_MODE = Action(ActionKind.ENTER_INSERT_MODE)
ENTER_NORMAL_MODE = Action(ActionKind.ENTER_NORMAL_MODE)
MOVE_LEFT = Action(ActionKind.MOVE_LEFT)
MOVE_RIGHT = Action(ActionKind.MOVE_RIGHT)
MOVE_UP = Action(ActionKind.MOVE_UP)
MOVE_DOWN = Action(ActionKind.MOVE_DOWN)
DELETE_CHAR = Action(ActionKind.DELETE_CHAR)
NEW_LINE = Action(ActionKind.NEW_LINE)


__all__ = [
    "Action",
    "ActionKind",
    "TEXT_KINDS",
    "MOVE_KINDS",
    "ENTER_INSERT_MODE",
    "ENTER_NORMAL_MODE",
    "MOVE_LEFT",
    "MOVE_RIGHT",
    "MOVE_UP",
    "MOVE_DOWN",
    "DELETE_CHAR",
    "NEW_LINE",
]
