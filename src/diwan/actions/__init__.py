"""Editing intents and the applier that executes them."""

from .applier import ActionApplier, ActionResult
from .models import (
    DELETE_CHAR,
    ENTER_INSERT_MODE,
    ENTER_NORMAL_MODE,
    MOVE_DOWN,
    MOVE_KINDS,
    MOVE_LEFT,
    MOVE_RIGHT,
    MOVE_UP,
    NEW_LINE,
    TEXT_KINDS,
    Action,
    ActionKind,
)

__all__ = [
    "Action",
    "ActionKind",
    "ActionApplier",
    "ActionResult",
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
