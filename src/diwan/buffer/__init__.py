"""Document storage, cursor positions and navigation."""

from .cursor import CursorModel, step_down, step_left, step_right, step_up
from .document import LINE_SEPARATOR, Document
from .state import ORIGIN, Position
from .validation import clamp_position, ensure_position

__all__ = [
    "Document",
    "LINE_SEPARATOR",
    "Position",
    "ORIGIN",
    "CursorModel",
    "step_left",
    "step_right",
    "step_up",
    "step_down",
    "clamp_position",
    "ensure_position",
]
