"""Built-in bindings for Normal and Insert mode."""

from __future__ import annotations

from typing import Iterable, Sequence

from diwan.actions import models as actions
from diwan.modes import Mode

from .models import Binding, KeyStroke
from .registry import KeymapRegistry

_ARROWS = (
    ("left", "LEFT", actions.MOVE_LEFT),
    ("down", "DOWN", actions.MOVE_DOWN),
    ("up", "UP", actions.MOVE_UP),
    ("right", "RIGHT", actions.MOVE_RIGHT),
)

_NORMAL_LETTERS = (
    ("left", "h", actions.MOVE_LEFT),
    ("down", "j", actions.MOVE_DOWN),
    ("up", "k", actions.MOVE_UP),
    ("right", "l", actions.MOVE_RIGHT),
)


def _motion_bindings(mode: Mode) -> tuple[Binding, ...]:
    return tuple(
        Binding(
            id=f"{mode.value}.move_{name}_arrow",
            mode=mode,
            stroke=KeyStroke(key),
            action=action,
            description=f"Move cursor {name}",
            source="default",
        )
        for name, key, action in _ARROWS
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    *(
        Binding(
            id=f"normal.move_{name}",
            mode=Mode.NORMAL,
            stroke=KeyStroke(key),
            action=action,
            description=f"Move cursor {name}",
            source="default",
        )
        for name, key, action in _NORMAL_LETTERS
    ),
    *_motion_bindings(Mode.NORMAL),
    Binding(
        id="normal.enter_insert",
        mode=Mode.NORMAL,
        stroke=KeyStroke("i"),
        action=actions.ENTER_INSERT_MODE,
        description="Enter insert mode",
        source="default",
    ),
    Binding(
        id="insert.exit_escape",
        mode=Mode.INSERT,
        stroke=KeyStroke("ESC"),
        action=actions.ENTER_NORMAL_MODE,
        description="Leave insert mode",
        source="default",
    ),
    *_motion_bindings(Mode.INSERT),
    Binding(
        id="insert.delete_char",
        mode=Mode.INSERT,
        stroke=KeyStroke("BACKSPACE"),
        action=actions.DELETE_CHAR,
        description="Delete the character before the cursor",
        source="default",
    ),
    Binding(
        id="insert.new_line",
        mode=Mode.INSERT,
        stroke=KeyStroke("ENTER"),
        action=actions.NEW_LINE,
        description="Split the line at the cursor",
        source="default",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> KeymapRegistry:
    """Register the built-in bindings (minus ``exclude_bindings``) plus extras."""

    excluded = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)
    return registry


__all__ = ["load_default_keymaps", "DEFAULT_BINDINGS"]
