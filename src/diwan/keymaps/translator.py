"""Translate one input event into at most one action."""

from __future__ import annotations

from typing import Optional

from diwan.actions.models import Action
from diwan.modes import Mode

from .defaults import load_default_keymaps
from .models import InputEvent, KeyInput, PasteInput
from .registry import KeymapRegistry

_DEFAULT_REGISTRY: Optional[KeymapRegistry] = None


def default_registry() -> KeymapRegistry:
    """Registry seeded with the built-in bindings, built on first use."""

    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = load_default_keymaps(
            KeymapRegistry(logger_name="diwan.keymaps")
        )
    return _DEFAULT_REGISTRY


def translate(
    event: InputEvent,
    mode: Mode,
    *,
    registry: Optional[KeymapRegistry] = None,
) -> Optional[Action]:
    """Map ``event`` in ``mode`` to an action, or ``None`` when unbound.

    Pastes are accepted in every mode. Bound strokes win over typing, and
    only Insert mode turns an unbound printable key into ``InsertChar``.
    """

    if isinstance(event, PasteInput):
        text = event.normalized_text
        return Action.paste(text) if text else None

    if not isinstance(event, KeyInput):
        return None

    table = registry if registry is not None else default_registry()
    binding = table.lookup(mode, event.token)
    if binding is not None:
        return binding.action

    if mode is Mode.INSERT:
        char = event.printable
        if char is not None:
            return Action.insert_char(char)
    return None


__all__ = ["translate", "default_registry"]
