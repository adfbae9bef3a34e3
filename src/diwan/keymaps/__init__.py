"""Declarative key bindings and the key translator."""

from .defaults import DEFAULT_BINDINGS, load_default_keymaps
from .models import Binding, InputEvent, KeyInput, KeyStroke, PasteInput, normalize_key
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .translator import default_registry, translate

__all__ = [
    "Binding",
    "InputEvent",
    "KeyInput",
    "KeyStroke",
    "PasteInput",
    "normalize_key",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
    "default_registry",
    "translate",
]
