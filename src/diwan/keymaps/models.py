"""Input events, key strokes and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from diwan.actions.models import Action
from diwan.modes import Mode

# Host spellings folded onto the canonical key names used by bindings.
KEY_ALIASES = {
    "<ESC>": "ESC",
    "ESCAPE": "ESC",
    "RETURN": "ENTER",
    "<CR>": "ENTER",
    "<ENTER>": "ENTER",
    "<BS>": "BACKSPACE",
    "<BACKSPACE>": "BACKSPACE",
    "<LEFT>": "LEFT",
    "<RIGHT>": "RIGHT",
    "<UP>": "UP",
    "<DOWN>": "DOWN",
    "LEFTARROW": "LEFT",
    "RIGHTARROW": "RIGHT",
    "UPARROW": "UP",
    "DOWNARROW": "DOWN",
}

# Modifiers that turn a character key into a chord; shift does not.
CHORD_MODIFIERS = frozenset({"ctrl", "alt", "meta", "super"})


def normalize_key(key: str) -> str:
    if len(key) == 1:
        return key
    upper = key.strip().upper()
    return KEY_ALIASES.get(upper, upper)


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single key press a binding listens for."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", normalize_key(self.key))
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return f"{'+'.join(self.modifiers)}+{self.key}"
        return self.key


@dataclass(frozen=True, slots=True)
class KeyInput(KeyStroke):
    """Key event from the terminal; ``text`` is the character it typed, if any."""

    text: Optional[str] = None

    @property
    def is_chord(self) -> bool:
        return any(modifier in CHORD_MODIFIERS for modifier in self.modifiers)

    @property
    def printable(self) -> Optional[str]:
        """The single printable character this key types, if any."""

        if self.is_chord:
            return None
        candidate = self.text if self.text is not None else self.key
        if len(candidate) == 1 and candidate.isprintable():
            return candidate
        return None


@dataclass(frozen=True, slots=True)
class PasteInput:
    """Bracketed paste delivered as a single event."""

    text: str

    @property
    def normalized_text(self) -> str:
        return self.text.replace("\r\n", "\n").replace("\r", "\n")


InputEvent = Union[KeyInput, PasteInput]


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key stroke in one mode with a fixed action."""

    id: str
    mode: Mode
    stroke: KeyStroke
    action: Action
    description: str = ""
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        object.__setattr__(self, "mode", Mode(self.mode))
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke(self.stroke))

    @property
    def token(self) -> str:
        return self.stroke.token


__all__ = [
    "KeyInput",
    "PasteInput",
    "InputEvent",
    "KeyStroke",
    "Binding",
    "normalize_key",
]
