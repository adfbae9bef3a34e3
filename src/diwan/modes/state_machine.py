"""Editing modes and the transitions allowed between them."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List

from diwan.runtime import telemetry


class Mode(str, Enum):
    """Exclusive editing state; Normal gates out textual mutation."""

    NORMAL = "normal"
    INSERT = "insert"

    @property
    def label(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.label


# (current, target) pairs that are real transitions. Requests for the
# current mode are no-ops; there is no terminal state.
TRANSITIONS: Dict[Mode, Mode] = {
    Mode.NORMAL: Mode.INSERT,
    Mode.INSERT: Mode.NORMAL,
}

TransitionListener = Callable[[Mode, Mode], None]


class ModeStateMachine:
    """Owns the current mode for one editing view."""

    def __init__(self, initial: Mode = Mode.NORMAL) -> None:
        self._mode = initial
        self._listeners: List[TransitionListener] = []

    @property
    def mode(self) -> Mode:
        return self._mode

    def on_transition(self, listener: TransitionListener) -> None:
        self._listeners.append(listener)

    def can_enter(self, target: Mode) -> bool:
        return TRANSITIONS.get(self._mode) is target

    def transition(self, target: Mode) -> bool:
        """Switch to ``target``; returns ``False`` when already there."""

        if not self.can_enter(target):
            return False
        previous = self._mode
        self._mode = target
        telemetry.record_event(
            "mode.switch",
            level="debug",
            data={"from": previous.value, "to": target.value},
            logger_name="diwan.modes",
        )
        for listener in list(self._listeners):
            listener(previous, target)
        return True

    def enter_insert(self) -> bool:
        return self.transition(Mode.INSERT)

    def enter_normal(self) -> bool:
        return self.transition(Mode.NORMAL)


__all__ = ["Mode", "ModeStateMachine", "TRANSITIONS"]
