"""Host-side controller wiring an EditorSession into UI callbacks.

Nothing here imports Textual, so the controller can be driven from tests or
from any other toolkit that reports keys as Textual-style names
(``"escape"``, ``"ctrl+left"``, ``"h"``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from diwan.keymaps import KeyInput, PasteInput
from diwan.session import EditorSession, RenderFrame, SessionResult

HOST_KEY_NAMES = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "space": " ",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def key_input_from_host(
    key: str,
    *,
    text: Optional[str] = None,
    modifiers: Iterable[str] = (),
) -> KeyInput:
    """Build a ``KeyInput`` from a host key name and optional character."""

    mods = [str(mod).lower() for mod in modifiers]
    name = key
    if len(key) > 1 and "+" in key.strip("+"):
        *prefix, name = key.split("+")
        mods.extend(part.lower() for part in prefix)
    mapped = HOST_KEY_NAMES.get(name.lower()) if len(name) > 1 else None
    if mapped is not None:
        return KeyInput(key=mapped, modifiers=tuple(mods))
    if text and len(text) == 1 and text.isprintable():
        return KeyInput(key=text, modifiers=tuple(mods), text=text)
    return KeyInput(key=name, modifiers=tuple(mods), text=text)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update host widgets."""

    update_frame: Callable[[RenderFrame], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges host key events to an EditorSession and back to the UI."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._push_frame(self.session.frame())

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> SessionResult:
        """Normalize a host key event and dispatch it to the session."""

        event = key_input_from_host(key, text=text, modifiers=modifiers)
        self._log_state("key ->", key=event.token, text=text)
        outcome = self.session.handle_event(event)
        self._after_result(outcome)
        return outcome

    def handle_paste(self, text: str) -> SessionResult:
        self._log_state("paste ->", length=len(text))
        outcome = self.session.handle_event(PasteInput(text))
        self._after_result(outcome)
        return outcome

    def refresh(self) -> RenderFrame:
        frame = self.session.frame()
        self._push_frame(frame)
        return frame

    def _after_result(self, outcome: SessionResult) -> None:
        self._push_frame(outcome.frame)
        self._log_state(
            "result <-",
            action=outcome.action,
            status=outcome.result.status if outcome.result else "unbound",
        )

    def _push_frame(self, frame: RenderFrame) -> None:
        self.hooks.update_frame(frame)
        self.hooks.update_status(frame.status_text)

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in ("mode.switch", "buffer.change", "cursor.move"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        with session.shared.lock:
            return {
                "session": session.name,
                "mode": session.mode.value,
                "cursor": session.position.as_tuple(),
                "version": session.document.version,
            }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "key_input_from_host"]
