"""Keymap registry: at most one binding per (mode, key token)."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

from diwan.errors import DiwanError
from diwan.modes import Mode
from diwan.runtime.telemetry import SpanHandle, span

from .models import Binding

SlotKey = Tuple[Mode, str]


@dataclass(frozen=True, slots=True)
class RegistryStats:
    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(DiwanError):
    """A binding claims a key token that is already bound in its mode."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]) -> None:
        self.binding = binding
        self.conflicts = tuple(conflicts)
        taken = ", ".join(existing.id for existing in self.conflicts)
        super().__init__(
            f"{binding.mode.label} key {binding.token!r} for '{binding.id}' "
            f"is already bound by {taken}"
        )


class KeymapRegistry:
    """Bindings by id, plus a ``(mode, token)`` index used for lookup.

    ``revision()`` increases on every successful change so hosts can tell
    when a cached view of the keymap is stale.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._slots: Dict[SlotKey, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_binding(self, binding_id: str) -> Binding:
        if binding_id not in self._bindings:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return self._bindings[binding_id]

    def lookup(self, mode: Mode, token: str) -> Optional[Binding]:
        binding_id = self._slots.get((Mode(mode), token))
        return None if binding_id is None else self._bindings[binding_id]

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Add ``binding``; with ``replace`` it evicts whatever it collides with."""

        with self._span("register", binding.id, mode=binding.mode.value) as handle:
            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                handle.add_metadata("conflicts", [c.id for c in conflicts])
                raise KeymapConflictError(binding, conflicts)
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            for stale in (*conflicts, self._bindings.get(binding.id)):
                if stale is not None:
                    self._drop(stale)
            self._bindings[binding.id] = binding
            self._slots[_slot(binding)] = binding.id
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        with self._span("unregister", binding_id):
            binding = self._bindings.get(binding_id)
            if binding is None:
                return None
            self._drop(binding)
            self._revision += 1
            return binding

    def iter_bindings(self, mode: Optional[Mode] = None) -> Iterator[Binding]:
        wanted = None if mode is None else Mode(mode)
        for binding in list(self._bindings.values()):
            if wanted is None or binding.mode is wanted:
                yield binding

    def stats(self) -> RegistryStats:
        modes = {binding.mode.value for binding in self._bindings.values()}
        return RegistryStats(binding_count=len(self._bindings), modes=tuple(sorted(modes)))

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        holder = self._slots.get(_slot(binding))
        if holder is None or holder == binding.id:
            return []
        return [self._bindings[holder]]

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        key = _slot(binding)
        if self._slots.get(key) == binding.id:
            del self._slots[key]

    def _span(
        self, operation: str, binding_id: str, **metadata: str
    ) -> AbstractContextManager[SpanHandle]:
        return span(
            f"keymaps::{operation}_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding_id, **metadata},
        )


def _slot(binding: Binding) -> SlotKey:
    return (binding.mode, binding.token)


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
