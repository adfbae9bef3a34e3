"""Minimal modal text-editing core for terminal editors."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "errors",
    "files",
    "keymaps",
    "modes",
    "runtime",
    "session",
    "status",
]

__version__ = "0.1.0"
