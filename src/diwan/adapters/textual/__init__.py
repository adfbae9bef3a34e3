"""Textual host adapter; ``app`` needs the optional ``textual`` extra."""

from .controller import TextualEditorAdapter, TextualUIHooks, key_input_from_host

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "key_input_from_host"]
