"""Textual adapter utilities."""

from .controller import RESET_KEYS, TextualKeystrokeAdapter, TextualKeystrokeHooks

__all__ = ["RESET_KEYS", "TextualKeystrokeAdapter", "TextualKeystrokeHooks"]
