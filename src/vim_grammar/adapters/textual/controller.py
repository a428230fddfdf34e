"""Bridges Textual key events to a ``KeystrokeSession``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from vim_grammar.commands import Command
from vim_grammar.session import KeystrokeSession

RESET_KEYS = frozenset({"escape", "ESC", "<Esc>", "ctrl+left_square_bracket"})
_BLOCKING_MODIFIERS = frozenset({"CTRL", "ALT", "META"})


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualKeystrokeHooks:
    """Callbacks the adapter uses to update Textual widgets."""

    on_command: Callable[[Command], None] = _noop
    update_pending: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualKeystrokeAdapter:
    """Translates key events into characters for the grammar."""

    def __init__(
        self, session: KeystrokeSession, hooks: Optional[TextualKeystrokeHooks] = None
    ) -> None:
        self.session = session
        self.hooks = hooks or TextualKeystrokeHooks()
        self.session.bus.subscribe("sequence.abort", self._on_abort)
        self.hooks.update_pending(self.session.pending)

    def handle_textual_key(
        self,
        key: str,
        *,
        character: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[Command]:
        mods = tuple(str(mod).upper() for mod in modifiers)
        self._log("key ->", key=key, character=character, mods=mods or None)

        ch = self._to_char(key, character, mods)
        if ch is None:
            self.session.reset()
            self.hooks.update_pending(self.session.pending)
            return None

        command = self.session.feed(ch)
        if command is not None:
            self._log("command <-", command=command)
            self.hooks.on_command(command)
        self.hooks.update_pending(self.session.pending)
        return command

    @staticmethod
    def _to_char(
        key: str, character: Optional[str], modifiers: tuple[str, ...]
    ) -> Optional[str]:
        if key in RESET_KEYS:
            return None
        if _BLOCKING_MODIFIERS.intersection(modifiers):
            return None
        text = character if character is not None else key
        if len(text) != 1 or not text.isprintable():
            return None
        return text

    def _on_abort(self, payload: object) -> None:
        self._log("abort <-", pending=payload)

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(
            f"{key}={value!r}" for key, value in fields.items() if value is not None
        )
        parts.append(f"pending={self.session.pending!r}")
        self.hooks.log(" ".join(parts))


__all__ = ["RESET_KEYS", "TextualKeystrokeAdapter", "TextualKeystrokeHooks"]
