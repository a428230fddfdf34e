"""Host-facing keystroke session and command bus."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from vim_grammar.commands import Command, command_fields, command_kind
from vim_grammar.modes import Mode
from vim_grammar.runtime import telemetry

LOGGER_NAME = "vim_grammar.session"


class CommandBus:
    """Synchronous pub/sub used to hand completed commands to the host."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


class KeystrokeSession:
    """Feeds keystrokes into one ``Mode`` and publishes what it emits.

    Events on ``bus``:

    ``command``
        Every completed command.
    ``command.motion`` / ``command.operation``
        The same command, split by kind.
    ``sequence.abort``
        The pending prefix discarded when a sequence is abandoned.
    """

    def __init__(
        self, mode: Optional[Mode] = None, bus: Optional[CommandBus] = None
    ) -> None:
        self.mode = mode if mode is not None else Mode()
        self.bus = bus if bus is not None else CommandBus()

    @property
    def pending(self) -> str:
        return self.mode.pending_keys

    def feed(self, ch: str) -> Optional[Command]:
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")

        before = self.mode.pending_keys
        with telemetry.span(
            "session::feed",
            logger_name=LOGGER_NAME,
            metadata={"key": ch, "mode": self.mode.name},
        ):
            command = self.mode.consume(ch)

        if command is not None:
            self._publish(command)
        elif before and not self.mode.is_pending:
            self._abort(before, trigger=ch)
        return command

    def feed_text(self, text: Iterable[str]) -> List[Command]:
        commands: List[Command] = []
        for ch in text:
            command = self.feed(ch)
            if command is not None:
                commands.append(command)
        return commands

    def reset(self) -> None:
        before = self.mode.pending_keys
        self.mode.reset()
        if before:
            self._abort(before, trigger=None)

    def _publish(self, command: Command) -> None:
        telemetry.record_event(
            "command.emit",
            level="debug",
            data=command_fields(command),
            logger_name=LOGGER_NAME,
        )
        self.bus.emit("command", command)
        self.bus.emit(f"command.{command_kind(command)}", command)

    def _abort(self, pending: str, *, trigger: Optional[str]) -> None:
        data: Dict[str, object] = {"pending": pending}
        if trigger is not None:
            data["trigger"] = trigger
        telemetry.record_event(
            "sequence.abort",
            level="debug",
            data=data,
            logger_name=LOGGER_NAME,
        )
        self.bus.emit("sequence.abort", pending)


__all__ = ["CommandBus", "KeystrokeSession"]
