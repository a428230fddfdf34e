"""Executable Textual app that shows commands as they are recognized."""

from __future__ import annotations

from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Log, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use vim_grammar.adapters.textual.app"
    ) from exc

from vim_grammar.commands import Command, command_fields
from vim_grammar.runtime import telemetry
from vim_grammar.session import KeystrokeSession

from .controller import TextualKeystrokeAdapter, TextualKeystrokeHooks
from .options import parse_args


def format_command(command: Command) -> str:
    fields = command_fields(command)
    kind = fields.pop("kind")
    body = " ".join(f"{key}={value}" for key, value in fields.items())
    return f"{kind}: {body}"


class KeystrokeDemoApp(App[None]):
    """Type normal-mode keys; completed commands are appended to the log."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#command-log {
		height: 1fr;
		border: round $accent;
	}

	#pending-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, show_debug: bool = False) -> None:
        super().__init__()
        self.session = KeystrokeSession()
        self.adapter: TextualKeystrokeAdapter | None = None
        self._show_debug = show_debug
        self._log_widget: Log | None = None
        self._pending_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._log_widget = Log(id="command-log")
        yield self._log_widget
        self._pending_widget = Static("", id="pending-line")
        yield self._pending_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualKeystrokeHooks(
            on_command=self._on_command,
            update_pending=self._update_pending,
            log=self._debug_line,
        )
        self.adapter = TextualKeystrokeAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        modifiers = [part.upper() for part in event.key.split("+")[:-1]]
        self.adapter.handle_textual_key(
            event.key, character=event.character, modifiers=modifiers
        )
        event.stop()

    def _on_command(self, command: Command) -> None:
        if self._log_widget:
            self._log_widget.write_line(format_command(command))

    def _update_pending(self, pending: str) -> None:
        if self._pending_widget:
            self._pending_widget.update(pending)

    def _debug_line(self, line: str) -> None:
        if self._show_debug and self._log_widget:
            self._log_widget.write_line(f"  {line}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    if args.preset:
        telemetry.configure(preset=args.preset)
    app = KeystrokeDemoApp(show_debug=args.debug_keys)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
