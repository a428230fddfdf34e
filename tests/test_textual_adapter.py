from __future__ import annotations

from typing import List

from vim_grammar.adapters.textual import TextualKeystrokeAdapter, TextualKeystrokeHooks
from vim_grammar.commands import (
    Command,
    MotionCommand,
    OperationCommand,
    TextObject,
    TextObjectOperation,
)
from vim_grammar.grammar import Direction, Motion, ObjMotion, ObjRange, Operator
from vim_grammar.session import KeystrokeSession


def make_adapter() -> (
    tuple[TextualKeystrokeAdapter, List[Command], List[str], List[str]]
):
    commands: List[Command] = []
    pending: List[str] = []
    logs: List[str] = []
    hooks = TextualKeystrokeHooks(
        on_command=commands.append,
        update_pending=pending.append,
        log=logs.append,
    )
    return TextualKeystrokeAdapter(KeystrokeSession(), hooks), commands, pending, logs


def test_adapter_forwards_characters_and_reports_commands() -> None:
    adapter, commands, pending, _ = make_adapter()

    for key in ("3", "d", "i"):
        assert adapter.handle_textual_key(key, character=key) is None
    result = adapter.handle_textual_key("w", character="w")

    expected = OperationCommand(
        TextObjectOperation(
            3, Operator.DELETE, TextObject(ObjRange.INNER, ObjMotion.WORD)
        )
    )
    assert result == expected
    assert commands == [expected]
    assert pending == ["", "3", "3d", "3di", ""]


def test_escape_resets_pending_sequence() -> None:
    adapter, commands, pending, logs = make_adapter()
    adapter.handle_textual_key("2", character="2")
    adapter.handle_textual_key("y", character="y")

    assert adapter.handle_textual_key("escape") is None

    assert pending[-1] == ""
    assert adapter.session.pending == ""
    assert any(line.startswith("abort <-") for line in logs)
    assert adapter.handle_textual_key("w", character="w") == MotionCommand(
        1, Motion.WORD, Direction.FORWARD
    )
    assert len(commands) == 1


def test_modified_keys_abort_instead_of_feeding() -> None:
    adapter, commands, _, _ = make_adapter()
    adapter.handle_textual_key("d", character="d")

    adapter.handle_textual_key("ctrl+w", character="\x17", modifiers=("ctrl",))

    assert adapter.session.pending == ""
    assert commands == []


def test_named_keys_without_character_abort() -> None:
    adapter, _, _, _ = make_adapter()
    adapter.handle_textual_key("c", character="c")

    adapter.handle_textual_key("left")

    assert adapter.session.pending == ""


def test_uppercase_characters_are_forwarded() -> None:
    adapter, commands, _, _ = make_adapter()

    adapter.handle_textual_key("B", character="B", modifiers=("shift",))

    assert commands == [MotionCommand(1, Motion.BIG_WORD, Direction.BACKWARD)]


def test_adapter_emits_log_lines() -> None:
    adapter, _, _, logs = make_adapter()

    adapter.handle_textual_key("j", character="j")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("command <-") for line in logs)
