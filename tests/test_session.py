from __future__ import annotations

from typing import List

import pytest

from vim_grammar.commands import (
    MotionCommand,
    MotionOperation,
    OperationCommand,
    TextObject,
    TextObjectOperation,
)
from vim_grammar.grammar import Direction, Motion, ObjMotion, ObjRange, Operator
from vim_grammar.modes import Mode
from vim_grammar.session import CommandBus, KeystrokeSession


def make_session() -> tuple[KeystrokeSession, dict[str, List[object]]]:
    bus = CommandBus()
    events: dict[str, List[object]] = {}
    for name in ("command", "command.motion", "command.operation", "sequence.abort"):
        bus.subscribe(
            name,
            lambda payload, name=name: events.setdefault(name, []).append(payload),
        )
    return KeystrokeSession(bus=bus), events


def test_feed_text_returns_completed_commands() -> None:
    session, _ = make_session()

    commands = session.feed_text("2wd3j")

    assert commands == [
        MotionCommand(2, Motion.WORD, Direction.FORWARD),
        OperationCommand(
            MotionOperation(3, Operator.DELETE, Motion.LINE, Direction.FORWARD)
        ),
    ]


def test_commands_are_published_by_kind() -> None:
    session, events = make_session()

    session.feed_text("lyiw")

    motion = MotionCommand(1, Motion.CHAR, Direction.FORWARD)
    operation = OperationCommand(
        TextObjectOperation(
            1, Operator.YANK, TextObject(ObjRange.INNER, ObjMotion.WORD)
        )
    )
    assert events["command"] == [motion, operation]
    assert events["command.motion"] == [motion]
    assert events["command.operation"] == [operation]
    assert "sequence.abort" not in events


def test_abort_publishes_discarded_prefix() -> None:
    session, events = make_session()

    assert session.feed_text("3d9w") == [
        MotionCommand(1, Motion.WORD, Direction.FORWARD)
    ]

    assert events["sequence.abort"] == ["3d"]


def test_unknown_key_without_prefix_is_not_an_abort() -> None:
    session, events = make_session()

    assert session.feed("x") is None

    assert "sequence.abort" not in events


def test_pending_tracks_prefix() -> None:
    session, _ = make_session()

    session.feed("2")
    assert session.pending == "2"
    session.feed("c")
    assert session.pending == "2c"
    session.feed("a")
    assert session.pending == "2ca"
    session.feed("w")
    assert session.pending == ""


def test_reset_aborts_pending_sequence() -> None:
    session, events = make_session()
    session.feed_text("5y")

    session.reset()

    assert session.pending == ""
    assert session.mode == Mode()
    assert events["sequence.abort"] == ["5y"]


def test_reset_when_idle_is_silent() -> None:
    session, events = make_session()

    session.reset()

    assert "sequence.abort" not in events


@pytest.mark.parametrize("value", ["", "ab", 3, None])
def test_feed_rejects_non_characters(value: object) -> None:
    session, _ = make_session()

    with pytest.raises(ValueError):
        session.feed(value)  # type: ignore[arg-type]


def test_sessions_own_independent_modes() -> None:
    first, _ = make_session()
    second, _ = make_session()

    first.feed("d")

    assert second.pending == ""
    assert first.mode is not second.mode


def test_bus_unsubscribe_stops_delivery() -> None:
    bus = CommandBus()
    seen: List[object] = []
    callback = seen.append
    bus.subscribe("command", callback)
    session = KeystrokeSession(bus=bus)

    session.feed("j")
    bus.unsubscribe("command", callback)
    session.feed("j")

    assert seen == [MotionCommand(1, Motion.LINE, Direction.FORWARD)]
