"""Normal-mode minor state machine.

The minor mode tracks how far an in-flight command has progressed:

``Initial`` -> (digits) -> ``OperatorPending`` -> ``TextObjectPending``

and emits a command once the sequence is complete. Any character that does
not continue the current state aborts the sequence and is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union, assert_never

from vim_grammar.commands import (
    Command,
    MotionCommand,
    MotionOperation,
    OperationCommand,
    TextObject,
    TextObjectOperation,
)
from vim_grammar.grammar import (
    MAX_REPEAT,
    Motion,
    ObjMotion,
    ObjRange,
    Operator,
    digit_from_char,
    motion_direction,
)


@dataclass(frozen=True, slots=True)
class Initial:
    """Waiting for a command; ``repeat`` is 0 until a non-zero count is typed."""

    repeat: int = 0

    @property
    def effective_repeat(self) -> int:
        return max(self.repeat, 1)


@dataclass(frozen=True, slots=True)
class OperatorPending:
    repeat: int
    operator: Operator


@dataclass(frozen=True, slots=True)
class TextObjectPending:
    repeat: int
    operator: Operator
    range: ObjRange


MinorState = Union[Initial, OperatorPending, TextObjectPending]

_OPERATOR_CHARS = {operator: ch for ch, operator in Operator.keys().items()}
_RANGE_CHARS = {obj_range: ch for ch, obj_range in ObjRange.keys().items()}


def describe_pending(state: MinorState) -> str:
    """Render the typed prefix of an incomplete command, like vi's showcmd.

    Pending operators carry the effective count, so an explicit count of 1
    is not shown once an operator follows it: ``"1d"`` renders as ``"d"``.
    """

    match state:
        case Initial(repeat=repeat):
            return str(repeat) if repeat else ""
        case OperatorPending(repeat=repeat, operator=operator):
            return _count_prefix(repeat) + _OPERATOR_CHARS[operator]
        case TextObjectPending(repeat=repeat, operator=operator, range=obj_range):
            return (
                _count_prefix(repeat)
                + _OPERATOR_CHARS[operator]
                + _RANGE_CHARS[obj_range]
            )
        case _:
            assert_never(state)


def _count_prefix(repeat: int) -> str:
    return str(repeat) if repeat > 1 else ""


class NormalMinor:
    """Accumulates one normal-mode command, a character at a time."""

    __slots__ = ("_state",)

    def __init__(self, state: Optional[MinorState] = None) -> None:
        self._state: MinorState = state if state is not None else Initial()

    def __repr__(self) -> str:
        return f"NormalMinor({self._state!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalMinor):
            return NotImplemented
        return self._state == other._state

    __hash__ = None  # type: ignore[assignment]

    @property
    def state(self) -> MinorState:
        return self._state

    @property
    def is_pending(self) -> bool:
        return self._state != Initial()

    def reset(self) -> None:
        self._state = Initial()

    def consume(self, ch: str) -> Optional[Command]:
        """Advance by one character; return a command when one completes."""

        state = self._state
        match state:
            case Initial():
                return self._consume_initial(state, ch)
            case OperatorPending():
                return self._consume_operator_pending(state, ch)
            case TextObjectPending():
                return self._consume_text_object_pending(state, ch)
            case _:
                assert_never(state)

    def _consume_initial(self, state: Initial, ch: str) -> Optional[Command]:
        digit = digit_from_char(ch)
        if digit is not None:
            self._state = Initial(min(state.repeat * 10 + digit, MAX_REPEAT))
            return None

        operator = Operator.from_char(ch)
        if operator is not None:
            self._state = OperatorPending(state.effective_repeat, operator)
            return None

        motion = Motion.from_char(ch)
        if motion is not None:
            self.reset()
            return MotionCommand(state.effective_repeat, motion, motion_direction(ch))

        self.reset()
        return None

    def _consume_operator_pending(
        self, state: OperatorPending, ch: str
    ) -> Optional[Command]:
        motion = Motion.from_char(ch)
        if motion is not None:
            self.reset()
            return OperationCommand(
                MotionOperation(
                    state.repeat, state.operator, motion, motion_direction(ch)
                )
            )

        obj_range = ObjRange.from_char(ch)
        if obj_range is not None:
            self._state = TextObjectPending(state.repeat, state.operator, obj_range)
            return None

        self.reset()
        return None

    def _consume_text_object_pending(
        self, state: TextObjectPending, ch: str
    ) -> Optional[Command]:
        self.reset()
        obj_motion = ObjMotion.from_char(ch)
        if obj_motion is None:
            return None
        return OperationCommand(
            TextObjectOperation(
                state.repeat, state.operator, TextObject(state.range, obj_motion)
            )
        )


__all__ = [
    "Initial",
    "MinorState",
    "NormalMinor",
    "OperatorPending",
    "TextObjectPending",
    "describe_pending",
]
