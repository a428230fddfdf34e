"""Command values emitted once a keystroke sequence is complete."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from vim_grammar.grammar import Direction, Motion, ObjMotion, ObjRange, Operator


@dataclass(frozen=True, slots=True)
class TextObject:
    """A structurally defined span, e.g. ``(INNER, WORD)`` for ``iw``."""

    range: ObjRange
    motion: ObjMotion


@dataclass(frozen=True, slots=True)
class MotionOperation:
    """Operator applied over the span a motion covers (``d2w``)."""

    count: int
    operator: Operator
    motion: Motion
    direction: Direction


@dataclass(frozen=True, slots=True)
class TextObjectOperation:
    """Operator applied over a text object (``3diw``)."""

    count: int
    operator: Operator
    text_object: TextObject


Operation = Union[MotionOperation, TextObjectOperation]


@dataclass(frozen=True, slots=True)
class MotionCommand:
    """Bare cursor motion without an operator."""

    count: int
    motion: Motion
    direction: Direction


@dataclass(frozen=True, slots=True)
class OperationCommand:
    operation: Operation


Command = Union[MotionCommand, OperationCommand]


def command_kind(command: Command) -> str:
    """Short label used for bus event names: ``motion`` or ``operation``."""

    match command:
        case MotionCommand():
            return "motion"
        case OperationCommand():
            return "operation"
    raise TypeError(f"not a command: {command!r}")


def command_fields(command: Command) -> Dict[str, object]:
    """Flatten a command into primitive fields for logging."""

    match command:
        case MotionCommand(count=count, motion=motion, direction=direction):
            return {
                "kind": "motion",
                "count": count,
                "motion": motion.value,
                "direction": direction.value,
            }
        case OperationCommand(operation=MotionOperation() as op):
            return {
                "kind": "operation",
                "count": op.count,
                "operator": op.operator.value,
                "motion": op.motion.value,
                "direction": op.direction.value,
            }
        case OperationCommand(operation=TextObjectOperation() as op):
            return {
                "kind": "operation",
                "count": op.count,
                "operator": op.operator.value,
                "range": op.text_object.range.value,
                "text_object": op.text_object.motion.value,
            }
    raise TypeError(f"not a command: {command!r}")


__all__ = [
    "Command",
    "MotionCommand",
    "MotionOperation",
    "Operation",
    "OperationCommand",
    "TextObject",
    "TextObjectOperation",
    "command_fields",
    "command_kind",
]
