"""Keystroke-to-command grammar for vi-style normal mode."""

from .commands import (
    Command,
    MotionCommand,
    MotionOperation,
    Operation,
    OperationCommand,
    TextObject,
    TextObjectOperation,
)
from .grammar import Direction, Motion, ObjMotion, ObjRange, Operator
from .modes import Mode, Normal, NormalMinor

__all__ = [
    "Command",
    "Direction",
    "Mode",
    "Motion",
    "MotionCommand",
    "MotionOperation",
    "Normal",
    "NormalMinor",
    "ObjMotion",
    "ObjRange",
    "Operation",
    "OperationCommand",
    "Operator",
    "TextObject",
    "TextObjectOperation",
]

__version__ = "0.1.0"
