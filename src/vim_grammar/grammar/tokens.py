"""Single-character classifiers for the normal-mode grammar.

Every classifier maps one character to a token or ``None``. None of them
hold state. The motion and direction tables are keyed by the same
characters; ``check_grammar_tables`` enforces that at import time.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

MAX_REPEAT = 999_999_999
"""Upper bound for an accumulated repeat count; longer digit runs saturate."""


class GrammarTableError(AssertionError):
    """Raised when the grammar tables disagree with each other."""


def digit_from_char(ch: str) -> Optional[int]:
    """Return the value of an ASCII decimal digit, or ``None``."""

    if len(ch) == 1 and "0" <= ch <= "9":
        return ord(ch) - ord("0")
    return None


class Operator(Enum):
    CHANGE = "change"
    DELETE = "delete"
    YANK = "yank"
    VISUAL = "visual"

    @classmethod
    def from_char(cls, ch: str) -> Optional["Operator"]:
        return _OPERATOR_KEYS.get(ch)

    @classmethod
    def keys(cls) -> Mapping[str, "Operator"]:
        return _OPERATOR_KEYS


class Motion(Enum):
    """Cursor motion kinds.

    ``WORD`` is vi's lowercase word: a run of letters, digits and underscores,
    or a run of other non-blank characters. ``BIG_WORD`` is vi's ``WORD``: any
    run of non-blank characters.
    """

    CHAR = "char"
    WORD = "word"
    WORD_END = "word_end"
    BIG_WORD = "big_word"
    BIG_WORD_END = "big_word_end"
    LINE = "line"

    @classmethod
    def from_char(cls, ch: str) -> Optional["Motion"]:
        return _MOTION_KEYS.get(ch)

    @classmethod
    def keys(cls) -> Mapping[str, "Motion"]:
        return _MOTION_KEYS


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"

    @classmethod
    def from_char(cls, ch: str) -> Optional["Direction"]:
        return _DIRECTION_KEYS.get(ch)

    @classmethod
    def keys(cls) -> Mapping[str, "Direction"]:
        return _DIRECTION_KEYS


class ObjRange(Enum):
    """Text-object qualifier: ``INNER`` excludes surrounding whitespace."""

    INNER = "inner"
    OUTER = "outer"

    @classmethod
    def from_char(cls, ch: str) -> Optional["ObjRange"]:
        return _OBJ_RANGE_KEYS.get(ch)

    @classmethod
    def keys(cls) -> Mapping[str, "ObjRange"]:
        return _OBJ_RANGE_KEYS


class ObjMotion(Enum):
    WORD = "word"

    @classmethod
    def from_char(cls, ch: str) -> Optional["ObjMotion"]:
        return _OBJ_MOTION_KEYS.get(ch)

    @classmethod
    def keys(cls) -> Mapping[str, "ObjMotion"]:
        return _OBJ_MOTION_KEYS


_OPERATOR_KEYS: Mapping[str, Operator] = MappingProxyType(
    {
        "c": Operator.CHANGE,
        "d": Operator.DELETE,
        "y": Operator.YANK,
        "v": Operator.VISUAL,
    }
)

_MOTION_KEYS: Mapping[str, Motion] = MappingProxyType(
    {
        "h": Motion.CHAR,
        "l": Motion.CHAR,
        "j": Motion.LINE,
        "k": Motion.LINE,
        "w": Motion.WORD,
        "b": Motion.WORD,
        "e": Motion.WORD_END,
        "W": Motion.BIG_WORD,
        "B": Motion.BIG_WORD,
        "E": Motion.BIG_WORD_END,
    }
)

_DIRECTION_KEYS: Mapping[str, Direction] = MappingProxyType(
    {
        "h": Direction.BACKWARD,
        "l": Direction.FORWARD,
        "j": Direction.FORWARD,
        "k": Direction.BACKWARD,
        "w": Direction.FORWARD,
        "b": Direction.BACKWARD,
        "e": Direction.FORWARD,
        "W": Direction.FORWARD,
        "B": Direction.BACKWARD,
        "E": Direction.FORWARD,
    }
)

_OBJ_RANGE_KEYS: Mapping[str, ObjRange] = MappingProxyType(
    {"i": ObjRange.INNER, "a": ObjRange.OUTER}
)

_OBJ_MOTION_KEYS: Mapping[str, ObjMotion] = MappingProxyType({"w": ObjMotion.WORD})


def motion_direction(ch: str) -> Direction:
    """Direction of a character already accepted by ``Motion.from_char``."""

    direction = Direction.from_char(ch)
    if direction is None:
        raise GrammarTableError(f"motion key {ch!r} has no direction")
    return direction


def check_grammar_tables() -> None:
    """Verify that the classifier tables are mutually consistent."""

    missing = sorted(set(_MOTION_KEYS) - set(_DIRECTION_KEYS))
    if missing:
        raise GrammarTableError(f"motion keys without a direction: {missing}")

    for name, table in (
        ("operator", _OPERATOR_KEYS),
        ("motion", _MOTION_KEYS),
    ):
        digits = sorted(ch for ch in table if digit_from_char(ch) is not None)
        if digits:
            raise GrammarTableError(f"{name} keys shadow repeat digits: {digits}")

    overlap = sorted(set(_OPERATOR_KEYS) & set(_MOTION_KEYS))
    if overlap:
        raise GrammarTableError(f"keys are both operators and motions: {overlap}")


check_grammar_tables()

__all__ = [
    "MAX_REPEAT",
    "GrammarTableError",
    "Direction",
    "Motion",
    "ObjMotion",
    "ObjRange",
    "Operator",
    "check_grammar_tables",
    "digit_from_char",
    "motion_direction",
]
