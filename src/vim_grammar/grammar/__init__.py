"""Grammar tokens and their single-character classifiers."""

from .tokens import (
    MAX_REPEAT,
    Direction,
    GrammarTableError,
    Motion,
    ObjMotion,
    ObjRange,
    Operator,
    check_grammar_tables,
    digit_from_char,
    motion_direction,
)

__all__ = [
    "MAX_REPEAT",
    "Direction",
    "GrammarTableError",
    "Motion",
    "ObjMotion",
    "ObjRange",
    "Operator",
    "check_grammar_tables",
    "digit_from_char",
    "motion_direction",
]
