"""Mode selector, normal mode and the normal-mode minor state machine."""

from .mode import ActiveMode, Mode
from .normal import Normal
from .normal_minor import (
    Initial,
    MinorState,
    NormalMinor,
    OperatorPending,
    TextObjectPending,
    describe_pending,
)

__all__ = [
    "ActiveMode",
    "Initial",
    "MinorState",
    "Mode",
    "Normal",
    "NormalMinor",
    "OperatorPending",
    "TextObjectPending",
    "describe_pending",
]
