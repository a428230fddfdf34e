"""Top-level mode selector.

``ActiveMode`` is a closed union; adding insert/visual/command-line modes
means adding a variant here and a ``case`` arm to every match below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, assert_never

from vim_grammar.commands import Command

from .normal import Normal
from .normal_minor import describe_pending

ActiveMode = Normal


@dataclass(slots=True)
class Mode:
    """Keystroke state for one editing view."""

    active: ActiveMode = field(default_factory=Normal)

    @property
    def name(self) -> str:
        active = self.active
        match active:
            case Normal():
                return active.name
            case _:
                assert_never(active)

    @property
    def is_pending(self) -> bool:
        active = self.active
        match active:
            case Normal():
                return active.is_pending
            case _:
                assert_never(active)

    @property
    def pending_keys(self) -> str:
        """The typed prefix of an incomplete command, empty when idle."""

        active = self.active
        match active:
            case Normal():
                return describe_pending(active.minor.state)
            case _:
                assert_never(active)

    def consume(self, ch: str) -> Optional[Command]:
        active = self.active
        match active:
            case Normal():
                return active.consume(ch)
            case _:
                assert_never(active)

    def reset(self) -> None:
        self.active = Normal()


__all__ = ["ActiveMode", "Mode"]
