"""Normal mode: owns the minor-mode state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from vim_grammar.commands import Command

from .normal_minor import NormalMinor


@dataclass(slots=True)
class Normal:
    name = "normal"

    minor: NormalMinor = field(default_factory=NormalMinor)

    def consume(self, ch: str) -> Optional[Command]:
        return self.minor.consume(ch)

    @property
    def is_pending(self) -> bool:
        return self.minor.is_pending

    def reset(self) -> None:
        self.minor.reset()
