from __future__ import annotations

from enum import Enum
from typing import Dict


class Mode(Enum):
    """Instrument the point value is quoted in. Value is the display label."""

    SP1 = "SP1!"
    NQ1 = "NQ1!"

    @property
    def label(self) -> str:
        return self.value

    @property
    def divisor(self) -> float:
        return DIVISORS[self]

    @classmethod
    def from_label(cls, label: str) -> "Mode":
        return cls(label)


# Point divisor per instrument; keep in sync with Mode
DIVISORS: Dict[Mode, float] = {
    Mode.SP1: 102.0,
    Mode.NQ1: 79.52,
}

DEFAULT_MODE = Mode.SP1
