from __future__ import annotations

from enum import Enum


class Side(Enum):
    X = "x"
    O = "o"

    @property
    def opponent(self) -> "Side":
        return Side.O if self is Side.X else Side.X

    @property
    def forward(self) -> int:
        """Row delta of a non-capturing move for this side."""
        return 1 if self is Side.X else -1

    @property
    def label(self) -> str:
        return self.value.upper()
