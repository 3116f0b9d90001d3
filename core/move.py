from __future__ import annotations

from dataclasses import dataclass

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Move:
    start_row: int
    start_col: int
    end_row: int
    end_col: int

    @property
    def start(self) -> Coordinate:
        return (self.start_row, self.start_col)

    @property
    def end(self) -> Coordinate:
        return (self.end_row, self.end_col)

    @property
    def is_capture(self) -> bool:
        return abs(self.end_row - self.start_row) == 2 and abs(self.end_col - self.start_col) == 2

    @property
    def captured(self) -> Coordinate | None:
        if not self.is_capture:
            return None
        return ((self.start_row + self.end_row) // 2, (self.start_col + self.end_col) // 2)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.start_row, self.start_col, self.end_row, self.end_col)

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return f"{self.start_row},{self.start_col}{connector}{self.end_row},{self.end_col}"
