"""Square notation used by the text console: ``3a-4b``.

The digit is the row label counted from the bottom edge (8 is row 0) and the
letter the column label ``a``-``h``.
"""

from __future__ import annotations

import re
from typing import Optional

from .board import BOARD_SIZE
from .move import Coordinate, Move

_MOVE_PATTERN = re.compile(r"^([1-8])([a-h])\s*-\s*([1-8])([a-h])$")


def parse_square(label: str, letter: str) -> Coordinate:
    return (BOARD_SIZE - int(label), ord(letter) - ord("a"))


def format_square(row: int, col: int) -> str:
    return f"{BOARD_SIZE - row}{chr(ord('a') + col)}"


def parse_move(text: str) -> Optional[Move]:
    match = _MOVE_PATTERN.match(text.strip().lower())
    if match is None:
        return None
    start_row, start_col = parse_square(match.group(1), match.group(2))
    end_row, end_col = parse_square(match.group(3), match.group(4))
    return Move(start_row, start_col, end_row, end_col)


def format_move(move: Move) -> str:
    return f"{format_square(*move.start)}-{format_square(*move.end)}"
