from __future__ import annotations

import logging
from typing import Optional

from .move import Move
from .pieces import Side

LOGGER = logging.getLogger(__name__)

BOARD_SIZE = 8
START_ROWS = 3
DEFAULT_CAPTURE_LOOKAHEAD = 1
MAX_CAPTURE_LOOKAHEAD = 6

Cell = Optional[Side]
Grid = list[list[Cell]]
GridSnapshot = tuple[tuple[Cell, ...], ...]

_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_COLUMN_DELTAS = (-1, 1)
_COLUMN_LABELS = "abcdefgh"


def _is_within_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def _clamp_lookahead(depth: int) -> int:
    return max(0, min(MAX_CAPTURE_LOOKAHEAD, int(depth)))


def _copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def _apply_in_place(grid: Grid, start_row: int, start_col: int, end_row: int, end_col: int) -> None:
    grid[end_row][end_col] = grid[start_row][start_col]
    grid[start_row][start_col] = None
    if abs(end_row - start_row) == 2 and abs(end_col - start_col) == 2:
        grid[(start_row + end_row) // 2][(start_col + end_col) // 2] = None


def _validate(
    grid: Grid,
    side: Side,
    start_row: int,
    start_col: int,
    end_row: int,
    end_col: int,
    lookahead: int,
) -> bool:
    if not _is_within_bounds(start_row, start_col) or grid[start_row][start_col] is not side:
        return False
    if not _is_within_bounds(end_row, end_col):
        return False
    if grid[end_row][end_col] is not None:
        return False

    shape = (abs(end_row - start_row), abs(end_col - start_col))
    if shape == (2, 2):
        mid_row = (start_row + end_row) // 2
        mid_col = (start_col + end_col) // 2
        if grid[mid_row][mid_col] is not side.opponent:
            return False
        if lookahead > 0 and not _has_further_capture(
            grid, side, start_row, start_col, end_row, end_col, lookahead - 1
        ):
            return False
    elif shape != (1, 1):
        return False

    return (end_row - start_row) * side.forward > 0


def _has_further_capture(
    grid: Grid,
    side: Side,
    start_row: int,
    start_col: int,
    end_row: int,
    end_col: int,
    lookahead: int,
) -> bool:
    # Probed on a copy with the capture already played; the live grid is never touched.
    hypothetical = _copy_grid(grid)
    _apply_in_place(hypothetical, start_row, start_col, end_row, end_col)
    return any(
        _validate(hypothetical, side, end_row, end_col, end_row + 2 * dr, end_col + 2 * dc, lookahead)
        for dr, dc in _DIAGONALS
    )


class Board:
    """Rules engine: 8x8 grid, side to move and move legality."""

    def __init__(self, capture_lookahead: int = DEFAULT_CAPTURE_LOOKAHEAD) -> None:
        self.board: Grid = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        self.boardSize = BOARD_SIZE
        self.turn = Side.X
        self.capture_lookahead = _clamp_lookahead(capture_lookahead)
        self._set_start_pieces()

    @classmethod
    def empty(
        cls,
        *,
        turn: Side = Side.X,
        capture_lookahead: int = DEFAULT_CAPTURE_LOOKAHEAD,
    ) -> "Board":
        board = cls(capture_lookahead)
        board.board = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        board.turn = turn
        return board

    def copy(self) -> "Board":
        new_board = Board.empty(turn=self.turn, capture_lookahead=self.capture_lookahead)
        new_board.board = _copy_grid(self.board)
        return new_board

    def place(self, row: int, col: int, side: Cell) -> None:
        if not _is_within_bounds(row, col):
            raise ValueError(f"Square {row},{col} is off the board.")
        if side is not None and (row + col) % 2 == 0:
            raise ValueError(f"Square {row},{col} is a light square.")
        self.board[row][col] = side

    # queries ------------------------------------------------------------

    def getPiece(self, row: int, col: int) -> Cell:
        if _is_within_bounds(row, col):
            return self.board[row][col]
        return None

    def getGrid(self) -> GridSnapshot:
        return tuple(tuple(row) for row in self.board)

    def countPieces(self, side: Side) -> int:
        return sum(1 for row in self.board for cell in row if cell is side)

    def isPieceOwnedByCurrentPlayer(self, row: int, col: int) -> bool:
        return self.getPiece(row, col) is self.turn

    def noPiecesLeft(self) -> bool:
        return self.countPieces(self.turn) == 0

    def isGameOver(self) -> bool:
        """Reserved; callers derive the result from ``winner()``."""
        return False

    def winner(self) -> Optional[Side]:
        if self.noPiecesLeft() or not self.getAllValidMoves():
            return self.turn.opponent
        return None

    # rules --------------------------------------------------------------

    def isValidMove(self, start_row: int, start_col: int, end_row: int, end_col: int) -> bool:
        return _validate(
            self.board,
            self.turn,
            start_row,
            start_col,
            end_row,
            end_col,
            self.capture_lookahead,
        )

    def makeMove(self, start_row: int, start_col: int, end_row: int, end_col: int) -> bool:
        if not self.isValidMove(start_row, start_col, end_row, end_col):
            LOGGER.debug(
                "Rejected move %d,%d -> %d,%d for %s.",
                start_row,
                start_col,
                end_row,
                end_col,
                self.turn.value,
            )
            return False
        _apply_in_place(self.board, start_row, start_col, end_row, end_col)
        self.turn = self.turn.opponent
        return True

    def getAllValidMoves(self) -> list[Move]:
        moves: list[Move] = []
        forward = self.turn.forward
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.board[row][col] is not self.turn:
                    continue
                for dc in _COLUMN_DELTAS:
                    if self.isValidMove(row, col, row + forward, col + dc):
                        moves.append(Move(row, col, row + forward, col + dc))
                    elif self.isValidMove(row, col, row + 2 * forward, col + 2 * dc):
                        moves.append(Move(row, col, row + 2 * forward, col + 2 * dc))
        return moves

    # display ------------------------------------------------------------

    def render(self) -> str:
        lines = ["  " + " ".join(_COLUMN_LABELS)]
        for row in range(BOARD_SIZE):
            cells = "".join(f"|{cell.value if cell else '_'}" for cell in self.board[row])
            lines.append(f"{BOARD_SIZE - row} {cells}|")
        return "\n".join(lines)

    def printBoard(self) -> None:
        print(self.render())

    def _set_start_pieces(self) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if (row + col) % 2 == 1:
                    if row < START_ROWS:
                        self.board[row][col] = Side.X
                    elif row >= BOARD_SIZE - START_ROWS:
                        self.board[row][col] = Side.O
