from __future__ import annotations

import logging
import random
from typing import Optional

from core.board import Board
from core.move import Move

LOGGER = logging.getLogger(__name__)

_COLUMN_DELTAS = (-1, 1)


def select_move(board: Board, rng: Optional[random.Random] = None) -> Optional[Move]:
	"""Pick the first capture in board order, otherwise a uniformly random move."""
	try:
		candidates = _candidate_moves(board)
	except IndexError:
		LOGGER.warning("Index out of bounds while generating a move for %s.", board.turn.value, exc_info=True)
		return None
	if not candidates:
		return None

	for move in candidates:
		if move.is_capture:
			LOGGER.debug("Opponent takes capture %s.", move)
			return move

	chooser = rng if rng is not None else random
	move = chooser.choice(candidates)
	LOGGER.debug("Opponent plays %s out of %d candidates.", move, len(candidates))
	return move


def _candidate_moves(board: Board) -> list[Move]:
	moves: list[Move] = []
	side = board.turn
	forward = side.forward
	for row in range(board.boardSize):
		for col in range(board.boardSize):
			if board.getPiece(row, col) is not side:
				continue
			for dc in _COLUMN_DELTAS:
				end_row, end_col = row + forward, col + dc
				if board.isValidMove(row, col, end_row, end_col):
					moves.append(Move(row, col, end_row, end_col))
				elif board.isValidMove(row, col, end_row + forward, end_col + dc):
					moves.append(Move(row, col, end_row + forward, end_col + dc))
	return moves
