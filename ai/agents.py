from __future__ import annotations

import random
from typing import Optional

from core.board import Board
from core.player import PlayerController, PlayerKind

from .opponent import select_move

__all__ = ["create_computer_controller"]


def create_computer_controller(name: str, seed: Optional[int] = None) -> PlayerController:
	rng = random.Random(seed)

	def _policy(board: Board):
		return select_move(board, rng)

	suffix = f" (seed={seed})" if seed is not None else ""
	return PlayerController(
		kind=PlayerKind.COMPUTER,
		name=f"{name} Computer{suffix}",
		policy=_policy,
	)
