from __future__ import annotations

import logging
from copy import deepcopy
from threading import Lock
from typing import Any, Optional

from ai.agents import create_computer_controller
from core.board import DEFAULT_CAPTURE_LOOKAHEAD
from core.game import Game
from core.move import Move
from core.notation import parse_move
from core.pieces import Side
from core.player import PlayerController

from .schemas import ComputerMoveRequest, ConfigRequest, MoveRequest, ResetRequest
from .serializers import serialize_game, serialize_move

LOGGER = logging.getLogger(__name__)


def _default_player_settings() -> dict[str, Any]:
    return {"type": "human", "seed": None}


def _side_from_label(label: str) -> Side:
    try:
        return Side(label.lower())
    except ValueError as exc:
        raise ValueError(f"Unsupported side '{label}'.") from exc


class GameSession:
    """Thread-safe orchestrator around a single Game instance."""

    def __init__(self, capture_lookahead: int = DEFAULT_CAPTURE_LOOKAHEAD) -> None:
        self.lock = Lock()
        self.game = Game(capture_lookahead)
        self.player_settings: dict[Side, dict[str, Any]] = {
            Side.X: _default_player_settings(),
            Side.O: _default_player_settings(),
        }
        self._apply_player_controllers()

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def reset(self, payload: Optional[ResetRequest] = None) -> dict[str, Any]:
        with self.lock:
            lookahead = payload.captureLookahead if payload else None
            self.game.reset(capture_lookahead=lookahead)
            self._apply_player_controllers()
            LOGGER.info("Session reset (capture lookahead %d).", self.game.board.capture_lookahead)
            return self._serialize_locked()

    def configure_players(self, payload: ConfigRequest) -> dict[str, Any]:
        with self.lock:
            config = payload.model_dump(exclude_unset=True)
            for side_label, overrides in config.items():
                side = _side_from_label(side_label)
                merged = deepcopy(self.player_settings[side])
                for key, value in (overrides or {}).items():
                    if value is not None:
                        merged[key] = value
                controller = self._controller_from_settings(side, merged)
                self.player_settings[side] = merged
                self.game.setPlayer(side, controller)
            return self._serialize_locked()

    def get_valid_moves(self, row: int, col: int) -> dict[str, Any]:
        with self.lock:
            board = self.game.board
            if board.getPiece(row, col) is None:
                raise ValueError(f"No piece at row {row}, col {col}.")
            if not board.isPieceOwnedByCurrentPlayer(row, col):
                raise ValueError("It is not this piece's turn.")
            moves = [move for move in self.game.getValidMoves() if move.start == (row, col)]
            return {
                "piece": {"row": row, "col": col},
                "moves": [serialize_move(move) for move in moves],
            }

    def make_move(self, payload: MoveRequest) -> dict[str, Any]:
        with self.lock:
            move = self._move_from_payload(payload)
            if self.game.winner is not None:
                raise ValueError("The game is already over.")
            if not self.game.board.isPieceOwnedByCurrentPlayer(move.start_row, move.start_col):
                raise ValueError("Selected piece cannot move now.")
            if not self.game.makeMove(move):
                raise ValueError("Requested move is not legal.")
            return self._serialize_locked()

    def run_computer_move(self, payload: Optional[ComputerMoveRequest] = None) -> dict[str, Any]:
        with self.lock:
            side = self.game.current_player
            if payload is not None and payload.side is not None and _side_from_label(payload.side) != side:
                raise ValueError("Computer move requested for a side that is not on turn.")
            if self.game.winner is not None:
                raise ValueError("The game is already over.")
            controller = self.game.getPlayer(side)
            seed = payload.seed if payload is not None else None
            if controller.is_human or seed is not None:
                settings = deepcopy(self.player_settings[side])
                settings["type"] = "computer"
                if seed is not None:
                    settings["seed"] = seed
                controller = self._controller_from_settings(side, settings)
            move = controller.select_move(self.game.board)
            if move is None or not self.game.makeMove(move):
                raise RuntimeError("Computer could not choose a move.")
            return self._serialize_locked()

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game, self.player_settings)

    def _move_from_payload(self, payload: MoveRequest) -> Move:
        if payload.notation is not None:
            move = parse_move(payload.notation)
            if move is None:
                raise ValueError(f"Malformed move notation '{payload.notation}'.")
            return move
        return Move(payload.start.row, payload.start.col, payload.end.row, payload.end.col)

    def _apply_player_controllers(self) -> None:
        for side in (Side.X, Side.O):
            controller = self._controller_from_settings(side, self.player_settings[side])
            self.game.setPlayer(side, controller)

    def _controller_from_settings(self, side: Side, settings: dict[str, Any]) -> PlayerController:
        label = f"Player {side.label}"
        player_type = settings.get("type", "human")
        if player_type == "human":
            return PlayerController.human(label)
        if player_type == "computer":
            return create_computer_controller(label, seed=settings.get("seed"))
        raise ValueError(f"Player type '{player_type}' not implemented yet.")
