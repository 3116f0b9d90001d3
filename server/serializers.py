from __future__ import annotations

from typing import Any, Optional

from core.game import Game
from core.move import Move
from core.notation import format_move
from core.pieces import Side
from core.player import PlayerController


def _coord_tuple_to_dict(coord: tuple[int, int]) -> dict[str, int]:
    row, col = coord
    return {"row": row, "col": col}


def serialize_move(move: Optional[Move]) -> Optional[dict[str, Any]]:
    if move is None:
        return None
    captured = move.captured
    return {
        "start": _coord_tuple_to_dict(move.start),
        "end": _coord_tuple_to_dict(move.end),
        "captured": _coord_tuple_to_dict(captured) if captured else None,
        "isCapture": move.is_capture,
        "notation": format_move(move),
    }


def serialize_controller(controller: PlayerController) -> dict[str, str]:
    return {"kind": controller.kind.value, "name": controller.name}


def serialize_grid(game: Game) -> list[list[Optional[str]]]:
    return [[cell.value if cell else None for cell in row] for row in game.board.getGrid()]


def serialize_game(game: Game, player_settings: dict[Side, dict[str, Any]]) -> dict[str, Any]:
    board = game.board
    valid_moves = game.getValidMoves() if game.winner is None else []
    return {
        "boardSize": board.boardSize,
        "grid": serialize_grid(game),
        "turn": game.current_player.value,
        "winner": game.winner.value if game.winner else None,
        "captureLookahead": board.capture_lookahead,
        "pieceCounts": {side.value: board.countPieces(side) for side in Side},
        "validMoves": [serialize_move(move) for move in valid_moves],
        "moveCount": game.move_count,
        "lastMove": serialize_move(game.last_move),
        "players": {side.value: serialize_controller(game.getPlayer(side)) for side in Side},
        "playerConfig": {side.value: player_settings[side].copy() for side in Side},
    }
