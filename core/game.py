from __future__ import annotations

import logging
from typing import Optional

from .board import DEFAULT_CAPTURE_LOOKAHEAD, Board
from .move import Move
from .pieces import Side
from .player import PlayerController

LOGGER = logging.getLogger(__name__)


class Game:
    """One engine value plus the two seats playing on it."""

    def __init__(self, capture_lookahead: int = DEFAULT_CAPTURE_LOOKAHEAD):
        self.board = Board(capture_lookahead)
        self.winner: Optional[Side] = None
        self.move_count = 0
        self.last_move: Optional[Move] = None
        self.players: dict[Side, PlayerController] = {
            Side.X: PlayerController.human("Player X"),
            Side.O: PlayerController.human("Player O"),
        }

    @property
    def current_player(self) -> Side:
        return self.board.turn

    def reset(self, capture_lookahead: Optional[int] = None) -> None:
        if capture_lookahead is None:
            capture_lookahead = self.board.capture_lookahead
        self.board = Board(capture_lookahead)
        self.winner = None
        self.move_count = 0
        self.last_move = None

    def setPlayer(self, side: Side, controller: PlayerController) -> None:
        self.players[side] = controller

    def getPlayer(self, side: Side) -> PlayerController:
        return self.players[side]

    def currentController(self) -> PlayerController:
        return self.getPlayer(self.current_player)

    def isComputerTurn(self) -> bool:
        return not self.currentController().is_human

    def getValidMoves(self) -> list[Move]:
        return self.board.getAllValidMoves()

    def makeMove(self, move: Move) -> bool:
        if self.winner is not None:
            LOGGER.debug("Ignoring move %s: game already won by %s.", move, self.winner.value)
            return False
        if not self.board.makeMove(*move.as_tuple()):
            return False
        self.move_count += 1
        self.last_move = move
        self.winner = self.board.winner()
        if self.winner is not None:
            LOGGER.info("Game over after %d moves, winner %s.", self.move_count, self.winner.value)
        return True

    def requestComputerMove(self) -> bool:
        controller = self.currentController()
        if controller.is_human or self.winner is not None:
            return False
        move = controller.select_move(self.board)
        if move is None:
            LOGGER.info("%s cannot find a move.", controller.name)
            self.winner = self.current_player.opponent
            return False
        return self.makeMove(move)
