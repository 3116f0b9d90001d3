"""Core checkers engine package."""

from .board import Board
from .game import Game
from .move import Coordinate, Move
from .pieces import Side
from .player import PlayerController, PlayerKind

__all__ = [
    "Board",
    "Game",
    "Move",
    "Coordinate",
    "Side",
    "PlayerController",
    "PlayerKind",
]
