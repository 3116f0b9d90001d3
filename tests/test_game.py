from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from ai.agents import create_computer_controller  # noqa: E402
from core.board import Board  # noqa: E402
from core.game import Game  # noqa: E402
from core.move import Move  # noqa: E402
from core.pieces import Side  # noqa: E402


def _one_capture_from_win(capture_lookahead: int = 0) -> Game:
    game = Game(capture_lookahead)
    board = Board.empty(turn=Side.X, capture_lookahead=capture_lookahead)
    board.place(2, 1, Side.X)
    board.place(3, 2, Side.O)
    game.board = board
    return game


class GameMoveTests(unittest.TestCase):
    def test_make_move_tracks_progress(self) -> None:
        game = Game()
        move = Move(2, 1, 3, 0)
        self.assertTrue(game.makeMove(move))
        self.assertEqual(game.move_count, 1)
        self.assertEqual(game.last_move, move)
        self.assertIs(game.current_player, Side.O)
        self.assertIsNone(game.winner)

    def test_rejected_move_changes_nothing(self) -> None:
        game = Game()
        self.assertFalse(game.makeMove(Move(2, 1, 4, 3)))
        self.assertEqual(game.move_count, 0)
        self.assertIsNone(game.last_move)
        self.assertIs(game.current_player, Side.X)

    def test_capturing_last_piece_wins(self) -> None:
        game = _one_capture_from_win()
        self.assertTrue(game.makeMove(Move(2, 1, 4, 3)))
        self.assertIs(game.winner, Side.X)
        self.assertTrue(game.board.noPiecesLeft())
        self.assertFalse(game.makeMove(Move(4, 3, 5, 4)))

    def test_reset_keeps_lookahead_and_seats(self) -> None:
        game = Game(capture_lookahead=0)
        controller = create_computer_controller("Player O", seed=1)
        game.setPlayer(Side.O, controller)
        game.makeMove(Move(2, 1, 3, 0))
        game.reset()
        self.assertEqual(game.board.capture_lookahead, 0)
        self.assertEqual(game.move_count, 0)
        self.assertIs(game.getPlayer(Side.O), controller)
        self.assertEqual(game.board.countPieces(Side.X), 12)


class ComputerTurnTests(unittest.TestCase):
    def test_human_seat_does_not_move(self) -> None:
        game = Game()
        self.assertFalse(game.isComputerTurn())
        self.assertFalse(game.requestComputerMove())
        self.assertEqual(game.move_count, 0)

    def test_computer_seat_plays_a_legal_move(self) -> None:
        game = Game()
        game.setPlayer(Side.X, create_computer_controller("Player X", seed=5))
        self.assertTrue(game.isComputerTurn())
        self.assertTrue(game.requestComputerMove())
        self.assertEqual(game.move_count, 1)
        self.assertIs(game.current_player, Side.O)

    def test_computer_without_moves_concedes(self) -> None:
        game = Game()
        board = Board.empty(turn=Side.O)
        board.place(0, 1, Side.O)
        board.place(7, 0, Side.X)
        game.board = board
        game.setPlayer(Side.O, create_computer_controller("Player O", seed=0))
        self.assertFalse(game.requestComputerMove())
        self.assertIs(game.winner, Side.X)


if __name__ == "__main__":
    unittest.main()
