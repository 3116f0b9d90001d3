from __future__ import annotations

import random
import sys
import unittest
from pathlib import Path
from unittest import mock


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from ai import opponent  # noqa: E402
from ai.agents import create_computer_controller  # noqa: E402
from core.board import Board  # noqa: E402
from core.move import Move  # noqa: E402
from core.pieces import Side  # noqa: E402
from core.player import PlayerKind  # noqa: E402


def _step_and_capture_board() -> Board:
    board = Board.empty(turn=Side.X)
    board.place(2, 1, Side.X)
    board.place(2, 5, Side.X)
    board.place(3, 2, Side.O)
    board.place(5, 4, Side.O)
    return board


class CapturePreferenceTests(unittest.TestCase):
    def test_capture_chosen_over_steps(self) -> None:
        board = _step_and_capture_board()
        for seed in range(25):
            move = opponent.select_move(board, random.Random(seed))
            self.assertEqual(move, Move(2, 1, 4, 3))

    def test_selection_does_not_mutate_board(self) -> None:
        board = _step_and_capture_board()
        before = board.getGrid()
        opponent.select_move(board, random.Random(1))
        self.assertEqual(board.getGrid(), before)
        self.assertIs(board.turn, Side.X)

    def test_random_choice_is_reproducible_with_seed(self) -> None:
        board = Board()
        first = opponent.select_move(board, random.Random(7))
        second = opponent.select_move(board, random.Random(7))
        self.assertEqual(first, second)
        self.assertIn(first, board.getAllValidMoves())


class NoMoveTests(unittest.TestCase):
    def test_blocked_side_has_no_move(self) -> None:
        board = Board.empty(turn=Side.X)
        board.place(7, 0, Side.X)
        board.place(0, 1, Side.O)
        self.assertIsNone(opponent.select_move(board))

    def test_empty_side_has_no_move(self) -> None:
        board = Board.empty(turn=Side.O)
        board.place(2, 1, Side.X)
        self.assertIsNone(opponent.select_move(board))

    def test_index_error_becomes_no_move(self) -> None:
        board = Board()
        with mock.patch.object(board, "isValidMove", side_effect=IndexError("off board")):
            with self.assertLogs("ai.opponent", level="WARNING"):
                self.assertIsNone(opponent.select_move(board))


class SelfPlayTests(unittest.TestCase):
    def _play(self, seed: int, capture_lookahead: int) -> None:
        board = Board(capture_lookahead)
        rng = random.Random(seed)
        for _ in range(200):
            expected = board.getAllValidMoves()
            self.assertEqual(set(opponent._candidate_moves(board)), set(expected))
            move = opponent.select_move(board, rng)
            if move is None:
                self.assertEqual(expected, [])
                return
            self.assertTrue(board.makeMove(*move.as_tuple()), move)
        self.fail("Self-play did not finish.")

    def test_selected_moves_are_always_accepted(self) -> None:
        for seed in range(8):
            with self.subTest(seed=seed):
                self._play(seed, capture_lookahead=1)

    def test_selected_moves_are_accepted_with_single_jumps(self) -> None:
        for seed in range(8):
            with self.subTest(seed=seed):
                self._play(seed, capture_lookahead=0)


class ControllerTests(unittest.TestCase):
    def test_computer_controller_wraps_selector(self) -> None:
        controller = create_computer_controller("Player O", seed=3)
        self.assertEqual(controller.kind, PlayerKind.COMPUTER)
        self.assertFalse(controller.is_human)
        self.assertIn("seed=3", controller.name)

        board = _step_and_capture_board()
        self.assertEqual(controller.select_move(board), Move(2, 1, 4, 3))


if __name__ == "__main__":
    unittest.main()
