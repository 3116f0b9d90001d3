from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from core.board import Board  # noqa: E402
from core.game import Game  # noqa: E402
from core.pieces import Side  # noqa: E402
from ui.console import CheckersConsole  # noqa: E402


class _Script:
    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


def _console(game: Game, *lines: str, seed: int | None = None) -> tuple[CheckersConsole, list[str]]:
    output: list[str] = []
    console = CheckersConsole(game, seed=seed, input_fn=_Script(*lines), output_fn=output.append)
    return console, output


class ConsoleSessionTests(unittest.TestCase):
    def test_invalid_opponent_choice_exits(self) -> None:
        game = Game()
        console, output = _console(game, "Z")
        self.assertIsNone(console.start())
        self.assertIn("Invalid choice. Exiting game.", output)
        self.assertEqual(game.move_count, 0)

    def test_bad_input_is_reported_without_mutation(self) -> None:
        game = Game()
        console, output = _console(game, "P", "hello", "6b-4b", "6b-5a")
        self.assertIsNone(console.start())

        self.assertIn(
            "Invalid move format. Please enter the move in the correct format (e.g., 3a-4b).",
            output,
        )
        self.assertIn("Invalid move. Try again.", output)
        self.assertEqual(game.move_count, 1)
        self.assertIs(game.board.getPiece(3, 0), Side.X)
        self.assertIs(game.current_player, Side.O)
        self.assertEqual(output[-1], "Game over!")

    def test_winning_capture_ends_session(self) -> None:
        game = Game(capture_lookahead=0)
        board = Board.empty(turn=Side.X, capture_lookahead=0)
        board.place(2, 1, Side.X)
        board.place(3, 2, Side.O)
        game.board = board

        console, output = _console(game, "6b-4d")
        self.assertIs(console.start("P"), Side.X)
        self.assertIn("No valid moves left for Player O. Player X wins!", output)

    def test_computer_replies_to_human_move(self) -> None:
        game = Game()
        console, output = _console(game, "6b-5a", seed=11)
        console.start("C")

        self.assertIn("Start game against computer.", output)
        self.assertTrue(any(line.startswith("Computer played ") for line in output))
        self.assertEqual(game.move_count, 2)
        self.assertIs(game.current_player, Side.X)
        self.assertFalse(game.getPlayer(Side.O).is_human)

    def test_quit_command_stops_loop(self) -> None:
        game = Game()
        console, output = _console(game, "q")
        self.assertIsNone(console.start("p"))
        self.assertIn("Exiting game.", output)


if __name__ == "__main__":
    unittest.main()
