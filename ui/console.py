from __future__ import annotations

import logging
from typing import Callable, Optional

from ai.agents import create_computer_controller
from core.game import Game
from core.notation import format_move, parse_move
from core.pieces import Side

LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MOVE_HINT = "Choose a cell position of piece to be moved and the new position. e.g., 3a-4b"
QUIT_COMMANDS = ("q", "quit", "exit")


class CheckersConsole:
    """Text front-end: prints the board and reads moves such as ``3a-4b``."""

    def __init__(
        self,
        game: Optional[Game] = None,
        *,
        seed: Optional[int] = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.game = game if game is not None else Game()
        self.seed = seed
        self._input = input_fn
        self._output = output_fn

    def start(self, opponent: Optional[str] = None) -> Optional[Side]:
        if opponent is None:
            self._output(
                "Begin Game. Enter 'P' if you want to play against another player; "
                "enter 'C' to play against the computer."
            )
            opponent = self._read("")
            if opponent is None:
                return None
        choice = opponent.strip().upper()
        if choice not in ("P", "C"):
            self._output("Invalid choice. Exiting game.")
            return None

        if choice == "C":
            self.game.setPlayer(Side.O, create_computer_controller("Player O", seed=self.seed))
            self._output("Start game against computer.")
        else:
            self._output("Start game against another player.")

        winner = self.play()
        self.display_board()
        self._output("Game over!")
        return winner

    def play(self) -> Optional[Side]:
        while True:
            side = self.game.current_player
            winner = self.game.board.winner()
            if winner is not None:
                self.display_board()
                self._output(f"No valid moves left for Player {side.label}. Player {winner.label} wins!")
                return winner

            if self.game.isComputerTurn():
                if not self.game.requestComputerMove():
                    self._output(f"Computer has no valid moves. Player {side.opponent.label} wins!")
                    return self.game.winner
                self._output(f"Computer played {format_move(self.game.last_move)}.")
                continue

            self.display_board()
            self._output(f"You are Player {side.label}. It is your turn.")
            self._output(MOVE_HINT)
            text = self._read("Enter move: ")
            if text is None or text.strip().lower() in QUIT_COMMANDS:
                self._output("Exiting game.")
                return None

            move = parse_move(text)
            if move is None:
                self._output("Invalid move format. Please enter the move in the correct format (e.g., 3a-4b).")
                continue
            if not self.game.makeMove(move):
                self._output("Invalid move. Try again.")

    def display_board(self) -> None:
        self._output(self.game.board.render())

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt)
        except EOFError:
            LOGGER.debug("Console input closed.")
            return None
