from __future__ import annotations

import argparse
import logging

from core.board import DEFAULT_CAPTURE_LOOKAHEAD, MAX_CAPTURE_LOOKAHEAD

LOGGER = logging.getLogger("checkers")


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play checkers in the console, a pygame window or over HTTP.")
	parser.add_argument("--ui", choices=["console", "gui", "api"], default="console", help="Front-end to run.")
	parser.add_argument(
		"--opponent",
		choices=["player", "computer"],
		default=None,
		help="Opponent for side O (console asks when omitted, GUI defaults to player).",
	)
	parser.add_argument("--seed", type=int, default=None, help="RNG seed for the computer opponent.")
	parser.add_argument(
		"--capture-lookahead",
		type=int,
		choices=range(0, MAX_CAPTURE_LOOKAHEAD + 1),
		default=DEFAULT_CAPTURE_LOOKAHEAD,
		metavar=f"[0-{MAX_CAPTURE_LOOKAHEAD}]",
		help="Further captures required after a capture (0 allows single jumps).",
	)
	parser.add_argument("--host", default="127.0.0.1", help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=8000, help="Port for the API server.")
	parser.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")
	parser.add_argument("--log-level", default="WARNING", help="Python logging level")
	return parser.parse_args()


def run_console(args: argparse.Namespace) -> None:
	from core.game import Game
	from ui.console import CheckersConsole

	opponent = None
	if args.opponent is not None:
		opponent = "C" if args.opponent == "computer" else "P"
	console = CheckersConsole(Game(args.capture_lookahead), seed=args.seed)
	console.start(opponent)


def run_gui(args: argparse.Namespace) -> None:
	import pygame

	from ai.agents import create_computer_controller
	from core.game import Game
	from core.pieces import Side
	from ui.pygame_gui import CheckersGUI

	pygame.init()
	try:
		game = Game(args.capture_lookahead)
		if args.opponent == "computer":
			game.setPlayer(Side.O, create_computer_controller("Player O", seed=args.seed))
		gui = CheckersGUI(game)
		gui.run()
	finally:
		pygame.quit()


def run_api(args: argparse.Namespace) -> None:
	import uvicorn

	if args.reload:
		target = "server.app:app"
	else:
		from server.app import create_app

		target = create_app(args.capture_lookahead)
	uvicorn.run(
		target,
		host=args.host,
		port=args.port,
		reload=args.reload,
		log_level=args.log_level.lower(),
	)


def main() -> None:
	args = parse_args()
	logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
	LOGGER.debug("Starting %s front-end.", args.ui)
	if args.ui == "gui":
		run_gui(args)
	elif args.ui == "api":
		run_api(args)
	else:
		run_console(args)


if __name__ == "__main__":
	main()
