"""Computer opponents."""

from .agents import create_computer_controller
from .opponent import select_move

__all__ = ["create_computer_controller", "select_move"]
