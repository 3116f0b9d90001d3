from __future__ import annotations

import logging

import pygame
from pygame import gfxdraw

from core.board import BOARD_SIZE
from core.game import Game
from core.move import Coordinate, Move
from core.pieces import Side

LOGGER = logging.getLogger(__name__)

_CELL = 64
_BORDER = 32
_STATUS_HEIGHT = 96
_COMPUTER_DELAY_MS = 350

_PALETTE = {
    "window": (24, 28, 36),
    "frame": (70, 48, 30),
    "square_light": (238, 220, 186),
    "square_dark": (118, 84, 58),
    "target": (120, 200, 120),
    "pick": (240, 160, 60),
    "edge": (20, 20, 20),
    "label": (200, 200, 205),
    "status": (235, 235, 235),
    "winner": (250, 210, 80),
    Side.X: (240, 240, 240),
    Side.O: (45, 45, 50),
}


class CheckersGUI:
    """Click a piece of the side to move, then click where it should go."""

    def __init__(self, game: Game) -> None:
        self.game = game
        side_pixels = BOARD_SIZE * _CELL + 2 * _BORDER
        self.screen = pygame.display.set_mode((side_pixels, side_pixels + _STATUS_HEIGHT))
        pygame.display.set_caption("Checkers Game")

        self.label_font = pygame.font.SysFont("arial", 15)
        self.status_font = pygame.font.SysFont("arial", 20)
        self.piece_font = pygame.font.SysFont("arial", 24, bold=True)
        self.clock = pygame.time.Clock()

        self.selected: Coordinate | None = None
        self.targets: set[Coordinate] = set()
        self._computer_due_at: int | None = None

    def run(self) -> None:
        while self._handle_events():
            self._maybe_play_computer()
            self._render()
            pygame.display.flip()
            self.clock.tick(30)

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    return False
                if event.key == pygame.K_r:
                    LOGGER.info("Board reset from the GUI.")
                    self.game.reset()
                    self._deselect()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cell = self._cell_at(event.pos)
                if cell is not None:
                    self._on_cell_clicked(cell)
        return True

    def _on_cell_clicked(self, cell: Coordinate) -> None:
        if self.game.winner is not None or self.game.isComputerTurn():
            return

        if self.selected is None:
            if self.game.board.isPieceOwnedByCurrentPlayer(*cell):
                self.selected = cell
                self.targets = {move.end for move in self.game.getValidMoves() if move.start == cell}
            return

        move = Move(*self.selected, *cell)
        if not self.game.makeMove(move):
            LOGGER.debug("Deselecting after invalid move %s.", move)
        self._deselect()

    def _maybe_play_computer(self) -> None:
        if self.game.winner is not None or not self.game.isComputerTurn():
            self._computer_due_at = None
            return
        now = pygame.time.get_ticks()
        if self._computer_due_at is None:
            self._computer_due_at = now + _COMPUTER_DELAY_MS
        elif now >= self._computer_due_at:
            self._computer_due_at = None
            self.game.requestComputerMove()

    def _deselect(self) -> None:
        self.selected = None
        self.targets = set()

    def _cell_at(self, pos: tuple[int, int]) -> Coordinate | None:
        col = (pos[0] - _BORDER) // _CELL
        row = (pos[1] - _BORDER) // _CELL
        if pos[0] < _BORDER or pos[1] < _BORDER or row >= BOARD_SIZE or col >= BOARD_SIZE:
            return None
        return (row, col)

    def _square(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(_BORDER + col * _CELL, _BORDER + row * _CELL, _CELL, _CELL)

    # drawing ------------------------------------------------------------

    def _render(self) -> None:
        self.screen.fill(_PALETTE["window"])
        board_area = pygame.Rect(_BORDER, _BORDER, BOARD_SIZE * _CELL, BOARD_SIZE * _CELL)
        pygame.draw.rect(self.screen, _PALETTE["frame"], board_area.inflate(12, 12), border_radius=6)

        grid = self.game.board.getGrid()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                shade = "square_dark" if (row + col) % 2 else "square_light"
                square = self._square(row, col)
                pygame.draw.rect(self.screen, _PALETTE[shade], square)
                if (row, col) == self.selected:
                    pygame.draw.rect(self.screen, _PALETTE["pick"], square, 3)
                if grid[row][col] is not None:
                    self._draw_piece(square, grid[row][col])
                elif (row, col) in self.targets:
                    gfxdraw.filled_circle(self.screen, square.centerx, square.centery, 9, (*_PALETTE["target"], 170))

        self._draw_labels(board_area)
        self._draw_status(board_area.bottom + _BORDER)

    def _draw_piece(self, square: pygame.Rect, side: Side) -> None:
        radius = _CELL // 2 - 7
        gfxdraw.filled_circle(self.screen, square.centerx, square.centery, radius, _PALETTE[side])
        gfxdraw.aacircle(self.screen, square.centerx, square.centery, radius, _PALETTE["edge"])
        letter = self.piece_font.render(side.label, True, _PALETTE[side.opponent])
        self.screen.blit(letter, letter.get_rect(center=square.center))

    def _draw_labels(self, board_area: pygame.Rect) -> None:
        for index in range(BOARD_SIZE):
            file_label = self.label_font.render("abcdefgh"[index], True, _PALETTE["label"])
            rank_label = self.label_font.render(str(BOARD_SIZE - index), True, _PALETTE["label"])
            offset = _BORDER + index * _CELL + _CELL // 2
            self.screen.blit(file_label, file_label.get_rect(center=(offset, board_area.bottom + _BORDER // 2)))
            self.screen.blit(rank_label, rank_label.get_rect(center=(_BORDER // 2, offset)))

    def _draw_status(self, top: int) -> None:
        board = self.game.board
        winner = self.game.winner
        if winner is not None:
            headline, tone = f"Player {winner.label} wins!", "winner"
        else:
            seat = self.game.currentController()
            headline, tone = f"{seat.name} to move ({self.game.current_player.label})", "status"
        lines = [
            (headline, tone),
            (f"X: {board.countPieces(Side.X)} pieces   O: {board.countPieces(Side.O)} pieces", "status"),
            ("R: reset   Esc/Q: quit", "label"),
        ]
        for index, (text, tone) in enumerate(lines):
            surface = self.status_font.render(text, True, _PALETTE[tone])
            self.screen.blit(surface, (_BORDER, top + index * 26))
