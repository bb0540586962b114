from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from gridsnake.board import BODY, FOOD, HEAD, encode_board
from gridsnake.game import GameConfig
from gridsnake.session import SnakeSession

Color = Tuple[int, int, int]

BACKGROUND: Color = (15, 23, 42)
GRID_LINE: Color = (30, 38, 56)
BODY_COLOR: Color = (22, 163, 74)
HEAD_COLOR: Color = (34, 197, 94)
FOOD_COLOR: Color = (250, 204, 21)
TEXT_COLOR: Color = (229, 231, 235)
OVERLAY_RGBA = (2, 6, 23, 115)


class Renderer:
    """Draws a session onto any pygame surface, one cell per ``cell_size`` px."""

    def __init__(self, cell_size: int = 24) -> None:
        self.cell_size = cell_size
        pygame.font.init()
        self._hud_font = pygame.font.Font(None, 22)
        self._overlay_font = pygame.font.Font(None, 48)

    def window_size(self, config: GameConfig) -> Tuple[int, int]:
        return config.columns * self.cell_size, config.rows * self.cell_size

    def board_surface(self, session: SnakeSession) -> pygame.Surface:
        board = encode_board(session.config, session.state)
        pixels = np.empty(board.shape[1:] + (3,), dtype=np.uint8)
        pixels[:] = BACKGROUND
        pixels[board[FOOD] > 0] = FOOD_COLOR
        pixels[board[BODY] > 0] = BODY_COLOR
        pixels[board[HEAD] > 0] = HEAD_COLOR
        # surfarray indexes [x, y]
        surface = pygame.surfarray.make_surface(pixels.transpose(1, 0, 2))
        return pygame.transform.scale(surface, self.window_size(session.config))

    def draw(self, target: pygame.Surface, session: SnakeSession) -> None:
        target.blit(self.board_surface(session), (0, 0))

        config = session.config
        for x in range(config.columns):
            for y in range(config.rows):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size,
                    self.cell_size,
                )
                pygame.draw.rect(target, GRID_LINE, rect, 1)

        score = self._hud_font.render(f"Score: {session.state.score}", True, TEXT_COLOR)
        target.blit(score, (8, 6))

        if session.state.is_game_over:
            self._overlay(target, "GAME OVER")
        elif session.paused:
            self._overlay(target, "PAUSE")

    def _overlay(self, target: pygame.Surface, text: str) -> None:
        shade = pygame.Surface(target.get_size(), pygame.SRCALPHA)
        shade.fill(OVERLAY_RGBA)
        target.blit(shade, (0, 0))
        label = self._overlay_font.render(text, True, TEXT_COLOR)
        target.blit(label, label.get_rect(center=target.get_rect().center))


def open_window(renderer: Renderer, config: GameConfig, caption: Optional[str] = None) -> pygame.Surface:
    pygame.init()
    window = pygame.display.set_mode(renderer.window_size(config))
    pygame.display.set_caption(caption or "Snake")
    return window
