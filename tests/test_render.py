import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from dataclasses import replace

import pygame

from gridsnake.controls import action_for_key
from gridsnake.game import GameConfig, Point
from gridsnake.render import BODY_COLOR, FOOD_COLOR, HEAD_COLOR, Renderer
from gridsnake.session import SnakeSession


def rgb_at(surface, cell, cell_size):
    x, y = cell
    color = surface.get_at((x * cell_size + cell_size // 2, y * cell_size + cell_size // 2))
    return (color.r, color.g, color.b)


def test_key_bindings():
    assert action_for_key(pygame.K_UP) == "up"
    assert action_for_key(pygame.K_a) == "left"
    assert action_for_key(pygame.K_SPACE) == "pause"
    assert action_for_key(pygame.K_r) == "restart"
    assert action_for_key(pygame.K_EQUALS) == "faster"
    assert action_for_key(pygame.K_MINUS) == "slower"
    assert action_for_key(pygame.K_t) == "wrap"
    assert action_for_key(pygame.K_q) is None


def test_renderer_draws_snake_and_food():
    session = SnakeSession(GameConfig(columns=12, rows=12, initial_length=5), seed=5)
    session.state = replace(session.state, food=Point(1, 10))
    renderer = Renderer(cell_size=10)
    surface = pygame.Surface(renderer.window_size(session.config))
    renderer.draw(surface, session)
    assert surface.get_size() == (120, 120)
    assert rgb_at(surface, (6, 6), 10) == HEAD_COLOR
    assert rgb_at(surface, (4, 6), 10) == BODY_COLOR
    assert rgb_at(surface, (1, 10), 10) == FOOD_COLOR


def test_renderer_shades_board_when_game_over():
    session = SnakeSession(GameConfig(columns=12, rows=12, initial_length=5), seed=5)
    session.state = replace(session.state, is_game_over=True)
    renderer = Renderer(cell_size=10)
    surface = pygame.Surface(renderer.window_size(session.config))
    renderer.draw(surface, session)
    assert rgb_at(surface, (3, 6), 10) != BODY_COLOR
