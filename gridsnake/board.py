from __future__ import annotations

import numpy as np

from gridsnake.game import GameConfig, GameState

BODY, HEAD, FOOD = 0, 1, 2


def encode_board(config: GameConfig, state: GameState) -> np.ndarray:
    """Three channel board image: body, head and food, indexed [channel, y, x]."""
    h, w = config.rows, config.columns
    board = np.zeros((3, h, w), dtype=np.float32)

    for x, y in state.snake:
        if 0 <= x < w and 0 <= y < h:
            board[BODY, y, x] = 1.0

    head_x, head_y = state.head
    if 0 <= head_x < w and 0 <= head_y < h:
        board[HEAD, head_y, head_x] = 1.0

    if state.has_food:
        food_x, food_y = state.food
        board[FOOD, food_y, food_x] = 1.0

    return board


def board_to_text(config: GameConfig, state: GameState) -> str:
    board = encode_board(config, state)
    lines = []
    for y in range(config.rows):
        row = []
        for x in range(config.columns):
            if board[HEAD, y, x]:
                row.append("H")
            elif board[BODY, y, x]:
                row.append("o")
            elif board[FOOD, y, x]:
                row.append("*")
            else:
                row.append(".")
        lines.append("".join(row))
    return "\n".join(lines)
