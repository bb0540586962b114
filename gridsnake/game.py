from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import NamedTuple, Optional, Sequence, Tuple


class Point(NamedTuple):
    x: int
    y: int


def add_pos(a: Point, b: Tuple[int, int]) -> Point:
    return Point(a[0] + b[0], a[1] + b[1])


DIRECTIONS = {
    "up": (0, -1),
    "right": (1, 0),
    "down": (0, 1),
    "left": (-1, 0),
}

OPPOSITE = {
    "up": "down",
    "down": "up",
    "left": "right",
    "right": "left",
}

NO_FOOD = Point(-1, -1)
SCORE_PER_FOOD = 10
MIN_LENGTH = 3
DEFAULT_LENGTH = 4


@dataclass(frozen=True)
class GameConfig:
    columns: int
    rows: int
    wrap_edges: bool = False
    initial_length: Optional[int] = None

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError(
                f"board must be at least 1x1, got {self.columns}x{self.rows}"
            )

    def contains(self, pos: Tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.columns and 0 <= y < self.rows


@dataclass(frozen=True)
class GameState:
    snake: Tuple[Point, ...]
    direction: str
    food: Point
    score: int = 0
    is_game_over: bool = False
    tick: int = 0

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def has_food(self) -> bool:
        """False once the board is full and no food could be placed."""
        return self.food != NO_FOOD


def spawn_food(
    config: GameConfig,
    snake: Sequence[Tuple[int, int]],
    rng: Optional[random.Random] = None,
) -> Point:
    """Pick a uniformly random free cell, or ``NO_FOOD`` if the board is full.

    Cells are enumerated row by row so a seeded ``rng`` always yields the same
    placement for the same board.
    """
    occupied = set(snake)
    available = [
        Point(x, y)
        for y in range(config.rows)
        for x in range(config.columns)
        if (x, y) not in occupied
    ]
    if not available:
        return NO_FOOD
    return (rng or random).choice(available)


def create_initial_state(
    config: GameConfig, rng: Optional[random.Random] = None
) -> GameState:
    requested = DEFAULT_LENGTH if config.initial_length is None else config.initial_length
    length = max(MIN_LENGTH, requested)
    center = Point(config.columns // 2, config.rows // 2)
    # Laid out horizontally to the left of the head; may run off a narrow board.
    snake = tuple(add_pos(center, (-i, 0)) for i in range(length))
    return GameState(
        snake=snake,
        direction="right",
        food=spawn_food(config, snake, rng),
    )


def change_direction(state: GameState, direction: str) -> GameState:
    if direction not in DIRECTIONS:
        raise ValueError(f"unknown direction: {direction!r}")
    if OPPOSITE[state.direction] == direction:
        return state
    return replace(state, direction=direction)


def step(
    config: GameConfig, state: GameState, rng: Optional[random.Random] = None
) -> GameState:
    if state.is_game_over:
        return state

    new_head = add_pos(state.head, DIRECTIONS[state.direction])

    if config.wrap_edges:
        new_head = Point(
            (new_head.x + config.columns) % config.columns,
            (new_head.y + config.rows) % config.rows,
        )
    elif not config.contains(new_head):
        return replace(state, is_game_over=True)

    will_eat = new_head == state.food
    # The tail cell is vacated this tick unless the snake grows.
    body = state.snake if will_eat else state.snake[:-1]
    if new_head in body:
        return replace(state, is_game_over=True)

    if will_eat:
        snake = (new_head,) + state.snake
        return replace(
            state,
            snake=snake,
            food=spawn_food(config, snake, rng),
            score=state.score + SCORE_PER_FOOD,
            tick=state.tick + 1,
        )

    return replace(
        state,
        snake=(new_head,) + state.snake[:-1],
        tick=state.tick + 1,
    )
