"""Pure snake game engine plus a small pygame host."""

from gridsnake.game import (
    DIRECTIONS,
    NO_FOOD,
    OPPOSITE,
    SCORE_PER_FOOD,
    GameConfig,
    GameState,
    Point,
    change_direction,
    create_initial_state,
    spawn_food,
    step,
)
from gridsnake.session import SnakeSession, StepResult, tick_interval_ms

__all__ = [
    "DIRECTIONS",
    "NO_FOOD",
    "OPPOSITE",
    "SCORE_PER_FOOD",
    "GameConfig",
    "GameState",
    "Point",
    "SnakeSession",
    "StepResult",
    "change_direction",
    "create_initial_state",
    "spawn_food",
    "step",
    "tick_interval_ms",
]
