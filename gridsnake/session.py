from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional

from gridsnake.game import (
    DIRECTIONS,
    GameConfig,
    GameState,
    change_direction,
    create_initial_state,
    step,
)

logger = logging.getLogger(__name__)

MIN_SPEED = 1
MAX_SPEED = 15
# Floor on the tick interval; faster cadences are not worth rendering.
MIN_TICK_INTERVAL_MS = 33

PAUSE = "pause"
RESTART = "restart"
FASTER = "faster"
SLOWER = "slower"
TOGGLE_WRAP = "wrap"


def tick_interval_ms(ticks_per_second: int) -> int:
    return max(MIN_TICK_INTERVAL_MS, 1000 // max(1, ticks_per_second))


@dataclass
class StepResult:
    state: GameState
    ate_food: bool
    collision: bool


class SnakeSession:
    """Owns the current game state for a host loop.

    The host feeds input intents through :meth:`handle` and calls
    :meth:`advance` once per tick interval; everything runs on one thread.
    """

    def __init__(
        self,
        config: GameConfig,
        ticks_per_second: int = 10,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config
        self.random = random.Random(seed)
        self.set_speed(ticks_per_second)
        self.paused = False
        self.state = create_initial_state(self.config, self.random)

    @property
    def interval_ms(self) -> int:
        return tick_interval_ms(self.ticks_per_second)

    def restart(self) -> GameState:
        self.state = create_initial_state(self.config, self.random)
        self.paused = False
        logger.info(
            "New game on %dx%d board (wrap=%s)",
            self.config.columns,
            self.config.rows,
            self.config.wrap_edges,
        )
        return self.state

    def turn(self, direction: str) -> GameState:
        self.state = change_direction(self.state, direction)
        return self.state

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.debug("Paused" if self.paused else "Resumed")
        return self.paused

    def set_speed(self, ticks_per_second: int) -> int:
        self.ticks_per_second = min(MAX_SPEED, max(MIN_SPEED, ticks_per_second))
        logger.debug("Speed %d ticks/s", self.ticks_per_second)
        return self.ticks_per_second

    def reconfigure(
        self,
        columns: Optional[int] = None,
        rows: Optional[int] = None,
        wrap_edges: Optional[bool] = None,
    ) -> GameConfig:
        """Swap board settings; only a change of grid size starts a new game."""
        old = self.config
        self.config = replace(
            old,
            columns=old.columns if columns is None else columns,
            rows=old.rows if rows is None else rows,
            wrap_edges=old.wrap_edges if wrap_edges is None else wrap_edges,
        )
        if self.config != old:
            logger.info(
                "Board set to %dx%d (wrap=%s)",
                self.config.columns,
                self.config.rows,
                self.config.wrap_edges,
            )
        if (self.config.columns, self.config.rows) != (old.columns, old.rows):
            self.restart()
        return self.config

    def handle(self, action: Optional[str]) -> None:
        if action is None:
            return
        if action == PAUSE:
            self.toggle_pause()
        elif action == RESTART:
            self.restart()
        elif action == FASTER:
            self.set_speed(self.ticks_per_second + 1)
        elif action == SLOWER:
            self.set_speed(self.ticks_per_second - 1)
        elif action == TOGGLE_WRAP:
            self.reconfigure(wrap_edges=not self.config.wrap_edges)
        elif action in DIRECTIONS:
            self.turn(action)
        else:
            raise ValueError(f"unknown action: {action!r}")

    def advance(self) -> StepResult:
        previous = self.state
        if self.paused:
            return StepResult(state=previous, ate_food=False, collision=False)

        self.state = step(self.config, previous, self.random)
        collision = self.state.is_game_over and not previous.is_game_over
        ate_food = self.state.score > previous.score
        if collision:
            logger.info(
                "Game over after %d ticks, score %d", self.state.tick, self.state.score
            )
        elif ate_food and not self.state.has_food:
            logger.info("Board filled, score %d", self.state.score)
        return StepResult(state=self.state, ate_food=ate_food, collision=collision)
