from __future__ import annotations

import argparse
import logging

import pygame

from gridsnake.controls import action_for_key
from gridsnake.game import GameConfig
from gridsnake.render import Renderer, open_window
from gridsnake.session import MAX_SPEED, MIN_SPEED, SnakeSession

logger = logging.getLogger(__name__)

FPS = 60


def positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return value


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--grid", type=positive_int, nargs=2, default=(24, 24), metavar=("COLS", "ROWS"))
    parser.add_argument(
        "--wrap",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Re-enter from the opposite edge instead of dying at the wall",
    )
    parser.add_argument(
        "--speed",
        type=positive_int,
        default=10,
        help=f"Ticks per second ({MIN_SPEED}-{MAX_SPEED})",
    )
    parser.add_argument("--length", type=positive_int, default=5, help="Initial snake length (min 3)")
    parser.add_argument("--cell-size", type=positive_int, default=24)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    columns, rows = args.grid
    config = GameConfig(columns=columns, rows=rows, wrap_edges=args.wrap, initial_length=args.length)
    session = SnakeSession(config, ticks_per_second=args.speed, seed=args.seed)
    renderer = Renderer(cell_size=args.cell_size)
    window = open_window(renderer, config)
    clock = pygame.time.Clock()
    logger.info("Tick interval %d ms", session.interval_ms)

    elapsed = 0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    session.handle(action_for_key(event.key))

        elapsed += clock.tick(FPS)
        if session.paused:
            elapsed = 0
        while elapsed >= session.interval_ms:
            elapsed -= session.interval_ms
            session.advance()

        renderer.draw(window, session)
        pygame.display.flip()

    print(f"Final score: {session.state.score}")
    pygame.quit()


if __name__ == "__main__":
    main()
