from __future__ import annotations

from typing import Optional

import pygame

from gridsnake.session import FASTER, PAUSE, RESTART, SLOWER, TOGGLE_WRAP

KEY_BINDINGS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_w: "up",
    pygame.K_s: "down",
    pygame.K_a: "left",
    pygame.K_d: "right",
    pygame.K_SPACE: PAUSE,
    pygame.K_r: RESTART,
    pygame.K_EQUALS: FASTER,
    pygame.K_PLUS: FASTER,
    pygame.K_KP_PLUS: FASTER,
    pygame.K_MINUS: SLOWER,
    pygame.K_KP_MINUS: SLOWER,
    pygame.K_t: TOGGLE_WRAP,
}


def action_for_key(key: int) -> Optional[str]:
    return KEY_BINDINGS.get(key)
