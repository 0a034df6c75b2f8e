"""Keyboard bindings."""
from __future__ import annotations

import pygame

from pakman import Direction

DIRECTION_KEYS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

LEVEL_KEYS: dict[int, int] = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
}

PLAY_AGAIN_KEY = pygame.K_f
QUIT_KEY = pygame.K_q


def direction_for(key: int) -> Direction | None:
    """Map a key to a direction; None for anything unbound."""
    return DIRECTION_KEYS.get(key)
