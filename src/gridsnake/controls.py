"""Keyboard bindings from pygame key codes to game commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pygame

from gridsnake.snake import Direction

if TYPE_CHECKING:
    from gridsnake.engine import GameState

logger = logging.getLogger(__name__)

HEADING_KEYS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
RESTART_KEY = pygame.K_r


def handle_key(state: GameState, key: int) -> bool:
    """Apply a key press to *state*. Returns True if the key was consumed.

    While the game is over only the restart key does anything.
    """
    if state.is_over():
        if key == RESTART_KEY:
            state.reset()
            return True
        return False

    direction = HEADING_KEYS.get(key)
    if direction is None:
        return False
    state.set_heading(direction)
    logger.debug("Heading set to %s", direction.name)
    return True
