"""Interactive pygame front-end driving a :class:`GameState`."""

from __future__ import annotations

import logging

import pygame

from gridsnake import render
from gridsnake.config import GameConfig
from gridsnake.controls import handle_key
from gridsnake.engine import GameState

logger = logging.getLogger(__name__)

FONT_SIZE = 24


def run(config: GameConfig) -> int:
    """Open a window and play until it is closed. Returns the last score."""
    state = GameState.from_config(config)
    logger.info(
        "Starting %dx%d game, %.3fs per move.",
        state.grid.width, state.grid.height, state.move_interval,
    )

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (config.window_width, config.window_height),
        )
        pygame.display.set_caption(config.title)
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(state, event.key)

            # Clock.tick returns the milliseconds since the previous frame.
            state.advance(clock.tick(config.fps) / 1000.0)
            render.draw(screen, state, font)
            pygame.display.flip()
    finally:
        pygame.quit()

    logger.info("Window closed with score %d.", state.score)
    return state.score
