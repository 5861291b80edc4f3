"""Drawing of a game state onto a pygame surface."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from gridsnake.engine import GameState
    from gridsnake.grid import Cell

BACKGROUND = (0, 0, 0)
SNAKE_COLOR = (0, 255, 0)
FOOD_COLOR = (255, 0, 0)
TEXT_COLOR = (255, 255, 255)

CELL_GAP = 2
SCORE_POS = (10, 10)
GAME_OVER_TEXT = "Game Over! Press R to Restart"


def cell_rect(cell: Cell, cell_size: int) -> pygame.Rect:
    """Screen rectangle for a cell, leaving a gap to the next cell."""
    x, y = cell
    side = max(cell_size - CELL_GAP, 1)
    return pygame.Rect(x * cell_size, y * cell_size, side, side)


def draw(
    surface: pygame.Surface,
    state: GameState,
    font: pygame.font.Font | None = None,
) -> None:
    """Paint snake, food and HUD. Text is skipped when *font* is None."""
    surface.fill(BACKGROUND)

    for cell in state.snake:
        pygame.draw.rect(surface, SNAKE_COLOR, cell_rect(cell, state.cell_size))
    pygame.draw.rect(surface, FOOD_COLOR, cell_rect(state.food, state.cell_size))

    if font is None:
        return

    if state.is_over():
        text = font.render(GAME_OVER_TEXT, True, TEXT_COLOR)
        field_width = state.grid.width * state.cell_size
        field_height = state.grid.height * state.cell_size
        surface.blit(text, text.get_rect(center=(field_width // 2, field_height // 2)))

    score = font.render(f"Score: {state.score}", True, TEXT_COLOR)
    surface.blit(score, SCORE_POS)
