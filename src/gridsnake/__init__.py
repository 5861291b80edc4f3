"""Grid Snake: fixed-interval snake game engine."""

from gridsnake.config import GameConfig
from gridsnake.engine import GameState
from gridsnake.grid import Cell, Grid
from gridsnake.snake import Direction, Snake

__all__ = [
    "Cell",
    "Direction",
    "GameConfig",
    "GameState",
    "Grid",
    "Snake",
]
