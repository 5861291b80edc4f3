"""Fixed-interval game state composing grid, snake, and food logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from gridsnake.food import FoodSpawner
from gridsnake.grid import Cell, Grid
from gridsnake.snake import Direction, Snake

if TYPE_CHECKING:
    from gridsnake.config import GameConfig

logger = logging.getLogger(__name__)

INITIAL_HEAD: Cell = (10, 10)
INITIAL_FOOD: Cell = (15, 15)
MOVE_INTERVAL = 0.075  # simulated seconds per grid step


class GameState:
    """Single-snake game driven by elapsed time.

    The host loop calls :meth:`advance` once per rendered frame with the real
    elapsed time. Time is accumulated until :attr:`move_interval` has passed,
    then the snake moves exactly one cell, so simulation speed does not
    depend on the framerate.
    """

    def __init__(
        self,
        grid_width: int,
        grid_height: int,
        cell_size: int = 20,
        *,
        move_interval: float = MOVE_INTERVAL,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        self.grid = Grid(grid_width, grid_height)
        if cell_size < 1:
            raise ValueError("cell_size must be at least 1 pixel.")
        if move_interval <= 0:
            raise ValueError("move_interval must be positive.")
        for name, cell in (("head", INITIAL_HEAD), ("food", INITIAL_FOOD)):
            if not self.grid.in_bounds(*cell):
                raise ValueError(
                    f"Initial {name} {cell} lies outside the "
                    f"{grid_width}x{grid_height} grid.",
                )

        self.cell_size = cell_size
        self.move_interval = move_interval
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.food_spawner = FoodSpawner(self.grid, INITIAL_FOOD, rng=self.rng)
        self._init_episode()

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        rng: np.random.Generator | None = None,
    ) -> GameState:
        """Build a game sized to the configured window."""
        grid_width, grid_height = config.grid_size()
        return cls(
            grid_width,
            grid_height,
            config.cell_size,
            move_interval=config.move_interval,
            rng=rng,
            seed=config.seed,
        )

    def _init_episode(self) -> None:
        self.snake = Snake([INITIAL_HEAD])
        self.food_spawner.position = INITIAL_FOOD
        self.heading = Direction.NONE
        self.score = 0
        self.game_over = False
        self.move_timer = 0.0
        self.ticks = 0

    # -- queries -------------------------------------------------------

    @property
    def food(self) -> Cell:
        return self.food_spawner.position

    @food.setter
    def food(self, cell: Cell) -> None:
        if not self.grid.in_bounds(*cell):
            raise ValueError(f"Food {cell} lies outside the grid.")
        self.food_spawner.position = cell

    def is_over(self) -> bool:
        return self.game_over

    # -- commands ------------------------------------------------------

    def set_heading(self, direction: Direction) -> None:
        """Replace the heading. Reversing into the body is allowed."""
        self.heading = direction

    def advance(self, elapsed_time: float) -> bool:
        """Feed *elapsed_time* seconds into the move timer.

        Returns True if enough time had accumulated for a step to run.
        """
        if elapsed_time < 0:
            raise ValueError("elapsed_time must be non-negative.")
        if self.game_over:
            return False

        self.move_timer += elapsed_time
        if self.move_timer < self.move_interval:
            return False

        self.move_timer = 0.0
        self.step()
        return True

    def step(self) -> None:
        """Move the snake one cell along the current heading."""
        if self.game_over or not self.heading.is_moving:
            return

        new_head = self.snake.next_head(self.heading, self.grid)

        # Checked before insertion so a fatal move leaves the body intact.
        if self.snake.occupies(new_head):
            self.game_over = True
            logger.info(
                "Snake hit itself at %s after %d steps with score %d.",
                new_head, self.ticks, self.score,
            )
            return

        self.snake.push_head(new_head)
        if new_head == self.food:
            self.score += 1
            self.food_spawner.respawn(self.snake.body)
        else:
            self.snake.drop_tail()
        self.ticks += 1

    def reset(self) -> None:
        """Restore the initial episode on the same grid."""
        logger.info("Resetting game (final score %d).", self.score)
        self._init_episode()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "ticks": self.ticks,
            "score": self.score,
            "game_over": self.game_over,
            "heading": self.heading.name.lower(),
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food_spawner.to_dict(),
        }
