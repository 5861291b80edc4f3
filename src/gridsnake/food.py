"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from gridsnake.grid import Cell, Grid

logger = logging.getLogger(__name__)

# Row 0 is never chosen for respawned food.
FIRST_FOOD_ROW = 1


class FoodSpawner:
    """Holds the single food cell and redraws it when eaten.

    Uses an injected NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        position: Cell,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.position = position
        self.rng = rng if rng is not None else np.random.default_rng()

    def candidates(self, occupied: Collection[Cell]) -> list[Cell]:
        """Return the cells a respawn may pick, excluding *occupied*."""
        blocked = set(occupied)
        return [
            cell for cell in self.grid.cells()
            if cell[1] >= FIRST_FOOD_ROW and cell not in blocked
        ]

    def respawn(self, occupied: Collection[Cell]) -> Cell:
        """Move the food to a uniformly random free cell and return it.

        Picking uniformly among free cells has the same distribution as
        re-rolling until the draw misses the snake.
        """
        if self.grid.height <= FIRST_FOOD_ROW:
            logger.warning("Grid has no rows available for food; food stays put.")
            return self.position

        free = self.candidates(occupied)
        if free:
            self.position = free[int(self.rng.integers(len(free)))]
        else:
            logger.warning("No free cells available for food placement.")
            self.position = (
                int(self.rng.integers(0, self.grid.width)),
                int(self.rng.integers(FIRST_FOOD_ROW, self.grid.height)),
            )
        return self.position

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"position": list(self.position)}
