"""Snake body and heading."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridsnake.grid import Cell, Grid


class Direction(enum.Enum):
    """Headings as unit ``(dx, dy)`` deltas; ``NONE`` means not yet moving."""

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def is_moving(self) -> bool:
        return self is not Direction.NONE


class Snake:
    """A snake represented as an ordered deque of ``(x, y)`` segments.

    The tail is ``body[0]`` and the head is ``body[-1]``, so segments are
    stored in movement order with the oldest first.
    """

    def __init__(self, segments: Iterable[Cell]) -> None:
        self.body: deque[Cell] = deque(segments)
        if not self.body:
            raise ValueError("Snake must have at least 1 segment.")

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[-1]

    def next_head(self, direction: Direction, grid: Grid) -> Cell:
        """Compute the wrapped next head position without moving."""
        dx, dy = direction.value
        x, y = self.head
        return grid.wrap(x + dx, y + dy)

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def push_head(self, cell: Cell) -> None:
        self.body.append(cell)

    def drop_tail(self) -> Cell:
        """Remove and return the oldest segment."""
        return self.body.popleft()

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
