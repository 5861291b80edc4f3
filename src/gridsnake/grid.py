"""Toroidal grid geometry for the snake game."""

from __future__ import annotations

from collections.abc import Iterator

Cell = tuple[int, int]


class Grid:
    """Fixed-size grid of cells addressed as ``(x, y)``.

    ``x`` is the column in ``[0, width)`` and ``y`` the row in
    ``[0, height)``. The grid is a torus: leaving one edge re-enters on the
    opposite edge.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1x1.")
        self.width = width
        self.height = height

    @classmethod
    def from_surface(cls, width_px: int, height_px: int, cell_size: int) -> Grid:
        """Build a grid covering a drawing surface of the given pixel size."""
        if cell_size < 1:
            raise ValueError("cell_size must be at least 1 pixel.")
        width, height = int(width_px // cell_size), int(height_px // cell_size)
        if width < 1 or height < 1:
            raise ValueError(
                f"Surface {width_px}x{height_px} is smaller than one "
                f"{cell_size}px cell.",
            )
        return cls(width, height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap(self, x: int, y: int) -> Cell:
        """Wrap coordinates around the grid edges.

        Python's ``%`` takes the sign of the divisor, so the result is never
        negative however far off-grid the input is.
        """
        return x % self.width, y % self.height

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}
