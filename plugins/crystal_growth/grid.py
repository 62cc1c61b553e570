"""
Grid - Append-only crystal occupancy map

Each cell is either empty (None) or holds a reference to the crystal that
reached it first. A cell is written at most once.
"""

import numpy as np


class CellOccupiedError(AssertionError):
    """A second crystal was written to an occupied cell."""


class GridNotSaturatedError(AssertionError):
    """Rasterization found empty cells: growth never covered the grid."""


class Grid:

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.rows = [[None] * width for _ in range(height)]
        self.occupied = 0

    def contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x, y):
        """Crystal at (x, y), or None. No bounds check."""
        return self.rows[y][x]

    def is_occupied(self, x, y):
        return self.rows[y][x] is not None

    def set(self, x, y, crystal):
        row = self.rows[y]
        if row[x] is not None:
            raise CellOccupiedError(f"cell ({x}, {y}) is already occupied")
        row[x] = crystal
        self.occupied += 1

    @property
    def size(self):
        return self.width * self.height

    @property
    def is_full(self):
        return self.occupied == self.size

    def empty_cells(self):
        """Yield (x, y) of every empty cell in row-major order."""
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if cell is None:
                    yield x, y

    def to_pixels(self):
        """Brightness raster of shape (height, width), dtype uint8.

        Raises:
            GridNotSaturatedError: if any cell is still empty
        """
        if not self.is_full:
            x, y = next(self.empty_cells())
            raise GridNotSaturatedError(
                f"{self.size - self.occupied} of {self.size} cells are empty "
                f"(first at ({x}, {y})); too few seeds or growth never reached them")
        return np.array(
            [[cell.brightness for cell in row] for row in self.rows],
            dtype=np.uint8,
        ).reshape(self.height, self.width)
