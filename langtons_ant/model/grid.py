"""Toroidal two-state grid for Langton's Ant simulation."""

import numpy as np
from typing import Tuple

from .state import CellState, Direction


class GridIndexError(IndexError):
    """A linear index outside [0, area) reached the grid."""


class Grid:
    """
    Owns the cell array and all toroidal index arithmetic.

    Cells are stored flat, one bool per cell, in row-major order:
    (x, y) maps to index y * width + x.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.area = width * height

        # False = unmarked, True = marked
        self.cells = np.zeros(self.area, dtype=bool)

    def _check(self, index: int) -> None:
        # numpy would accept negative indices silently
        if not 0 <= index < self.area:
            raise GridIndexError(
                f"index {index} outside grid of area {self.area}")

    def get(self, index: int) -> CellState:
        """Return the state of the cell at a linear index."""
        self._check(index)
        return CellState(bool(self.cells[index]))

    def invert(self, index: int) -> CellState:
        """Flip the cell at a linear index and return its new state."""
        self._check(index)
        self.cells[index] = not self.cells[index]
        return CellState(bool(self.cells[index]))

    def reset(self) -> None:
        """Set every cell to unmarked."""
        self.cells.fill(False)

    def to_coords(self, index: int) -> Tuple[int, int]:
        """Linear index -> (x, y)."""
        return index % self.width, index // self.width

    def to_index(self, x: int, y: int) -> int:
        """(x, y) -> linear index, wrapping both axes."""
        return (y % self.height) * self.width + (x % self.width)

    def neighbor(self, index: int, direction: Direction) -> int:
        """Index one cell away in `direction`, wrapping on both axes."""
        return wrap_step(index, direction, self.width, self.area)

    def marked_count(self) -> int:
        """Number of cells currently marked."""
        return int(np.count_nonzero(self.cells))

    def as_array(self) -> np.ndarray:
        """Return a (height, width) copy of the cells."""
        return self.cells.reshape(self.height, self.width).copy()


def wrap_step(index: int, direction: Direction, width: int, area: int) -> int:
    """
    Move one cell from `index` in `direction` on a torus of the given
    width and area.

    Horizontal moves wrap within the same row; vertical moves wrap
    within the same column.
    """
    if direction is Direction.UP:
        return (index - width) % area
    if direction is Direction.DOWN:
        return (index + width) % area
    if direction is Direction.RIGHT:
        if (index + 1) % width == 0:
            return index + 1 - width
        return index + 1
    if direction is Direction.LEFT:
        if index % width == 0:
            return index - 1 + width
        return index - 1
    raise ValueError(f"Unknown direction: {direction!r}")
