"""Fixed-size two-dimensional container used for boards and status maps."""

from __future__ import annotations

from typing import Generic, Iterator, List, Tuple, TypeVar

import numpy as np


T = TypeVar("T")


class GridIndexError(IndexError):
    """Raised when a cell outside the grid is accessed."""


class Grid(Generic[T]):
    """Dense ``width`` x ``height`` grid holding one value per cell.

    Cells are addressed as ``grid[row, col]``.  Coordinates outside the grid,
    negative ones included, raise :class:`GridIndexError` instead of wrapping.
    """

    def __init__(self, width: int, height: int, default: T) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells = np.full((height, width), default, dtype=object)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)`` in numpy order."""

        return (self._height, self._width)

    @property
    def read_only(self) -> bool:
        return not self._cells.flags.writeable

    def contains(self, row: int, col: int) -> bool:
        """Return ``True`` if ``(row, col)`` lies inside the grid."""

        return 0 <= row < self._height and 0 <= col < self._width

    def _check(self, key: Tuple[int, int]) -> Tuple[int, int]:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError("Grid indices must be (row, col) pairs") from None
        if not self.contains(row, col):
            raise GridIndexError(
                f"Cell ({row}, {col}) out of bounds for {self._width}x{self._height} grid"
            )
        return row, col

    def __getitem__(self, key: Tuple[int, int]) -> T:
        row, col = self._check(key)
        return self._cells[row, col]

    def __setitem__(self, key: Tuple[int, int], value: T) -> None:
        row, col = self._check(key)
        if self.read_only:
            raise TypeError("Grid is read-only")
        self._cells[row, col] = value

    def freeze(self) -> "Grid[T]":
        """Make the grid read-only and return it."""

        self._cells.flags.writeable = False
        return self

    def copy(self) -> "Grid[T]":
        """Return a writable copy with the same contents."""

        clone: Grid[T] = Grid.__new__(Grid)
        clone._width = self._width
        clone._height = self._height
        clone._cells = self._cells.copy()
        return clone

    def positions(self, value: T) -> List[Tuple[int, int]]:
        """Return the ``(row, col)`` coordinates of cells equal to ``value``."""

        return [(int(r), int(c)) for r, c in np.argwhere(self._cells == value)]

    def count(self, value: T) -> int:
        return int(np.count_nonzero(self._cells == value))

    def rows(self) -> List[List[T]]:
        """Return the grid contents as a list of row lists."""

        return self._cells.tolist()

    def items(self) -> Iterator[Tuple[int, int, T]]:
        """Yield ``(row, col, value)`` for every cell in row-major order."""

        for (r, c), value in np.ndenumerate(self._cells):
            yield r, c, value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and self.rows() == other.rows()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height})"
