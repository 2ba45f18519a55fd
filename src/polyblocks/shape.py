"""Polyomino shape definitions and transformations.

A :class:`Shape` is a coloured occupancy mask stored in a fixed
``MASK_SIZE`` x ``MASK_SIZE`` boolean array.  Occupied cells always live in the
top-left corner of the mask; the bounding box is measured from the origin and
recomputed whenever it is needed because rotation changes it.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray


# Largest authored shape fits comfortably inside this square.
MASK_SIZE = 8

Mask = NDArray[np.bool_]

_OCCUPIED = "#"
_EMPTY = "."


class TileColor(str, Enum):
    """Colour tags for shapes and board cells."""

    GRAY = "gray"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    # Only used to reset overlay cells; never stored on the board.
    TRANSPARENT = "transparent"


PLAYABLE_COLORS: Tuple[TileColor, ...] = (TileColor.RED, TileColor.GREEN, TileColor.BLUE)


class ShapePatternError(ValueError):
    """Raised when a shape pattern or mask cannot be represented."""


def _empty_mask() -> Mask:
    return np.zeros((MASK_SIZE, MASK_SIZE), dtype=bool)


class Shape:
    """Immutable polyomino variant.

    Only ``color`` may be reassigned after construction; the mask is a
    read-only array so rotations always produce new shapes.
    """

    __slots__ = ("color", "_mask")

    def __init__(self, mask: Optional[ArrayLike] = None, color: TileColor = TileColor.GRAY) -> None:
        full = _empty_mask()
        if mask is not None:
            cells = np.asarray(mask, dtype=bool)
            if cells.ndim != 2:
                raise ShapePatternError("Shape mask must be two-dimensional")
            rows, cols = cells.shape
            if rows > MASK_SIZE or cols > MASK_SIZE:
                raise ShapePatternError(
                    f"Shape mask {cols}x{rows} exceeds the {MASK_SIZE}x{MASK_SIZE} limit"
                )
            full[:rows, :cols] = cells
        full.flags.writeable = False
        self._mask: Mask = full
        self.color = color

    @classmethod
    def from_pattern(cls, width: int, height: int, pattern: str) -> "Shape":
        """Parse a row-major ``#``/``.`` pattern into a shape.

        Raises:
            ShapePatternError: If the dimensions are outside ``1..MASK_SIZE``,
                the pattern length is not ``width * height`` or a character is
                neither ``#`` nor ``.``.
        """

        if not (1 <= width <= MASK_SIZE and 1 <= height <= MASK_SIZE):
            raise ShapePatternError(
                f"Pattern dimensions {width}x{height} out of bounds (1..{MASK_SIZE})"
            )
        if len(pattern) != width * height:
            raise ShapePatternError(
                f"Pattern length {len(pattern)} does not match dimensions {width}x{height}"
            )

        mask = np.zeros((height, width), dtype=bool)
        for index, char in enumerate(pattern):
            row, col = divmod(index, width)
            if char == _OCCUPIED:
                mask[row, col] = True
            elif char != _EMPTY:
                raise ShapePatternError(
                    f"Invalid character {char!r} in pattern at position {index}"
                )
        return cls(mask)

    @property
    def mask(self) -> Mask:
        """Read-only view of the full fixed-size mask."""

        return self._mask

    def bounds(self) -> Tuple[int, int]:
        """Return the ``(width, height)`` of the bounding box from the origin.

        An empty mask has bounds ``(0, 0)``.
        """

        cols = np.flatnonzero(self._mask.any(axis=0))
        if cols.size == 0:
            return (0, 0)
        rows = np.flatnonzero(self._mask.any(axis=1))
        return (int(cols[-1]) + 1, int(rows[-1]) + 1)

    def cells(self) -> List[Tuple[int, int]]:
        """Return the local ``(x, y)`` coordinates of occupied cells, row by row."""

        return [(int(col), int(row)) for row, col in np.argwhere(self._mask)]

    def rotate_90(self) -> "Shape":
        """Return the shape rotated a quarter turn clockwise.

        Cell ``(row=i, col=j)`` of the bounding box moves to
        ``(row=j, col=height - 1 - i)``, so the rotated bounding box is
        ``height`` wide and ``width`` tall.
        """

        width, height = self.bounds()
        box = self._mask[:height, :width]
        return Shape(np.rot90(box, k=-1), self.color)

    def equivalents(self) -> List["Shape"]:
        """Return the distinct shapes reachable by repeated 90 degree rotation.

        The base shape comes first, followed by the 90, 180 and 270 degree
        rotations that do not duplicate any mask already collected.
        """

        shapes = [self]
        current = self
        for _ in range(3):
            current = current.rotate_90()
            if not any(current.same_mask(existing) for existing in shapes):
                shapes.append(current)
        return shapes

    def same_mask(self, other: "Shape") -> bool:
        """Return ``True`` if both shapes occupy exactly the same cells."""

        return bool(np.array_equal(self._mask, other._mask))

    def with_color(self, color: TileColor) -> "Shape":
        """Return a copy of this shape painted with ``color``."""

        return Shape(self._mask, color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.color == other.color and self.same_mask(other)

    def __hash__(self) -> int:
        return hash(self._mask.tobytes())

    def __str__(self) -> str:
        width, height = self.bounds()
        return "\n".join(
            "".join(_OCCUPIED if cell else _EMPTY for cell in row)
            for row in self._mask[:height, :width]
        )

    def __repr__(self) -> str:
        width, height = self.bounds()
        pattern = str(self).replace("\n", "")
        return f"<Shape {self.color.name} {width}x{height} {pattern!r}>"
