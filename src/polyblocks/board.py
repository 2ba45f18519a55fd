"""Board representation and the placement (superimposition) algorithm."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .grid import Grid
from .shape import Shape, TileColor


# Dimensions of the play surface.
BOARD_WIDTH = 20
BOARD_HEIGHT = 20

Anchor = Tuple[float, float]


class SuperimpositionState(Enum):
    """Per-cell outcome of overlaying a shape on the board."""

    FITS = "fits"
    INTERSECTS = "intersects"
    BLANK = "blank"


class PlacementError(ValueError):
    """Raised when committing a placement that did not succeed."""


def round_half_away(value: float) -> int:
    """Round ``value`` to the nearest integer, ties away from zero.

    Python's :func:`round` rounds ties to even, which would disagree at exact
    ``.5`` boundaries; board coordinates always use this rule instead.
    """

    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


@dataclass(frozen=True)
class Superimposition:
    """Result of evaluating a shape placement against a board.

    ``fields`` is a read-only grid the size of the board.  ``success`` is
    ``True`` only when every occupied shape cell landed on an empty in-bounds
    board cell.
    """

    fields: Grid[SuperimpositionState]
    success: bool

    def cells(self, state: SuperimpositionState) -> List[Tuple[int, int]]:
        """Return the ``(row, col)`` coordinates marked with ``state``."""

        return self.fields.positions(state)


class Board:
    """Fixed-size play surface of optionally coloured cells."""

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> None:
        self._cells: Grid[Optional[TileColor]] = Grid(width, height, None)

    @property
    def cells(self) -> Grid[Optional[TileColor]]:
        """Read-only snapshot of the board cells."""

        return self._cells.copy().freeze()

    @property
    def width(self) -> int:
        return self._cells.width

    @property
    def height(self) -> int:
        return self._cells.height

    def get_cell(self, row: int, col: int) -> Optional[TileColor]:
        """Return the colour at ``(row, col)`` or ``None`` when empty.

        Raises:
            GridIndexError: If the coordinates are outside the board.
        """

        return self._cells[row, col]

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is unoccupied.

        Raises:
            GridIndexError: If the coordinates are outside the board.
        """

        return self._cells[row, col] is None

    def occupied_count(self) -> int:
        return self._cells.width * self._cells.height - self._cells.count(None)

    def copy(self) -> "Board":
        clone = Board.__new__(Board)
        clone._cells = self._cells.copy()
        return clone

    def superimpose(self, shape: Shape, anchor: Anchor) -> Superimposition:
        """Overlay ``shape`` centred on ``anchor`` and classify every cell.

        ``anchor`` is a fractional ``(x, y)`` position across the board's
        width and height.  The shape's bounding-box centre is placed on it and
        each occupied cell is rounded (half away from zero) onto the board.
        Cells landing off the board fail the placement without being marked;
        cells landing on occupied board cells are marked ``INTERSECTS``.  The
        board itself is never modified.

        Raises:
            ValueError: If an anchor component is not a finite number.
        """

        anchor_x, anchor_y = anchor
        if not (math.isfinite(anchor_x) and math.isfinite(anchor_y)):
            raise ValueError(f"Anchor must be finite, got {anchor!r}")

        shape_width, shape_height = shape.bounds()
        offset_x = anchor_x * self.width - shape_width * 0.5
        offset_y = anchor_y * self.height - shape_height * 0.5

        fields = Grid(self.width, self.height, SuperimpositionState.BLANK)
        success = True
        for x, y in shape.cells():
            target_x = x + offset_x
            target_y = y + offset_y
            if not (math.isfinite(target_x) and math.isfinite(target_y)):
                # Anchor scaled past the float range; the cell is off the board.
                success = False
                continue
            col = round_half_away(target_x)
            row = round_half_away(target_y)
            if not self._cells.contains(row, col):
                success = False
            elif self._cells[row, col] is not None:
                fields[row, col] = SuperimpositionState.INTERSECTS
                success = False
            else:
                fields[row, col] = SuperimpositionState.FITS

        return Superimposition(fields=fields.freeze(), success=success)

    def commit(self, result: Superimposition, color: TileColor) -> int:
        """Write ``color`` into every cell ``result`` marks as fitting.

        Returns the number of cells written.  Cells marked ``INTERSECTS`` or
        ``BLANK`` are left untouched.

        Raises:
            PlacementError: If ``result`` is not a successful placement or one
                of its fitting cells has been occupied since it was computed.
            ValueError: If ``result`` was computed for a board of another size
                or ``color`` is the overlay-only transparent colour.
        """

        if not result.success:
            raise PlacementError("Cannot commit an unsuccessful superimposition")
        if result.fields.shape != self._cells.shape:
            raise ValueError(
                f"Superimposition is {result.fields.width}x{result.fields.height}, "
                f"board is {self.width}x{self.height}"
            )
        if color is TileColor.TRANSPARENT:
            raise ValueError("Transparent cells cannot be placed on the board")

        cells = result.cells(SuperimpositionState.FITS)
        stale = [(row, col) for row, col in cells if self._cells[row, col] is not None]
        if stale:
            raise PlacementError(f"Cells {stale} are already occupied; superimpose again")
        for row, col in cells:
            self._cells[row, col] = color
        return len(cells)

    def __str__(self) -> str:
        return "\n".join(
            "".join("." if cell is None else "#" for cell in row) for row in self._cells.rows()
        )
