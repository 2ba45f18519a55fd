"""Utility helpers shared by the front-ends."""

from __future__ import annotations

from typing import Optional

from .board import Anchor, Board, Superimposition, SuperimpositionState


OVERLAY_CHARS = {
    SuperimpositionState.FITS: "o",
    SuperimpositionState.INTERSECTS: "x",
    SuperimpositionState.BLANK: ".",
}


def render_overlay(result: Superimposition) -> str:
    """Return the status grid of ``result`` as text, one line per row."""

    return "\n".join(
        "".join(OVERLAY_CHARS[state] for state in row) for row in result.fields.rows()
    )


def render_board(board: Board, result: Optional[Superimposition] = None) -> str:
    """Return the board as text with an optional placement drawn on top.

    Occupied cells are ``#`` and empty ones ``.``.  When ``result`` is given,
    fitting cells show as ``o`` and intersecting cells as ``x``.
    """

    lines = []
    for r, row in enumerate(board.cells.rows()):
        chars = []
        for c, cell in enumerate(row):
            state = SuperimpositionState.BLANK if result is None else result.fields[r, c]
            if state is SuperimpositionState.BLANK:
                chars.append("." if cell is None else "#")
            else:
                chars.append(OVERLAY_CHARS[state])
        lines.append("".join(chars))
    return "\n".join(lines)


def anchor_from_point(x: float, y: float, width: float, height: float) -> Anchor:
    """Map a point inside a ``width`` x ``height`` area to a normalised anchor.

    Points outside the area map outside ``[0, 1]``; the placement check then
    reports the off-board cells.
    """

    if width <= 0 or height <= 0:
        raise ValueError(f"Area must have a positive size, got {width}x{height}")
    return (x / width, y / height)
