import pytest

from polyblocks.board import Board
from polyblocks.shape import Shape, TileColor
from polyblocks.utils import anchor_from_point, render_board, render_overlay


DOT = Shape.from_pattern(1, 1, "#")


def occupy(board, row, col, color):
    anchor = ((col + 0.5) / board.width, (row + 0.5) / board.height)
    board.commit(board.superimpose(DOT, anchor), color)


def test_render_overlay_marks_fits_and_intersects():
    board = Board(width=4, height=3)
    occupy(board, 1, 1, TileColor.RED)
    result = board.superimpose(Shape.from_pattern(2, 2, "####"), (0.5, 0.5))
    # Cursor (2.0, 1.5) minus centre (1, 1): cells land on columns 1-2, rows 1-2.
    assert render_overlay(result) == "....\n.xo.\n.oo."


def test_render_board_draws_overlay_over_cells():
    board = Board(width=4, height=3)
    occupy(board, 0, 0, TileColor.GREEN)
    occupy(board, 1, 1, TileColor.RED)
    assert render_board(board) == "#...\n.#..\n...."

    result = board.superimpose(Shape.from_pattern(2, 2, "####"), (0.5, 0.5))
    assert render_board(board, result) == "#...\n.xo.\n.oo."


def test_anchor_from_point_normalises_coordinates():
    assert anchor_from_point(300, 150, 600, 600) == (0.5, 0.25)
    assert anchor_from_point(-60, 0, 600, 600) == (-0.1, 0.0)
    with pytest.raises(ValueError):
        anchor_from_point(1, 1, 0, 10)
