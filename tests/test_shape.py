from __future__ import annotations

import numpy as np
import pytest

from polyblocks.shape import MASK_SIZE, Shape, ShapePatternError, TileColor


L_TROMINO = Shape.from_pattern(2, 2, "##.#")


def test_bounds_of_empty_and_square_masks() -> None:
    assert Shape().bounds() == (0, 0)
    assert Shape.from_pattern(2, 2, "####").bounds() == (2, 2)
    assert Shape.from_pattern(4, 1, "####").bounds() == (4, 1)


def test_bounds_measured_from_origin() -> None:
    shape = Shape([[False, False], [False, True]])
    assert shape.bounds() == (2, 2)


def test_rotate_90_moves_cells_clockwise() -> None:
    line = Shape.from_pattern(3, 1, "###")
    assert str(line.rotate_90()) == "#\n#\n#"

    ell = Shape.from_pattern(3, 2, "###..#")
    rotated = ell.rotate_90()
    assert rotated.bounds() == (2, 3)
    assert str(rotated) == ".#\n.#\n##"


def test_rotate_90_keeps_color_and_does_not_mutate() -> None:
    shape = Shape.from_pattern(3, 2, "###.#.").with_color(TileColor.GREEN)
    before = shape.mask.copy()
    rotated = shape.rotate_90()
    assert rotated.color is TileColor.GREEN
    assert np.array_equal(shape.mask, before)


@pytest.mark.parametrize(
    "width, height, pattern",
    [(2, 2, "##.#"), (3, 2, "###..#"), (3, 2, "##..##"), (4, 1, "####"), (3, 3, "#.#.#.#.#")],
)
def test_four_rotations_restore_original(width: int, height: int, pattern: str) -> None:
    shape = Shape.from_pattern(width, height, pattern)
    rotated = shape
    for _ in range(4):
        rotated = rotated.rotate_90()
    assert np.array_equal(rotated.mask, shape.mask)
    assert rotated == shape


def test_equivalents_of_symmetric_and_asymmetric_shapes() -> None:
    assert len(Shape.from_pattern(2, 2, "####").equivalents()) == 1
    assert len(L_TROMINO.equivalents()) == 4
    assert len(Shape.from_pattern(3, 2, "##..##").equivalents()) == 2
    assert len(Shape.from_pattern(4, 1, "####").equivalents()) == 2


def test_equivalents_start_with_base_and_are_distinct() -> None:
    variants = L_TROMINO.equivalents()
    assert variants[0] is L_TROMINO
    assert [str(v) for v in variants] == ["##\n.#", ".#\n##", "#.\n##", "##\n#."]
    for i, a in enumerate(variants):
        for b in variants[i + 1:]:
            assert not a.same_mask(b)


def test_from_pattern_round_trips_through_str() -> None:
    for width, height, pattern in [(3, 2, "###.#."), (1, 1, "#"), (2, 3, "#.##.#"), (3, 3, "#########")]:
        text = str(Shape.from_pattern(width, height, pattern))
        assert text.replace("\n", "") == pattern
        assert text.count("\n") == height - 1
        assert not text.endswith("\n")


def test_from_pattern_defaults_to_gray() -> None:
    assert Shape.from_pattern(1, 1, "#").color is TileColor.GRAY


def test_from_pattern_rejects_wrong_length() -> None:
    with pytest.raises(ShapePatternError, match="length"):
        Shape.from_pattern(2, 2, "###")


def test_from_pattern_rejects_oversize_dimensions() -> None:
    with pytest.raises(ShapePatternError, match="out of bounds"):
        Shape.from_pattern(MASK_SIZE + 1, 1, "#" * (MASK_SIZE + 1))
    with pytest.raises(ShapePatternError, match="out of bounds"):
        Shape.from_pattern(0, 0, "")


def test_from_pattern_rejects_invalid_character() -> None:
    with pytest.raises(ShapePatternError, match="'x'.*position 2"):
        Shape.from_pattern(2, 2, "##x#")


def test_pattern_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Shape.from_pattern(1, 1, "?")


def test_constructor_rejects_oversize_mask() -> None:
    with pytest.raises(ShapePatternError):
        Shape(np.ones((MASK_SIZE + 1, 2), dtype=bool))


def test_mask_is_read_only() -> None:
    shape = Shape.from_pattern(1, 1, "#")
    with pytest.raises(ValueError):
        shape.mask[0, 0] = False


def test_color_reassignment_keeps_mask() -> None:
    shape = Shape.from_pattern(2, 1, "##")
    shape.color = TileColor.RED
    assert shape.color is TileColor.RED
    assert str(shape) == "##"


def test_cells_are_row_major_xy_pairs() -> None:
    shape = Shape.from_pattern(3, 2, "###..#")
    assert shape.cells() == [(0, 0), (1, 0), (2, 0), (2, 1)]


def test_equality_and_hash() -> None:
    red = Shape.from_pattern(2, 2, "####").with_color(TileColor.RED)
    blue = red.with_color(TileColor.BLUE)
    assert red == Shape.from_pattern(2, 2, "####").with_color(TileColor.RED)
    assert red != blue
    assert red.same_mask(blue)
    assert hash(red) == hash(blue)
    assert str(Shape()) == ""
