from __future__ import annotations

import random

from polyblocks.board import SuperimpositionState
from polyblocks.catalog import PatternSpec, build_catalog
from polyblocks.game_state import GameState, starting_shape
from polyblocks.shape import PLAYABLE_COLORS, TileColor


def test_new_session_starts_with_blue_square() -> None:
    state = GameState()
    assert state.active == starting_shape()
    assert state.active.color is TileColor.BLUE
    assert state.board.occupied_count() == 0
    assert state.last is None


def test_accept_commits_once_per_evaluation() -> None:
    state = GameState(rng=random.Random(0))
    result = state.evaluate((0.5, 0.5))
    assert result.success

    assert state.accept() is True
    assert state.board.occupied_count() == 4
    assert state.placed == 1
    assert state.board.get_cell(9, 9) is TileColor.BLUE

    # The evaluation was consumed; a repeated accept must not place again.
    assert state.accept() is False
    assert state.placed == 1


def test_accept_ignores_failed_evaluation() -> None:
    state = GameState(rng=random.Random(1))
    state.evaluate((0.5, 0.5))
    state.accept()
    occupied = state.board.occupied_count()
    drawn = state.active

    state.active = starting_shape()
    result = state.evaluate((0.5, 0.5))
    assert not result.success
    assert result.cells(SuperimpositionState.INTERSECTS)
    assert state.accept() is False
    assert state.board.occupied_count() == occupied
    assert drawn.color in PLAYABLE_COLORS


def test_accept_without_evaluation_does_nothing() -> None:
    state = GameState()
    assert state.accept() is False
    assert state.board.occupied_count() == 0


def test_spawn_draws_from_catalog_with_playable_color() -> None:
    catalog = build_catalog([PatternSpec(3, 2, "###..#", "L")])
    state = GameState(catalog=catalog, rng=random.Random(42))
    for _ in range(20):
        shape = state.spawn_shape()
        assert any(shape.same_mask(candidate) for candidate in catalog)
        assert shape.color in PLAYABLE_COLORS
    assert all(candidate.color is TileColor.GRAY for candidate in catalog)


def test_seeded_sessions_draw_the_same_shapes() -> None:
    first = GameState()
    second = GameState()
    first.seed(7)
    second.seed(7)
    assert [first.spawn_shape() for _ in range(5)] == [second.spawn_shape() for _ in range(5)]


def test_reset_game_clears_board() -> None:
    state = GameState()
    state.evaluate((0.2, 0.2))
    state.accept()
    state.reset_game()
    assert state.board.occupied_count() == 0
    assert state.placed == 0
    assert state.active == starting_shape()
