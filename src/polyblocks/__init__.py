"""Placement geometry for a polyomino block puzzle."""

from .shape import MASK_SIZE, PLAYABLE_COLORS, Shape, ShapePatternError, TileColor
from .grid import Grid, GridIndexError
from .board import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    Board,
    PlacementError,
    Superimposition,
    SuperimpositionState,
    round_half_away,
)
from .catalog import (
    DEFAULT_PATTERNS,
    CatalogError,
    PatternSpec,
    ShapeCatalog,
    build_catalog,
    default_catalog,
)
from .game_state import GameState
from .utils import anchor_from_point, render_board, render_overlay

__all__ = [
    "MASK_SIZE",
    "PLAYABLE_COLORS",
    "Shape",
    "ShapePatternError",
    "TileColor",
    "Grid",
    "GridIndexError",
    "BOARD_WIDTH",
    "BOARD_HEIGHT",
    "Board",
    "PlacementError",
    "Superimposition",
    "SuperimpositionState",
    "round_half_away",
    "DEFAULT_PATTERNS",
    "CatalogError",
    "PatternSpec",
    "ShapeCatalog",
    "build_catalog",
    "default_catalog",
    "GameState",
    "anchor_from_point",
    "render_board",
    "render_overlay",
]
