"""High level game session container.

Random draws live here rather than in the board or shape modules so the
placement core stays deterministic.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .board import Anchor, Board, Superimposition
from .catalog import ShapeCatalog, default_catalog
from .shape import PLAYABLE_COLORS, Shape, TileColor


LOGGER = logging.getLogger(__name__)


def starting_shape() -> Shape:
    """Return the piece every session opens with: a blue 2x2 square."""

    return Shape.from_pattern(2, 2, "####").with_color(TileColor.BLUE)


@dataclass
class GameState:
    """Mutable state for one play session, owned by the host loop."""

    board: Board = field(default_factory=Board)
    active: Shape = field(default_factory=starting_shape)
    catalog: ShapeCatalog = field(default_factory=default_catalog)
    rng: random.Random = field(default_factory=random.Random)
    last: Optional[Superimposition] = None
    placed: int = 0

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def spawn_shape(self) -> Shape:
        """Draw a random catalog shape, paint it a random colour and activate it."""

        if not self.catalog:
            raise ValueError("Cannot draw from an empty shape catalog")
        shape = self.catalog[self.rng.randrange(len(self.catalog))]
        self.active = shape.with_color(self.rng.choice(PLAYABLE_COLORS))
        LOGGER.debug("Spawned %r", self.active)
        return self.active

    def evaluate(self, anchor: Anchor) -> Superimposition:
        """Superimpose the active shape at ``anchor`` and remember the result."""

        self.last = self.board.superimpose(self.active, anchor)
        return self.last

    def accept(self) -> bool:
        """Handle one accept signal.

        Commits the most recent evaluation if it succeeded, then retires the
        active shape and draws the next one.  The evaluation is consumed, so a
        second accept without a fresh :meth:`evaluate` does nothing.  Returns
        ``True`` when the board changed.
        """

        result, self.last = self.last, None
        if result is None or not result.success:
            return False
        written = self.board.commit(result, self.active.color)
        self.placed += 1
        LOGGER.debug("Placed %d cell(s) of %s", written, self.active.color.value)
        self.spawn_shape()
        return True

    def reset_game(self) -> None:
        """Reset the session to an empty board and the starting shape."""

        self.board = Board()
        self.active = starting_shape()
        self.last = None
        self.placed = 0
