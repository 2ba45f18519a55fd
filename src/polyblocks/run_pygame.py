"""Simple pygame front-end for the placement engine.

Move the mouse over the board to preview where the current shape would land;
cells that fit are tinted with the shape's colour and blocked cells in red.
Left click places the shape when the preview succeeds and draws a new one.
"""

from __future__ import annotations

import asyncio
import logging

import pygame

from .board import Board, SuperimpositionState
from .game_state import GameState
from .shape import TileColor
from .utils import anchor_from_point


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60
# Alpha applied to preview cells
OVERLAY_ALPHA = 128

TILE_RGB = {
    TileColor.GRAY: (77, 77, 77),
    TileColor.RED: (255, 0, 0),
    TileColor.GREEN: (0, 255, 0),
    TileColor.BLUE: (0, 0, 255),
}


def cell_rect(row: int, col: int) -> pygame.Rect:
    return pygame.Rect(col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE)


def draw_board(screen: pygame.Surface, board: Board) -> None:
    """Render the placed cells, empty cells in gray."""

    for row, col, cell in board.cells.items():
        rect = cell_rect(row, col)
        pygame.draw.rect(screen, TILE_RGB[cell or TileColor.GRAY], rect)
        pygame.draw.rect(screen, (30, 30, 30), rect, 1)


def draw_overlay(screen: pygame.Surface, state: GameState) -> None:
    """Tint the cells of the latest evaluation on a transparent layer."""

    if state.last is None:
        return
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    for row, col, status in state.last.fields.items():
        if status is SuperimpositionState.FITS:
            color = TILE_RGB[state.active.color]
        elif status is SuperimpositionState.INTERSECTS:
            color = TILE_RGB[TileColor.RED]
        else:
            continue
        pygame.draw.rect(overlay, (*color, OVERLAY_ALPHA), cell_rect(row, col))
    screen.blit(overlay, (0, 0))


class GameRunner:
    """Own the game state and drive the pygame loop."""

    def __init__(self) -> None:
        self._running = False
        self._screen: pygame.Surface | None = None
        self._state: GameState | None = None
        self._clock: pygame.time.Clock | None = None

    @property
    def running(self) -> bool:
        return self._running

    def _handle_event(self, event: pygame.event.Event, state: GameState) -> None:
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.MOUSEMOTION:
            width, height = self._screen.get_size() if self._screen else (1, 1)
            state.evaluate(anchor_from_point(*event.pos, width, height))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if state.accept():
                LOGGER.info("Placed shape %d", state.placed)
                # Preview the new shape under the cursor straight away.
                width, height = self._screen.get_size() if self._screen else (1, 1)
                state.evaluate(anchor_from_point(*event.pos, width, height))

    async def _run_loop(self) -> None:
        pygame.init()
        self._state = GameState()
        board = self._state.board
        self._screen = pygame.display.set_mode((board.width * CELL_SIZE, board.height * CELL_SIZE))
        pygame.display.set_caption("Polyblocks")
        self._clock = pygame.time.Clock()
        LOGGER.info("Game started")

        self._running = True
        while self._running:
            self._clock.tick(FPS)
            for event in pygame.event.get():
                self._handle_event(event, self._state)

            self._screen.fill((0, 0, 0))
            draw_board(self._screen, self._state.board)
            draw_overlay(self._screen, self._state)
            pygame.display.set_caption(f"Polyblocks - placed: {self._state.placed}")
            pygame.display.flip()

            # Yield to the host event loop to keep UI responsive
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")

    def start(self) -> None:
        if self._running:
            LOGGER.info("Game already running")
            return
        asyncio.run(self._run_loop())

    def stop(self) -> None:
        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        self._running = False


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    GameRunner().start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
