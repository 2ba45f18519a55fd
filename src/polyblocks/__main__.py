"""Simple ASCII demo for the placement engine.

Run with: `python -m polyblocks`

Prints the board with the starting shape previewed at the given anchor, then
places it and previews a randomly drawn second shape at the same spot.  Pass
``--catalog`` to list every shape in the catalog instead.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .catalog import default_catalog
from .game_state import GameState
from .utils import render_board


def print_catalog() -> None:
    catalog = default_catalog()
    for index, shape in enumerate(catalog):
        width, height = shape.bounds()
        print(f"[{index}] {width}x{height}")
        print(shape)
        print()


def run_demo(anchor: tuple[float, float], seed: Optional[int]) -> None:
    state = GameState()
    state.seed(seed)

    result = state.evaluate(anchor)
    print(f"Shape 1 ({state.active.color.value}) success={result.success}")
    print(render_board(state.board, result))

    state.accept()
    result = state.evaluate(anchor)
    print()
    print(f"Shape 2 ({state.active.color.value}) success={result.success}")
    print(render_board(state.board, result))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="polyblocks", description=__doc__)
    parser.add_argument("--catalog", action="store_true", help="List the shape catalog and exit.")
    parser.add_argument(
        "--anchor",
        type=float,
        nargs=2,
        default=(0.5, 0.5),
        metavar=("X", "Y"),
        help="Normalised placement anchor (0..1 across the board).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the next-shape draw.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")
    if args.catalog:
        print_catalog()
    else:
        run_demo(tuple(args.anchor), args.seed)


if __name__ == "__main__":
    main()
