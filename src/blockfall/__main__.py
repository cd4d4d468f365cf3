"""Simple ASCII demo for the engine.

Run with: `python -m blockfall`

Starts a session, applies a number of gravity ticks and prints the visible
board with the ghost and active piece, which is a minimal smoke test that
renderers see more than a blank grid.
"""

from __future__ import annotations

import argparse
import logging

from . import GameState, PieceGenerator, render_grid
from .board import Cell
from .shapes import GHOST_COLOR


def _cell_char(cell: Cell) -> str:
    if cell.kind is not None:
        return cell.kind.value
    if cell.color == GHOST_COLOR:
        return ":"
    return "."


def format_frame(state: GameState) -> str:
    snapshot = state.snapshot()
    grid = render_grid(snapshot.board, snapshot.current, snapshot.ghost_row)
    lines = ["".join(_cell_char(cell) for cell in row) for row in grid]
    lines.append(
        f"score={snapshot.score} level={snapshot.level} "
        f"next={snapshot.upcoming.kind.value if snapshot.upcoming else '-'} "
        f"status={snapshot.status.value}"
    )
    return "\n".join(lines)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print an ASCII frame of a fresh game.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece generation")
    parser.add_argument("--ticks", type=int, default=0, help="Gravity ticks to apply before printing")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    gs = GameState(generator=PieceGenerator(args.seed))
    gs.start()
    for _ in range(max(0, args.ticks)):
        gs.tick()
    print(format_frame(gs))


if __name__ == "__main__":
    main()
