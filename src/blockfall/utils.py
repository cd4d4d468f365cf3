"""Timing helpers and rendering utilities for the engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board, Cell
from .piece import Piece
from .shapes import GHOST_COLOR


# Gravity timing, in milliseconds.
INITIAL_DROP_INTERVAL = 1000
MIN_DROP_INTERVAL = 100
SPEED_UP_STEP = 50

# Scoring.
LINE_CLEAR_BASE = 100
LEVEL_SCORE_STEP = 1000


def line_clear_score(lines: int) -> int:
    """Return the points awarded for clearing ``lines`` rows in one lock.

    The bonus grows with the square of the row count: 100, 400, 900 and
    1600 for one to four rows.
    """

    return LINE_CLEAR_BASE * lines * lines


def level_threshold(level: int) -> int:
    """Return the score that promotes a player out of ``level``."""

    return level * LEVEL_SCORE_STEP


def next_drop_interval(interval: int) -> int:
    """Return the drop interval after a level-up, floored at the minimum."""

    return max(MIN_DROP_INTERVAL, interval - SPEED_UP_STEP)


def render_grid(
    board: Board,
    active: Optional[Piece] = None,
    ghost_row: Optional[int] = None,
) -> List[List[Cell]]:
    """Return the visible rows with the ghost and active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state.  Overlays are only painted
    onto empty cells.  The ghost uses ``GHOST_COLOR`` with no kind so it
    never reads as a locked block.
    """

    grid = [board.row_cells(row) for row in range(board.height)]
    if active is not None:
        if ghost_row is not None and ghost_row != active.y:
            offset = ghost_row - active.y
            for r, c in active.blocks():
                r += offset
                if board.in_bounds(r, c) and grid[r][c].empty:
                    grid[r][c] = Cell(None, GHOST_COLOR)
        for r, c in active.blocks():
            if board.in_bounds(r, c) and board.is_empty(r, c):
                grid[r][c] = Cell(active.kind, active.color)
    return grid[board.hidden_rows:]
