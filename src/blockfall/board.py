"""Board representation for the playfield."""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

import numpy as np
from numpy.typing import NDArray

from .piece import Piece
from .shapes import EMPTY_COLOR, PieceKind


LOGGER = logging.getLogger(__name__)

# Dimensions of the playfield.  The hidden rows sit above the visible area
# and give freshly spawned pieces room before they come into view.
WIDTH = 10
VISIBLE_HEIGHT = 20
HIDDEN_ROWS = 2
TOTAL_HEIGHT = VISIBLE_HEIGHT + HIDDEN_ROWS

Grid = NDArray[np.uint8]
ColorGrid = NDArray[np.object_]

# Mapping from ``PieceKind`` to the integer stored in the grid.  ``0`` marks
# an empty cell.
PIECE_VALUES = {k: i + 1 for i, k in enumerate(PieceKind)}
KIND_BY_VALUE = {v: k for k, v in PIECE_VALUES.items()}


class Cell(NamedTuple):
    """A single board cell as seen by readers."""

    kind: Optional[PieceKind]
    color: str

    @property
    def empty(self) -> bool:
        return self.kind is None


EMPTY_CELL = Cell(None, EMPTY_COLOR)


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((TOTAL_HEIGHT, WIDTH), dtype=np.uint8)


def create_empty_colors() -> ColorGrid:
    return np.full((TOTAL_HEIGHT, WIDTH), EMPTY_COLOR, dtype=object)


class Board:
    """Playfield holding the locked cells.

    ``grid`` stores one kind code per cell and ``colors`` the colour label
    the cell was painted with.  Both arrays always have exactly
    ``TOTAL_HEIGHT`` rows of ``WIDTH`` cells.
    """

    width: int = WIDTH
    height: int = TOTAL_HEIGHT
    visible_height: int = VISIBLE_HEIGHT
    hidden_rows: int = HIDDEN_ROWS

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()
        self.colors: ColorGrid = create_empty_colors()

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    def copy(self) -> "Board":
        board = Board()
        board.grid = self.grid.copy()
        board.colors = self.colors.copy()
        return board

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get_cell(self, row: int, col: int) -> Cell:
        """Safely return the cell at ``(row, col)``.

        Empty cells always report ``EMPTY_COLOR``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if not self.in_bounds(row, col):
            raise IndexError("Cell out of bounds")
        value = int(self.grid[row, col])
        if value == 0:
            return EMPTY_CELL
        return Cell(KIND_BY_VALUE[value], self.colors[row, col])

    def set_cell(
        self,
        row: int,
        col: int,
        kind: Optional[PieceKind],
        color: Optional[str] = None,
    ) -> None:
        """Safely set the cell at ``(row, col)``.

        Passing ``kind=None`` empties the cell.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if not self.in_bounds(row, col):
            raise IndexError("Cell out of bounds")
        if kind is None:
            self.grid[row, col] = 0
            self.colors[row, col] = EMPTY_COLOR
        else:
            self.grid[row, col] = np.uint8(PIECE_VALUES[kind])
            self.colors[row, col] = color if color is not None else EMPTY_COLOR

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied.  This makes
        collision detection simpler as off-board positions are automatically
        rejected.
        """

        if self.in_bounds(row, col):
            return bool(self.grid[row, col] == 0)
        return False

    def merge(self, piece: Piece) -> None:
        """Write the piece's cells into the board.

        Cells falling outside the board are skipped.  That only happens when a
        caller bypassed the collision check, so it is logged as a warning.
        """

        value = np.uint8(PIECE_VALUES[piece.kind])
        for row, col in piece.blocks():
            if not self.in_bounds(row, col):
                LOGGER.warning(
                    "Skipping out-of-bounds cell (%d, %d) while merging %s",
                    row,
                    col,
                    piece.kind.value,
                )
                continue
            self.grid[row, col] = value
            self.colors[row, col] = piece.color

    def full_rows(self) -> NDArray[np.bool_]:
        return np.all(self.grid != 0, axis=1)

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        The same number of empty rows is inserted at the top so the board
        height never changes.
        """

        full = self.full_rows()
        cleared = int(np.count_nonzero(full))
        if cleared:
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, self.grid[~full]))
            new_colors = np.full((cleared, self.width), EMPTY_COLOR, dtype=object)
            self.colors = np.vstack((new_colors, self.colors[~full]))
        return cleared

    def row_cells(self, row: int) -> List[Cell]:
        return [self.get_cell(row, col) for col in range(self.width)]

    def visible_rows(self) -> List[List[Cell]]:
        """Return the rows a front-end should draw, top to bottom."""

        return [self.row_cells(row) for row in range(self.hidden_rows, self.height)]
