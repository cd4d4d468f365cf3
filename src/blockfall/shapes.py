"""Shape catalog for the seven piece kinds.

Each kind has a fixed square bitmask in its spawn orientation and a colour
label.  Colour labels are opaque strings as far as the engine is concerned;
front-ends resolve them (the defaults happen to be valid ``pygame`` colour
names).
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

Shape = Tuple[Tuple[int, ...], ...]

# Colour reported for empty cells, whatever the board has stored.
EMPTY_COLOR = "gray15"
# Colour label used for the ghost overlay in rendered grids.
GHOST_COLOR = "gray40"


class PieceKind(str, Enum):
    """Enumeration of the seven standard piece kinds."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    Z = "Z"
    T = "T"


SHAPES: Dict[PieceKind, Shape] = {
    PieceKind.I: (
        (0, 1, 0, 0),
        (0, 1, 0, 0),
        (0, 1, 0, 0),
        (0, 1, 0, 0),
    ),
    PieceKind.J: (
        (0, 1, 0),
        (0, 1, 0),
        (1, 1, 0),
    ),
    PieceKind.L: (
        (0, 1, 0),
        (0, 1, 0),
        (0, 1, 1),
    ),
    PieceKind.O: (
        (1, 1),
        (1, 1),
    ),
    PieceKind.S: (
        (0, 1, 1),
        (1, 1, 0),
        (0, 0, 0),
    ),
    PieceKind.Z: (
        (1, 1, 0),
        (0, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.T: (
        (0, 0, 0),
        (1, 1, 1),
        (0, 1, 0),
    ),
}

COLORS: Dict[PieceKind, str] = {
    PieceKind.I: "cyan",
    PieceKind.J: "blue",
    PieceKind.L: "orange",
    PieceKind.O: "yellow",
    PieceKind.S: "green",
    PieceKind.Z: "red",
    PieceKind.T: "purple",
}


def rotate_shape(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    Equivalent to transposing the matrix and reversing each row.  The result
    has the same ``N x N`` dimensions, so applying the rotation four times
    yields the original shape.
    """

    return tuple(tuple(row) for row in zip(*shape[::-1]))


def shape_cells(shape: Shape) -> list[tuple[int, int]]:
    """Return the ``(row, col)`` offsets of the occupied cells in ``shape``."""

    return [
        (r, c)
        for r, row in enumerate(shape)
        for c, value in enumerate(row)
        if value
    ]
