"""Active and held pieces.

A :class:`Piece` only knows its own geometry.  Moving or rotating it never
consults the board; legality is decided by :func:`blockfall.collision.collides`
before the game state commits a change.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

from .shapes import COLORS, SHAPES, PieceKind, Shape, rotate_shape, shape_cells


@dataclass
class Piece:
    """Falling piece in the game."""

    kind: PieceKind
    shape: Shape
    color: str
    position: Tuple[int, int] = (0, 0)  # (row, col)
    collided: bool = False

    @classmethod
    def from_kind(cls, kind: PieceKind, position: Tuple[int, int] = (0, 0)) -> "Piece":
        """Build a piece in its catalog orientation."""

        return cls(kind, SHAPES[kind], COLORS[kind], position)

    @property
    def x(self) -> int:
        return self.position[1]

    @property
    def y(self) -> int:
        return self.position[0]

    @property
    def size(self) -> int:
        """Width of the (square) bitmask."""

        return len(self.shape[0])

    def move(self, dx: int, dy: int) -> None:
        """Move the piece by the given offsets.

        ``dx`` moves horizontally (columns) and ``dy`` moves vertically
        (rows).  The piece's position is stored as ``(row, col)``.
        """

        row, col = self.position
        self.position = (row + dy, col + dx)

    def rotated(self) -> "Piece":
        """Return a copy of the piece rotated clockwise."""

        return replace(self, shape=rotate_shape(self.shape))

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the board coordinates covered by this piece."""

        row, col = self.position
        return [(row + dr, col + dc) for dr, dc in shape_cells(self.shape)]

    def copy(self) -> "Piece":
        return replace(self)


@dataclass(frozen=True)
class HeldPiece:
    """Piece set aside by the hold mechanic, detached from any position."""

    kind: PieceKind
    shape: Shape
    color: str

    @classmethod
    def from_piece(cls, piece: Piece) -> "HeldPiece":
        """Hold ``piece`` in its catalog orientation.

        Rotation applied while the piece was falling is discarded.
        """

        return cls(piece.kind, SHAPES[piece.kind], piece.color)

    def activate(self, position: Tuple[int, int]) -> Piece:
        """Return a fresh active piece at ``position``."""

        return Piece(self.kind, self.shape, self.color, position)
