"""Random piece generation."""

from __future__ import annotations

import random
from typing import Optional

from .board import WIDTH
from .piece import Piece
from .shapes import PieceKind, Shape


def spawn_column(shape: Shape, width: int = WIDTH) -> int:
    """Return the column that centres ``shape`` at the top of the board."""

    return width // 2 - len(shape[0]) // 2


def spawn_piece(kind: PieceKind) -> Piece:
    """Return a piece of ``kind`` at its spawn position."""

    piece = Piece.from_kind(kind)
    piece.position = (0, spawn_column(piece.shape))
    return piece


class PieceGenerator:
    """Uniform random source of pieces.

    Pass ``seed`` (or a ready ``random.Random``) for reproducible sequences.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def random_kind(self) -> PieceKind:
        return self.rng.choice(list(PieceKind))

    def generate(self) -> Piece:
        """Return a new piece at its spawn position.

        The placement is not checked against the board; the game state
        detects a blocked spawn when the piece is promoted.
        """

        return spawn_piece(self.random_kind())
