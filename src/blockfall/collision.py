"""Legality checks for piece placement."""

from __future__ import annotations

from .board import Board
from .piece import Piece


def collides(piece: Piece, board: Board, dx: int = 0, dy: int = 0) -> bool:
    """Return ``True`` if ``piece`` shifted by ``(dx, dy)`` is not placeable.

    A placement is rejected when any occupied cell of the piece would leave
    the board (above, below, left or right) or land on a locked cell.  Every
    move, rotation, spawn and hold goes through this check before the game
    state commits it.
    """

    for row, col in piece.blocks():
        if not board.is_empty(row + dy, col + dx):
            return True
    return False


def drop_row(piece: Piece, board: Board) -> int:
    """Return the lowest row ``piece`` reaches by falling straight down."""

    dy = 0
    while not collides(piece, board, 0, dy + 1):
        dy += 1
    return piece.y + dy
