"""Falling-block puzzle engine with a pygame front-end."""

from .shapes import PieceKind, SHAPES, COLORS, rotate_shape
from .piece import Piece, HeldPiece
from .board import Board, Cell
from .collision import collides, drop_row
from .generator import PieceGenerator, spawn_piece
from .game_state import Action, GameSnapshot, GameState, GameStatus
from .timer import DropTimer
from .utils import render_grid

__all__ = [
    "PieceKind",
    "SHAPES",
    "COLORS",
    "rotate_shape",
    "Piece",
    "HeldPiece",
    "Board",
    "Cell",
    "collides",
    "drop_row",
    "PieceGenerator",
    "spawn_piece",
    "Action",
    "GameSnapshot",
    "GameState",
    "GameStatus",
    "DropTimer",
    "render_grid",
]
