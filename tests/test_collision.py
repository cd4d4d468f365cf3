from blockfall.board import TOTAL_HEIGHT, WIDTH, Board
from blockfall.collision import collides, drop_row
from blockfall.generator import spawn_piece
from blockfall.piece import Piece
from blockfall.shapes import PieceKind


def test_spawned_piece_fits_on_empty_board():
    board = Board()
    for kind in PieceKind:
        assert not collides(spawn_piece(kind), board)


def test_horizontal_bounds():
    board = Board()
    piece = spawn_piece(PieceKind.I)  # occupies column 4
    assert not collides(piece, board, dx=-4)
    assert collides(piece, board, dx=-5)
    assert not collides(piece, board, dx=WIDTH - 5)
    assert collides(piece, board, dx=WIDTH - 4)


def test_vertical_bounds():
    board = Board()
    piece = Piece.from_kind(PieceKind.O, position=(0, 0))
    assert collides(piece, board, dy=-1)
    piece.position = (TOTAL_HEIGHT - 2, 0)
    assert not collides(piece, board)
    assert collides(piece, board, dy=1)


def test_occupied_cell_collides():
    board = Board()
    board.set_cell(5, 5, PieceKind.Z, "red")
    piece = Piece.from_kind(PieceKind.O, position=(4, 4))
    assert collides(piece, board)
    assert not collides(piece, board, dx=-1)
    assert collides(piece, board, dy=1)
    assert not collides(piece, board, dx=-1, dy=1)


def test_empty_bitmask_cells_are_ignored():
    board = Board()
    # The I bitmask only uses column 1; column 0 hangs off the left edge.
    piece = Piece.from_kind(PieceKind.I, position=(0, -1))
    assert not collides(piece, board)


def test_drop_row_lands_on_stack():
    board = Board()
    piece = spawn_piece(PieceKind.O)
    assert drop_row(piece, board) == TOTAL_HEIGHT - 2
    board.set_cell(15, 4, PieceKind.T, "purple")
    assert drop_row(piece, board) == 13
