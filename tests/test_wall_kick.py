from blockfall.board import Board
from blockfall.collision import collides
from blockfall.game_state import GameState
from blockfall.generator import PieceGenerator, spawn_piece
from blockfall.piece import Piece
from blockfall.shapes import SHAPES, PieceKind, rotate_shape


def make_state(current):
    state = GameState(generator=PieceGenerator(seed=2))
    state.start()
    state.current = current
    state.upcoming = spawn_piece(PieceKind.O)
    return state


def test_rotation_in_open_space_keeps_position():
    state = make_state(Piece.from_kind(PieceKind.L, position=(5, 4)))
    assert state.rotate_current() is True
    assert state.current.position == (5, 4)
    assert state.current.shape == rotate_shape(SHAPES[PieceKind.L])


def test_i_piece_against_right_wall_kicks_two_left():
    # The vertical I occupies bitmask column 1, so x = width - 2 puts it
    # flush against the right wall.  Offsets 0, -1 and +1 overflow the wall.
    state = make_state(Piece.from_kind(PieceKind.I, position=(5, Board.width - 2)))

    assert state.rotate_current() is True

    assert state.current.position == (5, Board.width - 4)
    assert state.current.shape[1] == (1, 1, 1, 1)
    assert not collides(state.current, state.board)


def test_left_kick_preferred_over_right():
    state = make_state(Piece.from_kind(PieceKind.T, position=(5, 4)))
    state.board.set_cell(5, 5, PieceKind.Z, "red")

    assert state.rotate_current() is True

    # Both -1 and +1 fit; -1 is tried first.
    assert state.current.position == (5, 3)


def test_rotation_rejected_when_no_offset_fits():
    state = make_state(Piece.from_kind(PieceKind.I, position=(16, Board.width - 2)))
    for col in range(Board.width - 1):
        state.board.set_cell(17, col, PieceKind.J, "blue")
    before = state.current

    assert state.rotate_current() is False

    assert state.current is before
    assert state.current.shape == SHAPES[PieceKind.I]
    assert state.current.position == (16, Board.width - 2)


def test_four_committed_rotations_restore_piece():
    state = make_state(Piece.from_kind(PieceKind.S, position=(8, 3)))
    for _ in range(4):
        assert state.rotate_current()
    assert state.current.shape == SHAPES[PieceKind.S]
    assert state.current.position == (8, 3)
