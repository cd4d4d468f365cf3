import logging

import pytest

from blockfall.board import TOTAL_HEIGHT
from blockfall.game_state import GameState
from blockfall.generator import PieceGenerator, spawn_piece
from blockfall.piece import Piece
from blockfall.shapes import PieceKind
from blockfall.utils import INITIAL_DROP_INTERVAL, MIN_DROP_INTERVAL


def prepare_clear(rows: int) -> GameState:
    """Fill the bottom ``rows`` rows except the last column and hang a
    vertical I over the gap so the next tick locks it."""

    state = GameState(generator=PieceGenerator(seed=0))
    state.start()
    board = state.board
    for row in range(TOTAL_HEIGHT - rows, TOTAL_HEIGHT):
        for col in range(board.width - 1):
            board.set_cell(row, col, PieceKind.L, "orange")
    # Column 1 of the I bitmask lands in the last board column.
    state.current = Piece.from_kind(PieceKind.I, position=(TOTAL_HEIGHT - 4, board.width - 2))
    state.upcoming = spawn_piece(PieceKind.O)
    return state


@pytest.mark.parametrize("rows, expected", [(1, 100), (2, 400), (3, 900), (4, 1600)])
def test_line_clear_scores_quadratically(rows, expected):
    state = prepare_clear(rows)
    state.tick()
    assert state.score == expected
    assert state.lines == rows
    assert state.board.grid.shape == (TOTAL_HEIGHT, state.board.width)


def test_level_up_on_threshold():
    state = prepare_clear(4)
    state.tick()
    assert state.level == 2
    assert state.drop_interval == INITIAL_DROP_INTERVAL - 50


def test_no_level_up_below_threshold():
    state = prepare_clear(3)
    state.tick()
    assert state.level == 1
    assert state.drop_interval == INITIAL_DROP_INTERVAL


def test_level_rises_by_one_even_past_several_thresholds():
    state = prepare_clear(4)
    state.score = 1900
    state.tick()
    assert state.score == 3500
    assert state.level == 2


def test_drop_interval_is_floored():
    state = prepare_clear(1)
    state.score = 900
    state.drop_interval = MIN_DROP_INTERVAL + 20
    state.tick()
    assert state.level == 2
    assert state.drop_interval == MIN_DROP_INTERVAL


def test_line_clear_is_logged(caplog):
    state = prepare_clear(2)
    with caplog.at_level(logging.INFO, logger="blockfall.game_state"):
        state.tick()
    assert "Cleared 2 row(s)" in caplog.text


def test_start_resets_progress():
    state = prepare_clear(4)
    state.tick()
    state.start()
    assert state.score == 0
    assert state.level == 1
    assert state.lines == 0
    assert state.pieces == 0
    assert state.drop_interval == INITIAL_DROP_INTERVAL
    assert state.held is None
    assert state.can_hold
    assert not state.board.grid.any()
