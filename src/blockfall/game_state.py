"""High level game state container and action API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import Board
from .collision import collides, drop_row
from .generator import PieceGenerator, spawn_column
from .piece import HeldPiece, Piece
from .utils import (
    INITIAL_DROP_INTERVAL,
    level_threshold,
    line_clear_score,
    next_drop_interval,
)


LOGGER = logging.getLogger(__name__)

# Horizontal nudges tried, in order, when a rotation does not fit in place.
KICK_OFFSETS = (0, -1, 1, -2, 2)


class GameStatus(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Action(str, Enum):
    """Commands a front-end can send to :meth:`GameState.dispatch`."""

    START = "start"
    TOGGLE_PAUSE = "toggle_pause"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HOLD = "hold"
    TICK = "tick"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of everything a renderer needs."""

    board: Board
    current: Optional[Piece]
    upcoming: Optional[Piece]
    held: Optional[HeldPiece]
    ghost_row: Optional[int]
    can_hold: bool
    score: int
    level: int
    lines: int
    pieces: int
    drop_interval: int
    status: GameStatus


@dataclass
class GameState:
    """Mutable state for a single game session.

    All changes go through the action methods.  Illegal moves, rotations
    and holds are rejected silently and every action other than
    :meth:`start` and :meth:`toggle_pause` is ignored unless the session is
    running.
    """

    board: Board = field(default_factory=Board)
    current: Optional[Piece] = None
    upcoming: Optional[Piece] = None
    held: Optional[HeldPiece] = None
    can_hold: bool = True
    score: int = 0
    level: int = 1
    lines: int = 0
    pieces: int = 0
    drop_interval: int = INITIAL_DROP_INTERVAL
    status: GameStatus = GameStatus.NOT_STARTED
    generator: PieceGenerator = field(default_factory=PieceGenerator)

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    # Session control --------------------------------------------------
    def start(self) -> None:
        """Reset the entire session and begin a new game."""

        self.board = Board()
        self.current = self.generator.generate()
        self.upcoming = self.generator.generate()
        self.held = None
        self.can_hold = True
        self.score = 0
        self.level = 1
        self.lines = 0
        self.pieces = 0
        self.drop_interval = INITIAL_DROP_INTERVAL
        self.status = GameStatus.RUNNING
        LOGGER.info("Game started")

    def toggle_pause(self) -> None:
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
            LOGGER.info("Paused")
        elif self.status is GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
            LOGGER.info("Resumed")

    # Piece actions ----------------------------------------------------
    def move(self, direction: int) -> bool:
        """Shift the current piece one column left (-1) or right (+1).

        Returns ``True`` if the piece moved.

        Raises:
            ValueError: If ``direction`` is not ``-1`` or ``1`` while the
                session is running.
        """

        if not self.running or self.current is None:
            return False
        if direction not in (-1, 1):
            raise ValueError(f"Invalid move direction: {direction}")
        if collides(self.current, self.board, direction, 0):
            return False
        self.current.move(direction, 0)
        return True

    def soft_drop(self) -> bool:
        """Move the current piece down one row, locking it if it cannot fall.

        Returns ``True`` if the piece moved down.
        """

        if not self.running or self.current is None:
            return False
        if not collides(self.current, self.board, 0, 1):
            self.current.move(0, 1)
            return True
        self._lock_current()
        return False

    def tick(self) -> None:
        """Apply one step of gravity."""

        self.soft_drop()

    def rotate_current(self) -> bool:
        """Rotate the current piece clockwise with a simple wall kick.

        The rotated shape is tried at the current column and then nudged
        horizontally by each of ``KICK_OFFSETS``; the first placement that
        fits is committed.  The row never changes.  Returns ``True`` if the
        piece rotated.
        """

        if not self.running or self.current is None:
            return False
        rotated = self.current.rotated()
        for offset in KICK_OFFSETS:
            if not collides(rotated, self.board, offset, 0):
                rotated.move(offset, 0)
                self.current = rotated
                return True
        LOGGER.debug("Rotation of %s rejected at %s", rotated.kind.value, rotated.position)
        return False

    def hold(self) -> bool:
        """Swap the current piece with the held one.

        The swap may only happen once per locked piece; additional calls are
        ignored until the next lock.  The newly active piece is re-centred at
        the spawn position and ends the game if it does not fit there.
        Returns ``True`` if a hold took place.
        """

        if not self.running or self.current is None or not self.can_hold:
            return False

        self.can_hold = False
        outgoing = HeldPiece.from_piece(self.current)
        if self.held is None:
            incoming = self.upcoming or self.generator.generate()
            incoming.position = (0, spawn_column(incoming.shape))
            self.upcoming = self.generator.generate()
        else:
            incoming = self.held.activate((0, spawn_column(self.held.shape)))
        self.held = outgoing
        self.current = incoming

        if collides(self.current, self.board):
            self._game_over()
        return True

    def dispatch(self, action: Action) -> None:
        """Apply ``action`` to the session.

        Raises:
            ValueError: If ``action`` is not a known :class:`Action`.
        """

        action = Action(action)
        if action is Action.START:
            self.start()
        elif action is Action.TOGGLE_PAUSE:
            self.toggle_pause()
        elif action is Action.MOVE_LEFT:
            self.move(-1)
        elif action is Action.MOVE_RIGHT:
            self.move(1)
        elif action is Action.SOFT_DROP:
            self.soft_drop()
        elif action is Action.ROTATE:
            self.rotate_current()
        elif action is Action.HOLD:
            self.hold()
        elif action is Action.TICK:
            self.tick()

    # Queries ------------------------------------------------------------
    def ghost_row(self) -> Optional[int]:
        """Return the row the current piece would land on, if any."""

        if self.current is None or self.status is GameStatus.GAME_OVER:
            return None
        return drop_row(self.current, self.board)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self.board.copy(),
            current=self.current.copy() if self.current else None,
            upcoming=self.upcoming.copy() if self.upcoming else None,
            held=self.held,
            ghost_row=self.ghost_row(),
            can_hold=self.can_hold,
            score=self.score,
            level=self.level,
            lines=self.lines,
            pieces=self.pieces,
            drop_interval=self.drop_interval,
            status=self.status,
        )

    # Internal helpers -------------------------------------------------
    def _lock_current(self) -> None:
        """Merge the current piece, clear rows and promote the next piece."""

        piece = self.current
        piece.collided = True
        self.board.merge(piece)
        self.pieces += 1
        LOGGER.debug("Locked %s at %s", piece.kind.value, piece.position)

        cleared = self.board.clear_full_rows()
        if cleared:
            self._score_lines(cleared)
        self.can_hold = True

        promoted = self.upcoming or self.generator.generate()
        if collides(promoted, self.board):
            self._game_over()
            return
        self.current = promoted
        self.upcoming = self.generator.generate()

    def _score_lines(self, cleared: int) -> None:
        self.lines += cleared
        self.score += line_clear_score(cleared)
        LOGGER.info("Cleared %d row(s). Score: %d", cleared, self.score)
        # A single lock can promote at most one level.
        if self.score >= level_threshold(self.level):
            self.level += 1
            self.drop_interval = next_drop_interval(self.drop_interval)
            LOGGER.info("Level %d, drop interval %d ms", self.level, self.drop_interval)

    def _game_over(self) -> None:
        self.status = GameStatus.GAME_OVER
        LOGGER.info("Game over. Score: %d", self.score)
