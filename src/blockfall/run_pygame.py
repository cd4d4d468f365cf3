"""Simple pygame front-end for the engine.

This module provides a playable version of the game on top of
:class:`blockfall.game_state.GameState`.  It only reads snapshots and forwards
key presses as :class:`Action` values; all rules live in the engine.

Controls: arrows move/rotate/soft-drop, ``C`` holds, ``P`` pauses and
``Enter`` starts a new game.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional

import pygame

from .board import Board
from .game_state import Action, GameSnapshot, GameState, GameStatus
from .piece import HeldPiece, Piece
from .shapes import Shape
from .timer import DropTimer
from .utils import render_grid

LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60
# Width of the side panel showing the hold and next pieces
PANEL_CELLS = 6
GRID_LINE_COLOR = (50, 50, 50)
TEXT_COLOR = (220, 220, 220)

KEY_ACTIONS = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE,
    pygame.K_c: Action.HOLD,
    pygame.K_p: Action.TOGGLE_PAUSE,
    pygame.K_RETURN: Action.START,
}


def handle_key(event: pygame.event.Event, state: GameState) -> Optional[Action]:
    """Translate a key press into an engine action and apply it."""

    action = KEY_ACTIONS.get(event.key)
    if action is not None:
        state.dispatch(action)
    return action


def _draw_cell(screen: pygame.Surface, x: int, y: int, color: str) -> None:
    rect = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, pygame.Color(color), rect)
    pygame.draw.rect(screen, GRID_LINE_COLOR, rect, 1)


def draw_board(screen: pygame.Surface, snapshot: GameSnapshot) -> None:
    """Render the visible rows with the ghost and active piece."""

    show_active = snapshot.status is GameStatus.RUNNING
    grid = render_grid(
        snapshot.board,
        snapshot.current if show_active else None,
        snapshot.ghost_row if show_active else None,
    )
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            _draw_cell(screen, c * CELL_SIZE, r * CELL_SIZE, cell.color)


def draw_preview(
    screen: pygame.Surface,
    piece: Optional[Piece | HeldPiece],
    top: int,
    label: str,
    font: pygame.font.Font,
) -> None:
    """Render a small preview of ``piece`` in the side panel."""

    left = Board.width * CELL_SIZE + CELL_SIZE // 2
    screen.blit(font.render(label, True, TEXT_COLOR), (left, top))
    if piece is None:
        return
    shape: Shape = piece.shape
    for r, row in enumerate(shape):
        for c, value in enumerate(row):
            if value:
                _draw_cell(screen, left + c * CELL_SIZE, top + (r + 1) * CELL_SIZE, piece.color)


class GameRunner:
    """Manage the game loop, feeding key presses and gravity to the engine."""

    def __init__(self, state: Optional[GameState] = None) -> None:
        self._running = False
        self._task: asyncio.Task | None = None
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self.state = state or GameState()
        self.timer = DropTimer(self.state)

    @property
    def running(self) -> bool:
        return self._running

    def _caption(self, snapshot: GameSnapshot) -> str:
        status = {
            GameStatus.NOT_STARTED: "Press Enter to start - ",
            GameStatus.PAUSED: "Paused - ",
            GameStatus.GAME_OVER: "Game over - ",
        }.get(snapshot.status, "")
        return f"Blockfall - {status}Score: {snapshot.score} Level: {snapshot.level}"

    def _draw(self) -> None:
        if not self._screen or not self._font:
            return
        snapshot = self.state.snapshot()
        self._screen.fill((0, 0, 0))
        draw_board(self._screen, snapshot)
        draw_preview(self._screen, snapshot.held, CELL_SIZE // 2, "Hold", self._font)
        draw_preview(self._screen, snapshot.upcoming, CELL_SIZE * 7, "Next", self._font)
        pygame.display.set_caption(self._caption(snapshot))
        pygame.display.flip()

    async def _run_loop(self) -> None:
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        pygame.init()
        board_px = (Board.width + PANEL_CELLS) * CELL_SIZE
        board_py = Board.visible_height * CELL_SIZE
        self._screen = pygame.display.set_mode((board_px, board_py))
        self._clock = pygame.time.Clock()
        self._font = pygame.font.Font(None, 24)
        LOGGER.info("Window opened")

        self._running = True
        while self._running:
            dt = self._clock.tick(FPS) if self._clock else 0
            # Events and gravity are applied one at a time; nothing awaits
            # while an action is in progress.
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(event, self.state)
            self.timer.update(dt)
            self._draw()
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Window closed")

    def start(self) -> None:
        if self._task and not self._task.done():
            LOGGER.info("Game already running")
            return
        try:
            loop = asyncio.get_running_loop()
            self._task = loop.create_task(self._run_loop())
        except RuntimeError:
            # No running loop (e.g., plain Python); run synchronously
            asyncio.run(self._run_loop())

    def stop(self) -> None:
        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        self._running = False


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    GameRunner().start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
