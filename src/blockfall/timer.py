"""Gravity timer driven by elapsed frame time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .game_state import GameState, GameStatus


LOGGER = logging.getLogger(__name__)


@dataclass
class DropTimer:
    """Fire :meth:`GameState.tick` every ``drop_interval`` milliseconds.

    The timer is cancelled whenever the session stops running (pause or game
    over) and rescheduled whenever the drop interval changes, so a level-up
    never inherits time accumulated at the old speed.  The frame that
    schedules the timer already counts towards the first drop.
    """

    state: GameState
    drop_accum: float = 0.0
    interval: Optional[int] = None
    active: bool = False

    def cancel(self) -> None:
        if self.active:
            LOGGER.debug("Drop timer cancelled (%s)", self.state.status.value)
        self.drop_accum = 0.0
        self.active = False

    def update(self, elapsed_ms: float) -> bool:
        """Advance the timer by ``elapsed_ms``.

        Returns ``True`` if a gravity tick was applied.
        """

        if self.state.status is not GameStatus.RUNNING:
            self.cancel()
            return False
        if not self.active or self.interval != self.state.drop_interval:
            self.interval = self.state.drop_interval
            self.drop_accum = 0.0
            self.active = True
            LOGGER.debug("Drop timer scheduled every %d ms", self.interval)

        self.drop_accum += elapsed_ms
        if self.drop_accum < self.interval:
            return False
        self.drop_accum = 0.0
        self.state.tick()
        if self.state.status is not GameStatus.RUNNING:
            self.cancel()
        return True
