"""Mutable bookkeeping around the board currently on screen."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from backend.models.board import PuzzleBoard


@dataclass
class GameState:
    """The displayed board plus counters the frontends show.

    ``moves`` counts every slide; ``assisted_moves`` counts the ones
    the solver made through hints or auto-solve.
    """

    board: PuzzleBoard
    moves: int = 0
    assisted_moves: int = 0
    _started: float = field(default_factory=time.monotonic, repr=False)
    _banked: float = field(default=0.0, repr=False)
    _paused: bool = field(default=False, repr=False)

    # -- clock ----------------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._paused:
            return self._banked
        return self._banked + time.monotonic() - self._started

    def pause(self) -> None:
        if not self._paused:
            self._banked = self.elapsed_time
            self._paused = True

    def resume(self) -> None:
        if self._paused:
            self._started = time.monotonic()
            self._paused = False

    # -- moves ----------------------------------------------------------------

    def record_move(self, assisted: bool = False) -> None:
        self.moves += 1
        if assisted:
            self.assisted_moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.resolved()
