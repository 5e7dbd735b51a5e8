"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from typing import Any

from backend.logger import get_logger
from backend.models.board import EMPTY, PuzzleBoard

SHUFFLE_STEPS = 40
MAX_ATTEMPTS = 100

log = get_logger("generator")


class GameGenerator:
    """Creates solvable puzzles by walking away from the solved state."""

    @staticmethod
    def solved(
        size: int, payloads: Mapping[int, Any] | Sequence[Any] | None = None
    ) -> PuzzleBoard:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        labels: list[int | None] = list(range(size * size - 1))
        labels.append(EMPTY)
        return PuzzleBoard.from_labels(labels, size=size, payloads=payloads)

    @staticmethod
    def scramble(
        board: PuzzleBoard,
        steps: int = SHUFFLE_STEPS,
        rng: random.Random | None = None,
    ) -> PuzzleBoard:
        """Return a board *steps* random slides away from *board*.

        The walk never undoes the slide it just made.  The returned
        board has its history reset; with *steps* of 0 it is a fresh
        copy, so *board* keeps its own history.
        """
        rng = rng or random.Random()
        if steps <= 0:
            return PuzzleBoard.from_labels(
                board.labels, size=board.size, payloads=_payloads_of(board)
            )

        current = board
        for _ in range(steps):
            candidates = current.neighbours()
            back = current.previous_board
            if back is not None and len(candidates) > 1:
                candidates = [b for b in candidates if b != back]
            current = rng.choice(candidates)

        log.debug("Scrambled {} steps to {}", steps, current.labels)
        current.reset()
        return current

    @staticmethod
    def generate(
        size: int, steps: int = SHUFFLE_STEPS, seed: int | None = None
    ) -> PuzzleBoard:
        """Return a random *solvable*, unsolved board of the given size."""
        rng = random.Random(seed)
        solved = GameGenerator.solved(size)
        for _ in range(MAX_ATTEMPTS):
            board = GameGenerator.scramble(solved, steps, rng)
            if not board.resolved():
                return board
        raise ValueError(
            f"No unsolved {size}×{size} board after {MAX_ATTEMPTS} walks of {steps} steps."
        )


def _payloads_of(board: PuzzleBoard) -> dict[int, Any]:
    return {t.number: t.payload for t in board.tiles if t is not EMPTY}
