"""A* solver over ``PuzzleBoard`` states."""

from __future__ import annotations

import heapq
import itertools

from backend.logger import get_logger
from backend.models.board import Direction, PuzzleBoard

log = get_logger("solver")

MAX_EXPANSIONS = 200_000


class SearchLimitReached(RuntimeError):
    """Raised when the search expands more boards than it was allowed."""

    def __init__(self, expansions: int) -> None:
        super().__init__(f"Gave up after {expansions} expanded boards.")
        self.expansions = expansions


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: PuzzleBoard, max_expansions: int | None = MAX_EXPANSIONS
    ) -> list[PuzzleBoard]:
        """Return the boards leading from *board* to the solved layout.

        The start board itself is not included.  Returns ``[]`` if
        *board* is already solved or unsolvable.  Raises
        ``SearchLimitReached`` once more than *max_expansions* boards have
        been expanded; ``None`` lifts the limit.
        """
        if board.resolved():
            return []

        if not Solver.is_solvable(board):
            log.warning("Board {} is unsolvable", board.labels)
            return []

        log.debug("Solving {} (heuristic {})", board.labels, board.heuristic())

        # Entries are (priority, insertion order, board); the counter keeps
        # ties first-in first-out and stops heapq from comparing boards.
        counter = itertools.count()
        frontier: list[tuple[int, int, PuzzleBoard]] = [
            (board.priority(), next(counter), board)
        ]
        visited: set[PuzzleBoard] = set()
        expanded = 0

        while frontier:
            _, _, current = heapq.heappop(frontier)
            if current in visited:
                continue

            if current.resolved():
                path = Solver._path_from(board, current)
                log.debug(
                    "Solved in {} moves after {} expansions", len(path), expanded
                )
                return path

            visited.add(current)
            expanded += 1
            if max_expansions is not None and expanded > max_expansions:
                log.warning("Gave up after {} expansions", max_expansions)
                raise SearchLimitReached(max_expansions)

            for neighbour in current.neighbours():
                if neighbour not in visited:
                    heapq.heappush(
                        frontier, (neighbour.priority(), next(counter), neighbour)
                    )

        log.warning("Search space exhausted without reaching the goal")
        return []

    @staticmethod
    def hint(
        board: PuzzleBoard, max_expansions: int | None = MAX_EXPANSIONS
    ) -> PuzzleBoard | None:
        """Return the next board on an optimal path, or ``None``."""
        path = Solver.solve(board, max_expansions)
        return path[0] if path else None

    @staticmethod
    def is_solvable(board: PuzzleBoard) -> bool:
        """Return True if *board* can reach the solved layout."""
        numbers = [label for label in board.labels if label is not None]
        inversions = 0
        for i in range(len(numbers)):
            for j in range(i + 1, len(numbers)):
                if numbers[i] > numbers[j]:
                    inversions += 1

        n = board.size
        if n % 2 == 1:
            return inversions % 2 == 0
        # Blank row counted 1-based from the bottom; the goal has it on 1.
        blank_row_from_bottom = n - board.empty_index // n
        return (inversions + blank_row_from_bottom) % 2 == 1

    @staticmethod
    def directions(start: PuzzleBoard, path: list[PuzzleBoard]) -> list[Direction]:
        """Translate a board path into the slide direction of each move."""
        n = start.size
        by_delta = {
            n: Direction.UP,
            -n: Direction.DOWN,
            1: Direction.LEFT,
            -1: Direction.RIGHT,
        }
        moves: list[Direction] = []
        previous = start.empty_index
        for board in path:
            current = board.empty_index
            moves.append(by_delta[current - previous])
            previous = current
        return moves

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _path_from(start: PuzzleBoard, goal: PuzzleBoard) -> list[PuzzleBoard]:
        path: list[PuzzleBoard] = []
        board: PuzzleBoard | None = goal
        while board is not None and board is not start:
            path.append(board)
            board = board.previous_board
        path.reverse()
        return path
