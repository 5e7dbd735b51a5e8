"""Solver test suite.

Scrambled boards come from seeded random walks.  Solutions are checked
for length against a plain breadth-first search and then replayed
through the real game engine.  Every test is killed after the timeout
configured in ``pyproject.toml`` by ``pytest-timeout``.
"""

from __future__ import annotations

from collections import deque

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import SearchLimitReached, Solver
from backend.models.board import EMPTY, Direction, PuzzleBoard

SEEDS_3x3 = list(range(8))


# -- helpers ------------------------------------------------------------------


def _copy(board: PuzzleBoard) -> PuzzleBoard:
    return PuzzleBoard.from_labels(board.labels, size=board.size)


def _bfs_distance(board: PuzzleBoard) -> int:
    """Fewest moves to the goal, by exhaustive breadth-first search."""
    root = _copy(board)
    seen = {root}
    queue = deque([root])
    while queue:
        current = queue.popleft()
        if current.resolved():
            return current.steps
        for neighbour in current.neighbours():
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    raise AssertionError("goal not reachable")


def _assert_solve(board: PuzzleBoard) -> list[PuzzleBoard]:
    """Solve *board* and verify the returned path reaches the goal."""
    path = Solver.solve(board)

    assert len(path) > 0, f"Solvable board returned no path ({board.labels})"
    assert path[-1].resolved()
    assert path[0].previous_board is board
    for before, after in zip(path, path[1:]):
        assert after.previous_board is before
        assert after.steps == before.steps + 1

    # ---- replay through the game engine -------------------------------------
    game = GamePlay.from_board(_copy(board))
    for i, direction in enumerate(Solver.directions(board, path)):
        ok = game.move(direction)
        assert ok, f"Move {i} ({direction.value}) was invalid ({board.labels})"
        assert game.board == path[i]

    assert game.is_won, f"Board not solved after {len(path)} moves"
    return path


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("seed", SEEDS_3x3, ids=lambda s: f"seed-{s}")
def test_solve_3x3_is_optimal(seed: int) -> None:
    board = GameGenerator.generate(3, steps=14, seed=seed)

    path = _assert_solve(board)

    assert len(path) == _bfs_distance(board)


@pytest.mark.parametrize("seed", [1, 2, 3], ids=lambda s: f"seed-{s}")
def test_solve_4x4(seed: int) -> None:
    board = GameGenerator.generate(4, steps=20, seed=seed)
    path = _assert_solve(board)
    assert len(path) <= 20


def test_solve_2x2() -> None:
    board = PuzzleBoard.from_labels([EMPTY, 0, 2, 1], size=2)
    _assert_solve(board)


def test_solve_one_move_away() -> None:
    board = PuzzleBoard.from_labels([0, 1, 2, 3, 4, 5, 6, EMPTY, 7])

    path = Solver.solve(board)

    assert len(path) == 1
    assert path[0].previous_board is board
    assert Solver.directions(board, path) == [Direction.LEFT]


def test_solve_from_board_with_history() -> None:
    board = PuzzleBoard.from_labels([0, 1, 2, 3, 4, 5, EMPTY, 6, 7])
    advanced = board.neighbours()[0]
    assert advanced.steps == 1

    path = Solver.solve(advanced)

    assert path[0].previous_board is advanced
    assert path[-1].resolved()
    assert path[-1].steps == advanced.steps + len(path)


def test_solved_board_needs_no_moves() -> None:
    board = GameGenerator.solved(3)

    assert Solver.solve(board) == []
    assert Solver.hint(board) is None


def test_unsolvable_board_returns_nothing() -> None:
    board = PuzzleBoard.from_labels([1, 0, 2, 3, 4, 5, 6, 7, EMPTY])

    assert not Solver.is_solvable(board)
    assert Solver.solve(board) == []
    assert Solver.hint(board) is None


def test_expansion_limit_raises_instead_of_reporting_unsolvable() -> None:
    board = PuzzleBoard.from_labels([0, 1, 2, 3, 4, 5, EMPTY, 6, 7])

    with pytest.raises(SearchLimitReached) as excinfo:
        Solver.solve(board, max_expansions=1)

    assert excinfo.value.expansions == 1
    assert "Gave up" in str(excinfo.value)
    assert Solver.is_solvable(board)


def test_hint_respects_expansion_limit() -> None:
    board = PuzzleBoard.from_labels([0, 1, 2, 3, 4, 5, EMPTY, 6, 7])

    with pytest.raises(SearchLimitReached):
        Solver.hint(board, max_expansions=1)


def test_expansion_limit_can_be_lifted() -> None:
    board = GameGenerator.generate(3, steps=14, seed=3)
    assert Solver.solve(board, max_expansions=None)[-1].resolved()


def test_hint_is_first_move_of_solution() -> None:
    board = PuzzleBoard.from_labels([0, 1, 2, 3, 4, 5, 6, EMPTY, 7])

    hint = Solver.hint(board)

    assert hint is not None
    assert hint.resolved()
    assert hint.previous_board is board


@pytest.mark.parametrize(
    "labels, size, expected",
    [
        ([0, 1, 2, 3, 4, 5, 6, 7, EMPTY], 3, True),
        ([1, 0, 2, 3, 4, 5, 6, 7, EMPTY], 3, False),
        ([0, 1, 2, EMPTY], 2, True),
        ([1, 0, 2, EMPTY], 2, False),
        ([EMPTY, 0, 2, 1], 2, True),
        (list(range(15)) + [EMPTY], 4, True),
        ([1, 0] + list(range(2, 15)) + [EMPTY], 4, False),
    ],
    ids=[
        "3x3-solved",
        "3x3-swapped",
        "2x2-solved",
        "2x2-swapped",
        "2x2-rotated",
        "4x4-solved",
        "4x4-swapped",
    ],
)
def test_is_solvable(labels: list, size: int, expected: bool) -> None:
    board = PuzzleBoard.from_labels(labels, size=size)
    assert Solver.is_solvable(board) is expected


def test_scrambled_boards_are_solvable() -> None:
    for seed in range(20):
        for size in (2, 3, 4):
            board = GameGenerator.generate(size, steps=30, seed=seed)
            assert Solver.is_solvable(board)
