"""Game session — routes player input and solver output to the board."""

from __future__ import annotations

from backend.engine.gamegenerator import SHUFFLE_STEPS, GameGenerator
from backend.engine.gamesolver import MAX_EXPANSIONS, Solver
from backend.engine.gamestate import GameState
from backend.logger import get_logger
from backend.models.board import Direction, PuzzleBoard

log = get_logger("gameplay")

# Offset (dx, dy) from the empty slot to the tile that slides in.
# UP    → tile below the blank moves up
# DOWN  → tile above the blank moves down
# LEFT  → tile right of the blank moves left
# RIGHT → tile left of the blank moves right
_SLIDE_OFFSETS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (1, 0),
    Direction.RIGHT: (-1, 0),
}


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(
        self,
        size: int,
        seed: int | None = None,
        shuffle_steps: int = SHUFFLE_STEPS,
        max_expansions: int | None = MAX_EXPANSIONS,
    ) -> None:
        self.size = size
        self.max_expansions = max_expansions
        board = GameGenerator.generate(size, shuffle_steps, seed)
        self.state = GameState(board)

    @classmethod
    def from_board(
        cls, board: PuzzleBoard, max_expansions: int | None = MAX_EXPANSIONS
    ) -> GamePlay:
        """Create a game session around an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.max_expansions = max_expansions
        obj.state = GameState(board)
        return obj

    @property
    def board(self) -> PuzzleBoard:
        return self.state.board

    # -- player input ---------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Slide the tile next to the blank in *direction*.

        Returns True if there was such a tile.
        """
        board = self.board
        n = board.size
        empty = board.empty_index
        dx, dy = _SLIDE_OFFSETS[direction]
        x, y = empty % n + dx, empty // n + dy
        if not (0 <= x < n and 0 <= y < n):
            return False
        return self.move_tile(board.xy_to_index(x, y))

    def move_tile(self, index: int) -> bool:
        """Slide the tile at slot *index* into the blank if they touch."""
        if not self.board.try_move(index):
            return False
        self.state.record_move()
        return True

    def move_face(self, face: int) -> bool:
        """Slide the tile showing *face* (its goal index plus one)."""
        try:
            index = self.board.labels.index(face - 1)
        except ValueError:
            return False
        return self.move_tile(index)

    # -- solver ---------------------------------------------------------------

    def solve(self) -> list[PuzzleBoard]:
        """Solver path from the displayed board.

        Raises ``SearchLimitReached`` when the session's expansion limit
        is hit.
        """
        return Solver.solve(self.board, self.max_expansions)

    def hint(self) -> bool:
        """Apply the solver's next move.  Returns False if there is none."""
        board = Solver.hint(self.board, self.max_expansions)
        if board is None:
            return False
        self.step_to(board, assisted=True)
        return True

    def step_to(self, board: PuzzleBoard, assisted: bool = True) -> None:
        """Show *board*, which must be one move ahead of the current board."""
        if board.previous_board is not self.board:
            raise ValueError("Board is not a neighbour of the displayed board.")
        board.reset()
        self.state.board = board
        self.state.record_move(assisted)
        log.debug("Stepped to {}", board.labels)

    def reshuffle(self, shuffle_steps: int = SHUFFLE_STEPS) -> None:
        board = GameGenerator.generate(self.size, shuffle_steps)
        self.state = GameState(board)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
