"""Board model for the sliding puzzle.

A ``PuzzleBoard`` is a snapshot of one tile arrangement plus the
bookkeeping a search needs: how many moves led here and which board it
was derived from.  Tiles are stored as a flat row-major list
(``index = x + y * size``); the single empty slot holds ``EMPTY``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

NUM_TILES = 3

EMPTY = None

# (dx, dy) of the cells around the empty slot, in the order neighbours
# are generated.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
)

_EMPTY_HASH = -1


class InvalidConfiguration(ValueError):
    """Raised when a label sequence cannot describe a board."""


class Direction(StrEnum):
    """Direction a *tile* slides into the empty slot."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Tile:
    """A tile identified by its goal index.

    ``payload`` is whatever the presentation layer draws for the tile;
    it takes no part in equality or hashing.
    """

    number: int
    payload: Any = field(default=None, compare=False)


@dataclass
class PuzzleBoard:
    """Represents one configuration of the sliding puzzle."""

    size: int
    tiles: list[Tile | None]
    steps: int = field(default=0, compare=False)
    _previous: PuzzleBoard | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.tiles) != self.size * self.size:
            raise InvalidConfiguration(
                f"A {self.size}×{self.size} board needs {self.size * self.size} "
                f"slots, got {len(self.tiles)}."
            )
        if self.tiles.count(EMPTY) != 1:
            raise InvalidConfiguration(
                f"Expected exactly one empty slot, got {self.tiles.count(EMPTY)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_labels(
        cls,
        labels: Sequence[int | None],
        size: int = NUM_TILES,
        payloads: Mapping[int, Any] | Sequence[Any] | None = None,
    ) -> PuzzleBoard:
        """Create a root board from goal indices in row-major order.

        Exactly one entry must be ``EMPTY``; the others must be a
        permutation of ``0 .. size*size - 2``.

        Example::

            PuzzleBoard.from_labels([0, 1, 2, 3, 4, 5, 6, EMPTY, 7])
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 2:
            raise InvalidConfiguration(
                f"Board size must be an integer of at least 2, got {size!r}."
            )
        total = size * size
        labels = list(labels)
        if len(labels) != total:
            raise InvalidConfiguration(
                f"Expected {total} labels for a {size}×{size} board, "
                f"got {len(labels)}."
            )

        empties = labels.count(EMPTY)
        if empties != 1:
            raise InvalidConfiguration(
                f"Expected exactly one empty slot, got {empties}."
            )

        numbers = [label for label in labels if label is not EMPTY]
        if any(isinstance(n, bool) or not isinstance(n, int) for n in numbers):
            raise InvalidConfiguration(f"Labels must be integers: {labels!r}.")
        if sorted(numbers) != list(range(total - 1)):
            raise InvalidConfiguration(
                f"Labels must be a permutation of 0..{total - 2} plus one "
                f"empty slot: {labels!r}."
            )

        tiles: list[Tile | None] = []
        for label in labels:
            if label is EMPTY:
                tiles.append(EMPTY)
            else:
                tiles.append(Tile(label, _payload_for(payloads, label)))
        return cls(size=size, tiles=tiles)

    @classmethod
    def derive(cls, parent: PuzzleBoard) -> PuzzleBoard:
        """Copy *parent* one step further along its path.

        Tiles are shared with the parent.  The caller must apply exactly
        one swap before handing the board out.
        """
        return cls(
            size=parent.size,
            tiles=parent.tiles[:],
            steps=parent.steps + 1,
            _previous=parent,
        )

    # -- identity -------------------------------------------------------------

    def __hash__(self) -> int:
        return hash(
            tuple(_EMPTY_HASH if t is EMPTY else t.number for t in self.tiles)
        )

    # -- queries --------------------------------------------------------------

    @property
    def previous_board(self) -> PuzzleBoard | None:
        return self._previous

    @property
    def empty_index(self) -> int:
        return self.tiles.index(EMPTY)

    @property
    def labels(self) -> tuple[int | None, ...]:
        """Goal indices in slot order, ``EMPTY`` for the blank."""
        return tuple(EMPTY if t is EMPTY else t.number for t in self.tiles)

    def xy_to_index(self, x: int, y: int) -> int:
        return x + y * self.size

    def get_tile(self, index: int) -> Tile | None:
        return self.tiles[index]

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* sits on its goal slot."""
        tile = self.tiles[index]
        return tile is not EMPTY and tile.number == index

    def resolved(self) -> bool:
        """Check if tiles ``0 .. size*size - 2`` occupy their own slots."""
        for i in range(self.size * self.size - 1):
            tile = self.tiles[i]
            if tile is EMPTY or tile.number != i:
                return False
        return True

    def heuristic(self) -> int:
        """Sum of Manhattan distances from each tile to its goal slot."""
        n = self.size
        distance = 0
        for i, tile in enumerate(self.tiles):
            if tile is EMPTY:
                continue
            distance += abs(i % n - tile.number % n) + abs(i // n - tile.number // n)
        return distance

    def priority(self) -> int:
        """Moves made so far plus the Manhattan distance still to cover."""
        return self.steps + self.heuristic()

    def neighbours(self) -> list[PuzzleBoard]:
        """Return every board one slide away, in ``NEIGHBOUR_OFFSETS`` order."""
        n = self.size
        empty = self.empty_index
        ex, ey = empty % n, empty // n

        moves: list[PuzzleBoard] = []
        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = ex + dx, ey + dy
            if 0 <= nx < n and 0 <= ny < n:
                board = PuzzleBoard.derive(self)
                board._swap_tiles(self.xy_to_index(nx, ny), empty)
                moves.append(board)
        return moves

    def path(self) -> list[PuzzleBoard]:
        """Boards from the start of the chain up to and including this one."""
        boards: list[PuzzleBoard] = []
        board: PuzzleBoard | None = self
        while board is not None:
            boards.append(board)
            board = board.previous_board
        boards.reverse()
        return boards

    # -- mutation of the displayed board --------------------------------------

    def reset(self) -> None:
        """Forget how this board was reached."""
        self.steps = 0
        self._previous = None

    def try_move(self, index: int) -> bool:
        """Slide the tile at *index* into the empty slot if they touch.

        Returns False, leaving the board untouched, when *index* is off
        the grid, is the empty slot, or is not next to it.
        """
        n = self.size
        if not 0 <= index < n * n or self.tiles[index] is EMPTY:
            return False

        empty = self.empty_index
        if abs(index % n - empty % n) + abs(index // n - empty // n) != 1:
            return False

        self._swap_tiles(index, empty)
        return True

    # -- helpers --------------------------------------------------------------

    def _swap_tiles(self, i: int, j: int) -> None:
        self.tiles[i], self.tiles[j] = self.tiles[j], self.tiles[i]


def _payload_for(
    payloads: Mapping[int, Any] | Sequence[Any] | None, number: int
) -> Any:
    if payloads is None:
        return None
    if isinstance(payloads, Mapping):
        return payloads.get(number)
    return payloads[number] if number < len(payloads) else None
