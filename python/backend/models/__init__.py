from backend.models.board import (
    EMPTY,
    NEIGHBOUR_OFFSETS,
    NUM_TILES,
    Direction,
    InvalidConfiguration,
    PuzzleBoard,
    Tile,
)

__all__ = [
    "EMPTY",
    "NEIGHBOUR_OFFSETS",
    "NUM_TILES",
    "Direction",
    "InvalidConfiguration",
    "PuzzleBoard",
    "Tile",
]
