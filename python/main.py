#!/usr/bin/env python3
"""Sliding Puzzle.

Usage::

    python main.py                                   # play a shuffled 3×3
    python main.py -s 4 --seed 7                     # reproducible 4×4
    python main.py --tiles "1 2 3 4 5 6 0 7 8"       # play a given board
    python main.py --tiles "4 1 3 7 2 6 0 5 8" --solve   # print the solution
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import SHUFFLE_STEPS  # noqa: E402
from backend.engine.gameplay import GamePlay  # noqa: E402
from backend.engine.gamesolver import (  # noqa: E402
    MAX_EXPANSIONS,
    SearchLimitReached,
    Solver,
)
from backend.logger import configure  # noqa: E402
from backend.models.board import EMPTY, InvalidConfiguration, PuzzleBoard  # noqa: E402

console = Console()


# -- helpers ------------------------------------------------------------------


def parse_tiles(raw: str, size: int) -> PuzzleBoard:
    """Build a board from space- or comma-separated faces, ``0`` = blank."""
    tokens = raw.replace(",", " ").split()
    try:
        faces = [int(t) for t in tokens]
    except ValueError:
        raise InvalidConfiguration(f"Tiles must be integers: {raw!r}.") from None
    labels = [EMPTY if face == 0 else face - 1 for face in faces]
    return PuzzleBoard.from_labels(labels, size=size)


def _print_solution(game: GamePlay) -> None:
    from frontend.cli.rich.app import render_path

    board = game.board
    if board.resolved():
        console.print("[green]Already solved.[/green]")
        return

    try:
        path = game.solve()
    except SearchLimitReached as exc:
        console.print(f"[yellow]{exc} Try a larger --max-expansions.[/yellow]")
        raise typer.Exit(code=1)
    if not path:
        console.print("[red]Board is unsolvable.[/red]")
        raise typer.Exit(code=1)

    console.print(render_path(board, path))
    moves = " ".join(d.value for d in Solver.directions(board, path))
    console.print(f"[bold green]{len(path)} moves:[/bold green] {moves}")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=5,
        help="Grid size (2-5).",
    ),
    tiles: Optional[str] = typer.Option(
        None, "-t", "--tiles",
        help="Row-major tile faces, 0 for the blank. Overrides shuffling.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for shuffling.",
    ),
    shuffle_steps: int = typer.Option(
        SHUFFLE_STEPS, "--shuffle-steps",
        min=1,
        help="Random slides applied to the solved board.",
    ),
    solve: bool = typer.Option(
        False, "--solve",
        help="Print the solution and exit.",
    ),
    max_expansions: int = typer.Option(
        MAX_EXPANSIONS, "--max-expansions",
        min=1,
        help="Boards the solver may expand before giving up.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver and generator activity to stderr.",
    ),
) -> None:
    """Sliding Puzzle."""
    configure(verbose)

    if tiles is not None:
        try:
            board = parse_tiles(tiles, size)
        except InvalidConfiguration as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise typer.Exit(code=1)
        game = GamePlay.from_board(board, max_expansions)
    else:
        game = GamePlay(
            size,
            seed=seed,
            shuffle_steps=shuffle_steps,
            max_expansions=max_expansions,
        )

    if solve:
        _print_solution(game)
        return

    from frontend.cli.rich.app import run

    run(game, shuffle_steps)


if __name__ == "__main__":
    app()
