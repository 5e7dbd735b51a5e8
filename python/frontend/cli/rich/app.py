"""Rich terminal frontend.

Draws the board held by a ``GamePlay`` session and feeds keypresses
back into it.  Tiles show their face (goal index plus one) unless the
tile carries a payload, in which case the payload is drawn instead.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import SearchLimitReached, Solver
from backend.models.board import Direction, PuzzleBoard
from frontend.cli.input_handler import get_key

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def render_board(board: PuzzleBoard) -> Table:
    """Return a Rich Table of the board's tile sequence."""
    n = board.size
    width = len(str(n * n - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(n):
        table.add_column(width=width + 1, justify="center")

    for y in range(n):
        cells: list[str] = []
        for x in range(n):
            index = board.xy_to_index(x, y)
            tile = board.get_tile(index)
            if tile is None:
                cells.append("[dim]·[/dim]")
                continue
            face = tile.payload if tile.payload is not None else tile.number + 1
            style = "bold green" if board.is_tile_correct(index) else "bold white"
            cells.append(f"[{style}]{face!s:>{width}}[/{style}]")
        table.add_row(*cells)

    return table


def render_path(start: PuzzleBoard, path: list[PuzzleBoard]) -> Group:
    """Render a solution as numbered boards with the slide that led there."""
    parts = [Text("Start", style="bold cyan"), render_board(start)]
    for i, (board, direction) in enumerate(
        zip(path, Solver.directions(start, path)), 1
    ):
        parts.append(Text(f"{i}. {direction.value}", style="bold cyan"))
        parts.append(render_board(board))
    return Group(*parts)


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    size = game.size
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("1-9", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(render_board(game.board)),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SOLVED!", style="bold green")
    congrats.append(
        f"  {game.state.moves} moves, {game.state.assisted_moves} assisted  ",
        style="green",
    )
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(Align.center(render_board(game.board)), Align.center(congrats)),
        title=f"[bold green]Sliding Puzzle  {game.size}×{game.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  R to play again, Q to quit.\n", style="dim")))


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    try:
        moved = game.hint()
    except SearchLimitReached as exc:
        return f"[yellow]No hint: {exc}[/yellow]"
    if not moved:
        return "[red]No hint available (unsolvable board).[/red]"
    return "[cyan]Hint applied.[/cyan]"


def _auto_solve(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"

    try:
        path = game.solve()
    except SearchLimitReached as exc:
        return f"[yellow]{exc}[/yellow]"
    if not path:
        return "[red]Board is unsolvable.[/red]"

    for i, board in enumerate(path, 1):
        game.step_to(board)
        _draw_game(game, f"[bold cyan]Solving… move {i}/{len(path)}[/bold cyan]")
        time.sleep(0.15)

    return f"[bold green]Solved in {len(path)} moves![/bold green]"


# -- game loop ----------------------------------------------------------------


def run(game: GamePlay, shuffle_steps: int) -> None:
    """Play *game* until the player quits."""
    status = ""
    while True:
        if game.is_won:
            game.state.pause()
            _draw_win(game)
            key = get_key()
            if key == "quit":
                return
            if key == "shuffle":
                game.reshuffle(shuffle_steps)
            continue

        _draw_game(game, status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif key.isdigit():
            if not game.move_face(int(key)):
                status = f"[yellow]Tile {key} cannot move.[/yellow]"
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game)
        elif key == "shuffle":
            game.reshuffle(shuffle_steps)
            status = "[yellow]Shuffled![/yellow]"
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
