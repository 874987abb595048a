"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library to show each board on the solution path as a
styled grid, with tiles already in their goal cell highlighted.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_step(board: Board, label: Text) -> Group:
    return Group(Align.center(label), Align.center(_render_board(board)))


# -- result screens -----------------------------------------------------------


def _draw_unsolvable(solver: Solver) -> None:
    size = solver.initial.size
    panel = Panel(
        Group(
            Align.center(_render_board(solver.initial)),
            Align.center(Text("\n  No solutions possible.\n", style="bold red")),
        ),
        title=f"[bold red]Sliding Puzzle  {size}×{size}[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_solution(solver: Solver) -> None:
    solution = solver.solution() or []
    directions = solver.directions() or []
    size = solver.initial.size

    steps: list[Group] = []
    for i, board in enumerate(solution):
        label = Text()
        if i == 0:
            label.append("Start", style="bold cyan")
        else:
            label.append(f"Move {i}/{solver.moves()} ", style="bold cyan")
            label.append(f"({directions[i - 1].value})", style="dim")
        steps.append(_render_step(board, label))

    stats = Text()
    stats.append("  Minimum number of moves needed: ", style="dim")
    stats.append(str(solver.moves()), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(solver.expanded), style="bold yellow")

    panel = Panel(
        Group(*steps, Align.center(stats)),
        title=f"[bold green]Sliding Puzzle  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


# -- public entry point -------------------------------------------------------


def run(solver: Solver) -> None:
    if solver.is_solvable():
        _draw_solution(solver)
    else:
        _draw_unsolvable(solver)
