#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py puzzle.txt            # plain output
    python main.py -f rich puzzle.txt    # Rich terminal
    cat puzzle.txt | python main.py -H hamming -v
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.engine.loader import load_board  # noqa: E402
from npuzzle.engine.solver import Solver  # noqa: E402
from npuzzle.errors import MalformedInputError  # noqa: E402
from npuzzle.models.board import Heuristic  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    source: typer.FileText = typer.Argument(
        "-",
        metavar="INPUT",
        help="Puzzle file: N followed by N*N tiles, 0 is the blank. '-' reads stdin.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solution.",
    ),
    heuristic: Heuristic = typer.Option(
        Heuristic.MANHATTAN, "-H", "--heuristic",
        help="Distance estimate used to order the search.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Find the shortest solution of an N×N sliding puzzle."""
    _configure_logging(verbose)

    try:
        board = load_board(source)
    except MalformedInputError as exc:
        typer.echo(f"Invalid puzzle: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    logger.debug("Loaded %d×%d board from %s.", board.size, board.size, source.name)
    solver = Solver(board, heuristic=heuristic)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solver)


if __name__ == "__main__":
    app()
