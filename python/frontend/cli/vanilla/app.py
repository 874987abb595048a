"""Vanilla terminal frontend — no third-party dependencies.

Prints the solver result in the plain reference format: the move count
followed by every board on the solution path.
"""

from __future__ import annotations

from npuzzle.engine.solver import Solver

UNSOLVABLE_MESSAGE = "No solutions possible."


def render(solver: Solver) -> str:
    """Return the full text report for *solver*."""
    solution = solver.solution()
    if solution is None:
        return UNSOLVABLE_MESSAGE

    lines = [f"Minimum number of moves needed: {solver.moves()}"]
    for board in solution:
        lines.append(str(board))
        lines.append("")
    return "\n".join(lines).rstrip("\n")


# -- public entry point -------------------------------------------------------


def run(solver: Solver) -> None:
    print(render(solver))
