"""Shortest-path solver for the N×N sliding puzzle."""

from npuzzle.engine.loader import load_board, parse_board
from npuzzle.engine.solver import Solver
from npuzzle.errors import (
    DegenerateBoardError,
    EmptyQueueError,
    MalformedInputError,
    PuzzleError,
)
from npuzzle.models import Board, Direction, Heuristic, SearchNode

__all__ = [
    "Board",
    "DegenerateBoardError",
    "Direction",
    "EmptyQueueError",
    "Heuristic",
    "MalformedInputError",
    "PuzzleError",
    "SearchNode",
    "Solver",
    "load_board",
    "parse_board",
]
