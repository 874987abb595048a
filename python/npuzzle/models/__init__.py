from npuzzle.models.board import Board, Direction, Heuristic
from npuzzle.models.node import SearchNode

__all__ = ["Board", "Direction", "Heuristic", "SearchNode"]
