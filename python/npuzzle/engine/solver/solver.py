"""Sliding puzzle solver."""

from __future__ import annotations

import logging
from itertools import pairwise

from npuzzle.engine.frontier import MinPQ
from npuzzle.models.board import Board, Direction, Heuristic
from npuzzle.models.node import SearchNode

logger = logging.getLogger(__name__)


class Solver:
    """Finds a shortest solution for *initial*, or proves there is none.

    The whole search runs in the constructor. A* is run in lockstep on the
    board and on its twin; exactly one of the two can reach the goal, so
    whichever side gets there first decides solvability.
    """

    def __init__(
        self, initial: Board, heuristic: Heuristic = Heuristic.MANHATTAN
    ) -> None:
        self.initial = initial
        self.heuristic = heuristic
        self.expanded: int = 0
        self._solution: list[Board] | None = None
        self._solve()

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._solution is not None

    def moves(self) -> int:
        """Minimum number of moves to reach the goal, or -1 if unsolvable."""
        if self._solution is None:
            return -1
        return len(self._solution) - 1

    def solution(self) -> list[Board] | None:
        """Boards from the initial board to the goal, or ``None``."""
        if self._solution is None:
            return None
        return list(self._solution)

    def directions(self) -> list[Direction] | None:
        """Tile moves that replay the solution, or ``None`` if unsolvable."""
        if self._solution is None:
            return None
        moves: list[Direction] = []
        for before, after in pairwise(self._solution):
            direction = before.direction_to(after)
            assert direction is not None, "solution boards must be adjacent"
            moves.append(direction)
        return moves

    # -- search ---------------------------------------------------------------

    def _solve(self) -> None:
        initial = self.initial
        if initial.is_goal():
            logger.debug("Initial board is already the goal.")
            self._solution = [initial]
            return

        twin = initial.twin()
        if twin.is_goal():
            logger.info("Twin board is the goal; board is unsolvable.")
            return

        logger.debug(
            "Starting twin A* on a %d×%d board (heuristic=%s).",
            initial.size,
            initial.size,
            self.heuristic.value,
        )
        queue = MinPQ()
        twin_queue = MinPQ()
        queue.insert(SearchNode.start(initial, self.heuristic))
        twin_queue.insert(SearchNode.start(twin, self.heuristic))

        # No iteration cap: one of the two searches always reaches its goal.
        while True:
            node = queue.delete_min()
            twin_node = twin_queue.delete_min()

            if twin_node.board.is_goal():
                logger.info(
                    "Twin reached the goal after %d expansions; unsolvable.",
                    self.expanded,
                )
                return
            if node.board.is_goal():
                self._solution = node.path()
                logger.info(
                    "Solved in %d moves after %d expansions.",
                    node.moves,
                    self.expanded,
                )
                return

            self.expanded += 1
            for child in node.successors(self.heuristic):
                queue.insert(child)
            for child in twin_node.successors(self.heuristic):
                twin_queue.insert(child)

            if self.expanded % 100_000 == 0:
                logger.debug(
                    "%d expansions; queue sizes %d / %d.",
                    self.expanded,
                    len(queue),
                    len(twin_queue),
                )
