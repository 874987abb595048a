"""Search tree node: a board plus the path that reached it."""

from __future__ import annotations

from dataclasses import dataclass

from npuzzle.models.board import Board, Heuristic


@dataclass(frozen=True, eq=False)
class SearchNode:
    """One node of the implicit search tree.

    ``previous`` links back towards the root, so nodes expanded from the same
    parent share their path prefix.
    """

    board: Board
    moves: int
    previous: SearchNode | None
    distance: int

    @classmethod
    def start(cls, board: Board, heuristic: Heuristic) -> SearchNode:
        return cls(board=board, moves=0, previous=None, distance=board.distance(heuristic))

    @property
    def priority(self) -> int:
        return self.moves + self.distance

    def successors(self, heuristic: Heuristic) -> list[SearchNode]:
        """Child nodes for every neighbor except the board we just came from."""
        back = self.previous.board if self.previous is not None else None
        children: list[SearchNode] = []
        for board in self.board.neighbors():
            if board == back:
                continue
            children.append(
                SearchNode(
                    board=board,
                    moves=self.moves + 1,
                    previous=self,
                    distance=board.distance(heuristic),
                )
            )
        return children

    def path(self) -> list[Board]:
        """Boards from the root down to this node, inclusive."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.previous
        boards.reverse()
        return boards
