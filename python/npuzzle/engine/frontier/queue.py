"""Min-priority queue of search nodes."""

from __future__ import annotations

import heapq
import itertools

from npuzzle.errors import EmptyQueueError
from npuzzle.models.node import SearchNode


class MinPQ:
    """Binary heap ordered by ``(priority, distance, insertion order)``.

    There is no decrease-key: a better path to a board is inserted as a new
    entry and the stale one stays behind until it is popped.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, SearchNode]] = []
        self._counter = itertools.count()

    def insert(self, node: SearchNode) -> None:
        heapq.heappush(
            self._heap, (node.priority, node.distance, next(self._counter), node)
        )

    def delete_min(self) -> SearchNode:
        if not self._heap:
            raise EmptyQueueError("delete_min() called on an empty queue.")
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
