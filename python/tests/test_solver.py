"""Solver test suite.

Move counts are checked against an exhaustive breadth-first search from the
goal, which gives the exact distance of every reachable 2×2 and 3×3 board.
Every returned solution is replayed move by move through ``Board.move`` to
verify it actually reaches the goal.
"""

from __future__ import annotations

import itertools
from collections import deque

import pytest

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board, Direction, Heuristic
from npuzzle.models.node import SearchNode

State = tuple[int, ...]


# -- reference distances ------------------------------------------------------


def _bfs_distances(size: int) -> dict[State, int]:
    """Exact move count from every solvable state to the goal."""
    goal: State = (*range(1, size * size), 0)
    dist: dict[State, int] = {goal: 0}
    queue: deque[State] = deque([goal])
    while queue:
        state = queue.popleft()
        z = state.index(0)
        r, c = divmod(z, size)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < size and 0 <= nc < size):
                continue
            j = nr * size + nc
            nxt = list(state)
            nxt[z], nxt[j] = nxt[j], nxt[z]
            key = tuple(nxt)
            if key not in dist:
                dist[key] = dist[state] + 1
                queue.append(key)
    return dist


@pytest.fixture(scope="module")
def distances_3x3() -> dict[State, int]:
    return _bfs_distances(3)


_DISTANCES_2x2 = _bfs_distances(2)
_ALL_2x2 = [list(p) for p in itertools.permutations(range(4))]


def _ids(flat: list[int]) -> str:
    return "-".join(map(str, flat))


# -- helpers ------------------------------------------------------------------


def _assert_solution(solver: Solver, initial: Board) -> None:
    """Check the path shape and replay its directions to the goal."""
    solution = solver.solution()
    assert solution is not None
    assert len(solution) == solver.moves() + 1
    assert solution[0] == initial
    assert solution[-1].is_goal()

    directions = solver.directions()
    assert directions is not None
    assert len(directions) == solver.moves()
    assert all(isinstance(d, Direction) for d in directions)

    board = initial
    for i, direction in enumerate(directions):
        moved = board.move(direction)
        assert moved is not None, f"Move {i} ({direction.value}) was invalid"
        assert moved == solution[i + 1]
        board = moved
    assert board.is_goal()


# -- scenarios ----------------------------------------------------------------


def test_goal_board() -> None:
    board = Board.goal(3)
    solver = Solver(board)
    assert solver.is_solvable()
    assert solver.moves() == 0
    assert solver.solution() == [board]
    assert solver.directions() == []


def test_single_cell_board() -> None:
    solver = Solver(Board.goal(1))
    assert solver.is_solvable()
    assert solver.moves() == 0


def test_four_move_board() -> None:
    board = Board.from_flat(3, [0, 1, 3, 4, 2, 5, 7, 8, 6])
    solver = Solver(board)
    assert solver.moves() == 4
    assert solver.directions() == [
        Direction.LEFT,
        Direction.UP,
        Direction.LEFT,
        Direction.UP,
    ]
    _assert_solution(solver, board)


def test_example_board(distances_3x3: dict[State, int]) -> None:
    flat = [8, 1, 3, 4, 0, 2, 7, 6, 5]
    board = Board.from_flat(3, flat)
    solver = Solver(board)
    assert solver.is_solvable()
    assert solver.moves() == distances_3x3[tuple(flat)]
    assert solver.moves() >= board.manhattan()
    _assert_solution(solver, board)


def test_unsolvable_board() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 8, 7, 0])
    solver = Solver(board)
    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None
    assert solver.directions() is None


def test_twin_goal_is_unsolvable_without_search() -> None:
    solver = Solver(Board.from_flat(3, [2, 1, 3, 4, 5, 6, 7, 8, 0]))
    assert not solver.is_solvable()
    assert solver.expanded == 0


def test_two_by_two_board() -> None:
    board = Board.from_flat(2, [1, 0, 3, 2])
    solver = Solver(board)
    assert solver.is_solvable()
    assert solver.moves() == 1
    assert solver.directions() == [Direction.UP]
    assert not Solver(board.twin()).is_solvable()


def test_four_by_four_board() -> None:
    board = Board.goal(4)
    for direction in (Direction.DOWN, Direction.DOWN, Direction.RIGHT, Direction.RIGHT):
        moved = board.move(direction)
        assert moved is not None
        board = moved

    solver = Solver(board)
    assert solver.moves() == 4
    _assert_solution(solver, board)


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 0, 4, 6, 7, 5, 8],
        [0, 1, 3, 4, 2, 5, 7, 8, 6],
        [1, 2, 3, 4, 0, 6, 7, 5, 8],
        [4, 1, 3, 7, 2, 6, 0, 5, 8],
        [1, 2, 3, 4, 5, 6, 8, 7, 0],
        [1, 3, 0, 4, 2, 5, 7, 8, 6],
        [2, 3, 6, 1, 5, 0, 4, 7, 8],
    ],
    ids=_ids,
)
def test_moves_are_optimal_3x3(
    flat: list[int], distances_3x3: dict[State, int]
) -> None:
    board = Board.from_flat(3, flat)
    solver = Solver(board)
    assert solver.moves() == distances_3x3.get(tuple(flat), -1)
    if solver.is_solvable():
        _assert_solution(solver, board)


@pytest.mark.parametrize("heuristic", list(Heuristic), ids=str)
def test_heuristics_agree_on_move_count(heuristic: Heuristic) -> None:
    board = Board.from_flat(3, [4, 1, 3, 7, 2, 6, 0, 5, 8])
    solver = Solver(board, heuristic=heuristic)
    assert solver.heuristic is heuristic
    assert solver.moves() == Solver(board).moves()
    _assert_solution(solver, board)


# -- parity invariant ---------------------------------------------------------


@pytest.mark.parametrize("flat", _ALL_2x2, ids=_ids)
def test_every_2x2_board(flat: list[int]) -> None:
    board = Board.from_flat(2, flat)
    solver = Solver(board)
    assert solver.moves() == _DISTANCES_2x2.get(tuple(flat), -1)
    assert solver.is_solvable() != Solver(board.twin()).is_solvable()
    if solver.is_solvable():
        _assert_solution(solver, board)


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 7, 8, 0],
        [0, 1, 3, 4, 2, 5, 7, 8, 6],
        [2, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 0, 8],
    ],
    ids=_ids,
)
def test_board_and_twin_have_opposite_solvability(flat: list[int]) -> None:
    board = Board.from_flat(3, flat)
    twin = board.twin()
    assert Solver(board).is_solvable() != Solver(twin).is_solvable()
    assert Solver(twin).is_solvable() != Solver(twin.twin()).is_solvable()


# -- search nodes -------------------------------------------------------------


def test_search_node_skips_predecessor() -> None:
    root = SearchNode.start(Board.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8]), Heuristic.MANHATTAN)
    children = root.successors(Heuristic.MANHATTAN)
    assert len(children) == 4
    assert all(child.moves == 1 and child.previous is root for child in children)

    grandchildren = children[0].successors(Heuristic.MANHATTAN)
    assert root.board not in [g.board for g in grandchildren]
    assert len(grandchildren) == len(children[0].board.neighbors()) - 1


def test_search_node_path_and_priority() -> None:
    board = Board.from_flat(3, [0, 1, 3, 4, 2, 5, 7, 8, 6])
    root = SearchNode.start(board, Heuristic.MANHATTAN)
    assert root.priority == board.manhattan() == 4

    node = root
    for _ in range(3):
        node = node.successors(Heuristic.MANHATTAN)[0]
    path = node.path()
    assert len(path) == 4
    assert path[0] == board
    assert path[-1] == node.board
    assert node.priority == 3 + node.board.manhattan()
