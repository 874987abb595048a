"""Board model for the N×N sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.errors import DegenerateBoardError, MalformedInputError


class Direction(StrEnum):
    """Where a tile slides when it moves into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    HAMMING = "hamming"


# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
_TILE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Blank moves up, down, left, right.
_NEIGHBOR_ORDER = (Direction.DOWN, Direction.UP, Direction.RIGHT, Direction.LEFT)


@dataclass(frozen=True)
class Board:
    """Represents one arrangement of the sliding puzzle.

    Tiles are stored as a tuple of row tuples. 0 represents the blank space.
    Boards are values: every transformation returns a new instance.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int] = field(compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 1:
            raise MalformedInputError(f"Board size must be positive, got {size}.")
        if len(flat) != size * size:
            raise MalformedInputError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise MalformedInputError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles: list[tuple[int, ...]] = []
        blank_pos: tuple[int, int] = (0, 0)
        for r in range(size):
            row = tuple(flat[r * size : (r + 1) * size])
            for c, v in enumerate(row):
                if v == 0:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(size=size, tiles=tuple(tiles), blank_pos=blank_pos)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> Board:
        """Create a board from a square grid, copying it."""
        grid = [list(row) for row in rows]
        size = len(grid)
        if any(len(row) != size for row in grid):
            raise MalformedInputError("Board rows must form a square grid.")
        return cls.from_flat(size, [v for row in grid for v in row])

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def to_flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- heuristics -----------------------------------------------------------

    def hamming(self) -> int:
        """Number of non-blank tiles out of their goal position."""
        n = self.size
        return sum(
            1
            for r, row in enumerate(self.tiles)
            for c, v in enumerate(row)
            if v != 0 and v != r * n + c + 1
        )

    def manhattan(self) -> int:
        """Sum of row and column offsets of every non-blank tile from its goal."""
        n = self.size
        total = 0
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    continue
                goal_r, goal_c = divmod(v - 1, n)
                total += abs(goal_r - r) + abs(goal_c - c)
        return total

    def distance(self, heuristic: Heuristic) -> int:
        if heuristic is Heuristic.HAMMING:
            return self.hamming()
        return self.manhattan()

    # -- transformations ------------------------------------------------------

    def move(self, direction: Direction) -> Board | None:
        """Slide a tile in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns the resulting board, or ``None`` if no tile can move that way.
        """
        br, bc = self.blank_pos
        dr, dc = _TILE_OFFSETS[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self._exchange((br, bc), (tr, tc))

    def neighbors(self) -> list[Board]:
        """Boards one move away, with the blank moved up, down, left, right."""
        boards: list[Board] = []
        for direction in _NEIGHBOR_ORDER:
            board = self.move(direction)
            if board is not None:
                boards.append(board)
        return boards

    def twin(self) -> Board:
        """Swap the first horizontally-adjacent pair of non-blank tiles.

        Exactly one of a board and its twin can reach the goal, which lets
        the solver detect unsolvable boards without counting inversions.
        """
        if self.size < 2:
            raise DegenerateBoardError("A 1×1 board has no tiles to swap.")
        for r, row in enumerate(self.tiles):
            for c in range(self.size - 1):
                if row[c] != 0 and row[c + 1] != 0:
                    return self._exchange((r, c), (r, c + 1))
        raise DegenerateBoardError("No adjacent pair of tiles to swap.")

    def direction_to(self, other: Board) -> Direction | None:
        """Return the tile move turning this board into *other*, if any."""
        for direction in Direction:
            if self.move(direction) == other:
                return direction
        return None

    # -- helpers --------------------------------------------------------------

    def _exchange(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]

        blank_pos = self.blank_pos
        if blank_pos == a:
            blank_pos = b
        elif blank_pos == b:
            blank_pos = a
        return Board(
            size=self.size,
            tiles=tuple(tuple(row) for row in rows),
            blank_pos=blank_pos,
        )

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.size)]
        lines.extend(" ".join(f"{v:2d}" for v in row) for row in self.tiles)
        return "\n".join(lines)
