"""Reads boards from the console input format.

The format is an integer ``N`` followed by ``N * N`` integers in row-major
order, all separated by whitespace. ``0`` is the blank::

    3
    0 1 3
    4 2 5
    7 8 6
"""

from __future__ import annotations

from typing import TextIO

from npuzzle.errors import MalformedInputError
from npuzzle.models.board import Board


def parse_board(text: str) -> Board:
    """Parse and validate *text*, raising ``MalformedInputError`` on bad input."""
    tokens = text.split()
    if not tokens:
        raise MalformedInputError("Input is empty; expected a board size.")

    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise MalformedInputError(f"Input must contain only integers: {exc}") from exc

    size, flat = values[0], values[1:]
    if size < 1:
        raise MalformedInputError(f"Board size must be positive, got {size}.")
    return Board.from_flat(size, flat)


def load_board(stream: TextIO) -> Board:
    return parse_board(stream.read())
