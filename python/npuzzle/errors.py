"""Error taxonomy for the puzzle solver."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by ``npuzzle``."""


class MalformedInputError(PuzzleError, ValueError):
    """The input does not describe a valid N×N board."""


class EmptyQueueError(PuzzleError, IndexError):
    """``delete_min`` was called on an empty priority queue."""


class DegenerateBoardError(PuzzleError, ValueError):
    """The board is too small for the requested operation."""
