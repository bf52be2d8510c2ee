"""Exception types raised by the tile reassembly engine."""

from __future__ import annotations


class PuzzleError(ValueError):
    """Base class for all tile puzzle errors."""


class TileParseError(PuzzleError):
    """Raised when tile text cannot be turned into tiles."""


class InconsistentPuzzleError(PuzzleError):
    """Raised when a tile set violates the unique-solution assumption."""


class PatternNotFoundError(InconsistentPuzzleError):
    """Raised when no orientation of the composite contains the pattern."""
