"""Exceptions raised by the puzzle engine.

Every error is also a ``ValueError`` so callers that only guard against
malformed input keep working.  Search failures are *not* exceptions; they
are reported through :class:`~npuzzle.engine.gamesolver.solver.SolveResult`.
"""

from __future__ import annotations


class NPuzzleError(ValueError):
    """Base class for all engine errors."""


class InvalidGridError(NPuzzleError):
    """Raised when a grid has fewer than 2 or more than 100 rows/columns."""


class InvalidBoardError(NPuzzleError):
    """Raised when a tile sequence is not a permutation of ``0..N-1``."""


class InvalidMoveError(NPuzzleError):
    """Raised when a move target is not reachable from the blank."""
