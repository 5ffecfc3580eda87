"""Score calculation for finished (or in-progress) games."""

from __future__ import annotations

import math

# Game-balance constant; the scoring formula is otherwise fixed.
PENALTY_PER_MOVE = 10
POINTS_PER_CELL = 100


def score_of(
    rows: int,
    cols: int,
    moves: int,
    seconds: float,
    penalty_per_move: int = PENALTY_PER_MOVE,
) -> int:
    """Return ``max(0, rows*cols*100 - (moves*penalty + seconds))``.

    Fractional seconds are floored, so the result is always a
    non-negative integer.
    """
    if moves < 0:
        raise ValueError(f"moves must be non-negative, got {moves}.")
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}.")
    base = rows * cols * POINTS_PER_CELL
    penalty = moves * penalty_per_move + math.floor(seconds)
    return max(0, base - penalty)
