"""Score formula."""

from __future__ import annotations

import pytest

from npuzzle.models.score import PENALTY_PER_MOVE, score_of


def test_untouched_board_scores_full_points() -> None:
    assert score_of(3, 3, 0, 0) == 900


def test_penalties_floor_at_zero() -> None:
    assert PENALTY_PER_MOVE == 10
    assert score_of(3, 3, 100, 0) == 0


@pytest.mark.parametrize(
    "rows, cols, moves, seconds, expected",
    [
        (3, 3, 20, 30, 900 - 200 - 30),
        (4, 4, 50, 0, 1600 - 500),
        (2, 5, 0, 999, 1),
        (3, 3, 10, 12.9, 900 - 100 - 12),
    ],
)
def test_score_values(rows: int, cols: int, moves: int, seconds: float, expected: int) -> None:
    assert score_of(rows, cols, moves, seconds) == expected


def test_custom_penalty() -> None:
    assert score_of(3, 3, 10, 0, penalty_per_move=20) == 700


@pytest.mark.parametrize("moves, seconds", [(-1, 0), (0, -0.5)])
def test_negative_inputs_rejected(moves: int, seconds: float) -> None:
    with pytest.raises(ValueError):
        score_of(3, 3, moves, seconds)
