"""Admissible lower bounds on the number of moves left to the goal.

``manhattan_distance`` and ``linear_conflict`` are measured in adjacent
swaps.  Under the linear-slide model one move covers at most
``max(rows, cols) - 1`` swaps, so the swap bound is divided by that
reach and rounded up.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Sequence
from functools import lru_cache

from npuzzle.engine.gamerules.moves import MoveModel
from npuzzle.models.board import Board, GridConfig


def manhattan_distance(tiles: Sequence[int], config: GridConfig) -> int:
    cols = config.cols
    distance = 0
    for i, val in enumerate(tiles):
        if val == 0:
            continue
        target_r, target_c = divmod(val - 1, cols)
        current_r, current_c = divmod(i, cols)
        distance += abs(target_r - current_r) + abs(target_c - current_c)
    return distance


def _line_conflict(goal_keys: list[int]) -> int:
    """Cost of the tiles that must leave one line so the rest can pass.

    *goal_keys* are the goal positions (along the line) of the tiles that
    belong to this line, in their current order.  Every tile outside the
    longest increasing run has to step out and back: 2 moves each.
    """
    if len(goal_keys) < 2:
        return 0
    run: list[int] = []
    for key in goal_keys:
        pos = bisect_left(run, key)
        if pos == len(run):
            run.append(key)
        else:
            run[pos] = key
    return 2 * (len(goal_keys) - len(run))


def linear_conflict(tiles: Sequence[int], config: GridConfig) -> int:
    """Extra moves forced by same-line tiles in reversed goal order.

    Rows and columns are scored independently and summed.
    """
    rows, cols = config.rows, config.cols
    conflict = 0

    for r in range(rows):
        keys = []
        for c in range(cols):
            val = tiles[r * cols + c]
            if val != 0 and (val - 1) // cols == r:
                keys.append((val - 1) % cols)
        conflict += _line_conflict(keys)

    for c in range(cols):
        keys = []
        for r in range(rows):
            val = tiles[r * cols + c]
            if val != 0 and (val - 1) % cols == c:
                keys.append((val - 1) // cols)
        conflict += _line_conflict(keys)

    return conflict


def swap_distance(tiles: Sequence[int], config: GridConfig) -> int:
    """Manhattan distance plus linear conflict, in adjacent swaps."""
    return manhattan_distance(tiles, config) + linear_conflict(tiles, config)


@lru_cache(maxsize=64)
def evaluator(config: GridConfig, model: MoveModel) -> Callable[[Sequence[int]], int]:
    """Return the heuristic for *config*/*model* as a one-argument callable."""
    if model is MoveModel.ADJACENT:
        return lambda tiles: swap_distance(tiles, config)
    reach = max(config.rows, config.cols) - 1
    return lambda tiles: -(-swap_distance(tiles, config) // reach)


def heuristic(board: Board, model: MoveModel = MoveModel.ADJACENT) -> int:
    """Admissible estimate of the moves left to solve *board*."""
    return evaluator(board.config, model)(board.tiles)
