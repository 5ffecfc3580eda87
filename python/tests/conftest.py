"""Shared fixtures: exhaustive BFS distance tables for small boards.

Distances are computed backwards from the goal.  Every move in both move
models is undone by the move back to the blank's old cell, so distance
*to* the goal equals distance *from* it.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

import pytest

from npuzzle.engine.gamerules.moves import MoveModel, move_table, shift
from npuzzle.models.board import Board, GridConfig, goal_tiles

Distances = dict[tuple[int, ...], int]


def _bfs(config: GridConfig, model: MoveModel) -> Distances:
    table = move_table(config, model)
    goal = goal_tiles(config.cells)
    dist: Distances = {goal: 0}
    queue = deque([(goal, config.cells - 1)])
    while queue:
        tiles, blank = queue.popleft()
        d = dist[tiles] + 1
        for target in table[blank]:
            child = shift(tiles, blank, target, config.cols)
            if child not in dist:
                dist[child] = d
                queue.append((child, target))
    return dist


@pytest.fixture(scope="session")
def bfs() -> Callable[..., Distances]:
    """Return ``bfs(rows, cols, model)`` -> {tiles: optimal move count}."""
    cache: dict[tuple[int, int, MoveModel], Distances] = {}

    def _get(rows: int, cols: int, model: MoveModel = MoveModel.ADJACENT) -> Distances:
        key = (rows, cols, model)
        if key not in cache:
            cache[key] = _bfs(GridConfig(rows, cols), model)
        return cache[key]

    return _get


@pytest.fixture(scope="session")
def board_at_depth(bfs: Callable[..., Distances]) -> Callable[..., Board]:
    """Return the first 3×3 board found at exactly *depth* moves from goal."""

    def _get(depth: int, model: MoveModel = MoveModel.ADJACENT) -> Board:
        dist = bfs(3, 3, model)
        tiles = next(t for t, d in dist.items() if d == depth)
        return Board(GridConfig(3, 3), tiles)

    return _get
