"""A* and IDA* over flat tile tuples.

Both searches are generators: they ``yield`` at safe points (every
``yield_every`` expansions, and between IDA* thresholds) so a driver can
hand control back to an event loop, and they ``return`` a
:class:`SearchOutcome`.  Nothing outlives the generator.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections.abc import Generator
from dataclasses import dataclass

from npuzzle.engine.gamerules.moves import MoveModel, move_table, shift
from npuzzle.engine.gamesolver.heuristics import evaluator
from npuzzle.models.board import GridConfig

logger = logging.getLogger(__name__)

Tiles = tuple[int, ...]
Search = Generator[None, None, "SearchOutcome"]


@dataclass
class SearchOutcome:
    """Raw result of one search run.

    ``path`` is None when no solution was found.  ``complete`` is True when
    the search ran out of states before hitting a cap, which proves
    the start cannot reach the goal.
    """

    path: list[int] | None
    nodes_expanded: int
    threshold: int | None = None
    complete: bool = False


# ======================================================================
#  A*
# ======================================================================


class _Node:
    __slots__ = ("tiles", "blank", "g", "h", "parent", "move")

    def __init__(
        self,
        tiles: Tiles,
        blank: int,
        g: int,
        h: int,
        parent: _Node | None,
        move: int,
    ) -> None:
        self.tiles = tiles
        self.blank = blank
        self.g = g
        self.h = h
        self.parent = parent
        self.move = move

    @property
    def f(self) -> int:
        return self.g + self.h

    def path(self) -> list[int]:
        moves: list[int] = []
        node: _Node | None = self
        while node is not None and node.parent is not None:
            moves.append(node.move)
            node = node.parent
        moves.reverse()
        return moves


def astar(
    start: Tiles,
    config: GridConfig,
    model: MoveModel,
    max_nodes: int,
    yield_every: int,
) -> Search:
    """Best-first search on ``f = g + h``; ties go to the earliest push.

    ``best_g`` doubles as the closed set: a board is only pushed again
    when reached by a strictly shorter path, so the result stays optimal
    even where the heuristic is not consistent.
    """
    table = move_table(config, model)
    h_of = evaluator(config, model)
    cols = config.cols

    root = _Node(start, start.index(0), 0, h_of(start), None, -1)
    counter = itertools.count()
    open_heap: list[tuple[int, int, _Node]] = [(root.f, next(counter), root)]
    best_g: dict[Tiles, int] = {start: 0}
    expanded = 0

    while open_heap:
        _, _, node = heapq.heappop(open_heap)
        if node.h == 0:
            return SearchOutcome(node.path(), expanded)
        if node.g > best_g[node.tiles]:
            continue  # stale heap entry
        if expanded >= max_nodes:
            logger.debug("A* node cap of %d reached.", max_nodes)
            return SearchOutcome(None, expanded)

        expanded += 1
        if expanded % yield_every == 0:
            yield

        g = node.g + 1
        for target in table[node.blank]:
            child = shift(node.tiles, node.blank, target, cols)
            known = best_g.get(child)
            if known is not None and known <= g:
                continue
            best_g[child] = g
            h = h_of(child)
            heapq.heappush(
                open_heap, (g + h, next(counter), _Node(child, target, g, h, node, target))
            )

    return SearchOutcome(None, expanded, complete=True)


# ======================================================================
#  IDA*
# ======================================================================


def idastar(
    start: Tiles,
    config: GridConfig,
    model: MoveModel,
    max_threshold: int,
    max_nodes: int,
    yield_every: int,
) -> Search:
    """Iterative deepening on the ``f`` bound with an explicit DFS stack.

    Only boards on the current path are remembered, so memory grows with
    the solution depth, not with the number of states visited.
    """
    table = move_table(config, model)
    h_of = evaluator(config, model)
    cols = config.cols

    threshold = h_of(start)
    if threshold == 0:
        return SearchOutcome([], 0, 0)

    expanded = 0
    start_blank = start.index(0)

    while True:
        if threshold > max_threshold:
            logger.debug("IDA* threshold %d passed the cap of %d.", threshold, max_threshold)
            return SearchOutcome(None, expanded, threshold)
        if expanded >= max_nodes:
            logger.debug("IDA* node cap of %d reached.", max_nodes)
            return SearchOutcome(None, expanded, threshold)

        logger.debug("IDA* iteration with threshold %d (%d nodes so far).", threshold, expanded)
        next_threshold = math.inf
        moves: list[int] = []
        on_path: set[Tiles] = {start}
        stack = [(start, start_blank, 0, iter(table[start_blank]))]
        expanded += 1

        while stack:
            tiles, blank, g, targets = stack[-1]
            target = next(targets, None)
            if target is None:
                stack.pop()
                on_path.discard(tiles)
                if stack:
                    moves.pop()
                continue

            child = shift(tiles, blank, target, cols)
            if child in on_path:
                continue
            h = h_of(child)
            f = g + 1 + h
            if f > threshold:
                if f < next_threshold:
                    next_threshold = f
                continue
            if h == 0:
                moves.append(target)
                return SearchOutcome(moves, expanded, threshold)

            if expanded >= max_nodes:
                logger.debug("IDA* node cap of %d reached.", max_nodes)
                return SearchOutcome(None, expanded, threshold)
            expanded += 1
            if expanded % yield_every == 0:
                yield

            on_path.add(child)
            moves.append(target)
            stack.append((child, target, g + 1, iter(table[target])))

        if next_threshold == math.inf:
            return SearchOutcome(None, expanded, threshold, complete=True)
        threshold = int(next_threshold)
        yield
