"""Sliding puzzle solver.

Picks A* for small boards and IDA* for larger ones, refuses boards above
a hard ceiling, and reports every failure as a :class:`SolveResult`
rather than an exception.

``Solver.solve`` is a coroutine that hands control back to the event loop
at every safe point of the search, so cancelling its task abandons the
search cleanly.  ``Solver.solve_sync`` runs the same search to completion
on the calling thread.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import StrEnum

from npuzzle.engine.gamerules.moves import MoveModel
from npuzzle.engine.gamerules.solvability import is_solvable
from npuzzle.engine.gamesolver.search import Search, SearchOutcome, astar, idastar
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class SolveStatus(StrEnum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    TOO_LARGE = "too_large"


class Strategy(StrEnum):
    NONE = "none"
    ASTAR = "astar"
    IDASTAR = "idastar"


@dataclass(frozen=True)
class SolverConfig:
    """Resource limits for one solver.

    Boards with more than ``max_cells`` cells are refused outright; boards
    with at most ``astar_max_cells`` cells use A*, the rest IDA*.
    """

    astar_max_cells: int = 16
    max_cells: int = 25
    max_nodes: int = 200_000
    max_threshold: int = 100
    ida_max_nodes: int = 2_000_000
    yield_every: int = 2_000

    def __post_init__(self) -> None:
        if self.astar_max_cells < 0:
            raise ValueError(f"astar_max_cells must be >= 0, got {self.astar_max_cells}.")
        for name in ("max_cells", "max_nodes", "max_threshold", "ida_max_nodes", "yield_every"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}.")


@dataclass(frozen=True)
class SolveResult:
    status: SolveStatus
    moves: tuple[int, ...] = ()
    strategy: Strategy = Strategy.NONE
    nodes_expanded: int = 0
    threshold: int | None = None
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status is SolveStatus.SOLVED

    def __len__(self) -> int:
        return len(self.moves)


class Solver:
    """Stateless apart from its limits; safe to share between callers."""

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()

    # -- strategy selection ---------------------------------------------------

    def strategy_for(self, board: Board) -> Strategy:
        cells = board.config.cells
        if cells > self.config.max_cells:
            return Strategy.NONE
        if cells <= self.config.astar_max_cells:
            return Strategy.ASTAR
        return Strategy.IDASTAR

    def _precheck(self, board: Board, model: MoveModel) -> SolveResult | None:
        """Return an immediate result, or None if a search is needed."""
        if board.config.cells > self.config.max_cells:
            logger.info(
                "Refusing to search a %s board: %d cells exceeds the limit of %d.",
                board.config, board.config.cells, self.config.max_cells,
            )
            return SolveResult(SolveStatus.TOO_LARGE)
        if not is_solvable(board, model):
            logger.info("Board %s is unsolvable; no search attempted.", list(board.tiles))
            return SolveResult(SolveStatus.UNSOLVABLE)
        if board.is_solved():
            return SolveResult(SolveStatus.SOLVED)
        return None

    def _search(self, board: Board, model: MoveModel, strategy: Strategy) -> Search:
        cfg = self.config
        if strategy is Strategy.ASTAR:
            return astar(board.tiles, board.config, model, cfg.max_nodes, cfg.yield_every)
        return idastar(
            board.tiles, board.config, model,
            cfg.max_threshold, cfg.ida_max_nodes, cfg.yield_every,
        )

    @staticmethod
    def _result(outcome: SearchOutcome, strategy: Strategy, elapsed: float) -> SolveResult:
        if outcome.path is not None:
            status = SolveStatus.SOLVED
        elif outcome.complete:
            status = SolveStatus.UNSOLVABLE
        else:
            status = SolveStatus.RESOURCE_EXHAUSTED
        result = SolveResult(
            status=status,
            moves=tuple(outcome.path or ()),
            strategy=strategy,
            nodes_expanded=outcome.nodes_expanded,
            threshold=outcome.threshold,
            elapsed=elapsed,
        )
        logger.info(
            "%s finished: %s, %d moves, %d nodes in %.3fs.",
            strategy, status, len(result.moves), result.nodes_expanded, elapsed,
        )
        return result

    # -- public API -----------------------------------------------------------

    def solve_sync(self, board: Board, model: MoveModel = MoveModel.ADJACENT) -> SolveResult:
        """Solve *board* on the calling thread."""
        early = self._precheck(board, model)
        if early is not None:
            return early
        strategy = self.strategy_for(board)
        logger.debug("Solving %s board with %s.", board.config, strategy)
        started = time.perf_counter()
        search = self._search(board, model, strategy)
        while True:
            try:
                next(search)
            except StopIteration as stop:
                return self._result(stop.value, strategy, time.perf_counter() - started)

    async def solve(self, board: Board, model: MoveModel = MoveModel.ADJACENT) -> SolveResult:
        """Solve *board*, yielding to the event loop between search steps."""
        early = self._precheck(board, model)
        if early is not None:
            return early
        strategy = self.strategy_for(board)
        logger.debug("Solving %s board with %s.", board.config, strategy)
        started = time.perf_counter()
        search = self._search(board, model, strategy)
        try:
            while True:
                try:
                    next(search)
                except StopIteration as stop:
                    return self._result(stop.value, strategy, time.perf_counter() - started)
                await asyncio.sleep(0)
        finally:
            search.close()

    def hint(self, board: Board, model: MoveModel = MoveModel.ADJACENT) -> int | None:
        """Return the single best next move, or ``None`` if solved / no solution.

        Blocks until the search finishes. Inside an event loop use
        ``GamePlay.hint`` or :meth:`solve` instead.
        """
        if board.is_solved():
            return None
        result = self.solve_sync(board, model)
        return result.moves[0] if result.ok else None


_default_solver = Solver()


async def solve(board: Board, model: MoveModel = MoveModel.ADJACENT) -> SolveResult:
    return await _default_solver.solve(board, model)


def solve_sync(board: Board, model: MoveModel = MoveModel.ADJACENT) -> SolveResult:
    return _default_solver.solve_sync(board, model)
