"""Core gameplay logic: processes moves and checks the win condition. At most
one solver search runs per game."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Iterable, Iterator

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gamerules.moves import (
    MoveModel,
    apply_move,
    direction_to_move,
    is_legal_move,
)
from npuzzle.engine.gamesolver.solver import SolveResult, Solver
from npuzzle.engine.gamestate import GameState
from npuzzle.models.board import Board, Direction, GridConfig
from npuzzle.models.score import score_of

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(
        self,
        config: GridConfig,
        model: MoveModel = MoveModel.ADJACENT,
        rng: random.Random | None = None,
        move_limit: int | None = None,
        solver: Solver | None = None,
    ) -> None:
        self.config = config
        self.model = model
        self.rng = rng
        self.solver = solver or Solver()
        self._solve_task: asyncio.Task[SolveResult] | None = None
        board = GameGenerator.generate(config, model, rng)
        self.state = GameState(board, move_limit)

    @classmethod
    def from_board(
        cls,
        board: Board,
        model: MoveModel = MoveModel.ADJACENT,
        move_limit: int | None = None,
        solver: Solver | None = None,
    ) -> GamePlay:
        """Create a game session from an existing board (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.config = board.config
        obj.model = model
        obj.rng = None
        obj.solver = solver or Solver()
        obj._solve_task = None
        obj.state = GameState(board, move_limit)
        return obj

    def restart(self) -> None:
        """Deal a fresh board of the same size; cancels any pending solve."""
        self.cancel_solve()
        board = GameGenerator.generate(self.config, self.model, self.rng)
        self.state = GameState(board, self.state.move_limit)

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        target = direction_to_move(self.state.board, direction)
        if target is None:
            return False
        return self.move_tile(target)

    def move_tile(self, index: int) -> bool:
        """Move the tile at board *index* into the blank.

        Returns True if the move was legal under this game's move model and
        was applied; otherwise the board is left untouched.
        """
        if self.is_won or self.is_out_of_moves:
            return False
        if not is_legal_move(self.state.board, index, self.model):
            return False
        self.state.advance(apply_move(self.state.board, index, self.model))
        return True

    def play_solution(self, moves: Iterable[int]) -> Iterator[Board]:
        """Apply *moves* one by one, yielding the board after each."""
        for index in moves:
            self.state.advance(apply_move(self.state.board, index, self.model))
            yield self.state.board

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    @property
    def is_out_of_moves(self) -> bool:
        return self.state.moves_left == 0 and not self.is_won

    def score(self, seconds: float) -> int:
        return score_of(self.config.rows, self.config.cols, self.state.moves, seconds)

    # -- solver ---------------------------------------------------------------

    @property
    def solving(self) -> bool:
        return self._solve_task is not None and not self._solve_task.done()

    def cancel_solve(self) -> bool:
        """Cancel the search in flight, if any.  Returns True if one was."""
        task = self._solve_task
        self._solve_task = None
        if task is None or task.done():
            return False
        logger.debug("Cancelling in-flight solve for %s game.", self.config)
        task.cancel()
        return True

    async def solve(self) -> SolveResult:
        """Search for a solution from the current board.

        Starting a new solve cancels the previous one, whose awaiter then
        receives ``asyncio.CancelledError``.
        """
        self.cancel_solve()
        task = asyncio.ensure_future(self.solver.solve(self.state.board, self.model))
        self._solve_task = task
        try:
            return await task
        finally:
            if self._solve_task is task:
                self._solve_task = None

    async def hint(self) -> int | None:
        """Return the board index of the best next tile to move.

        Goes through :meth:`solve`, so a hint replaces any search in flight
        and is cancelled by ``restart()`` or ``cancel_solve()``.
        """
        if self.is_won:
            return None
        result = await self.solve()
        return result.moves[0] if result.ok else None
