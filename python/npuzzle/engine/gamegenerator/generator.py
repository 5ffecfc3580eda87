"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from npuzzle.engine.gamerules.moves import MoveModel, move_table, shift
from npuzzle.models.board import Board, GridConfig

logger = logging.getLogger(__name__)

_default_rng = random.Random()

BASE_SHUFFLE_STEPS = 50


class GameGenerator:
    """Creates solvable puzzles by random walks from the solved state."""

    @staticmethod
    def solved(config: GridConfig) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(config)

    @staticmethod
    def shuffle_steps(config: GridConfig) -> int:
        return BASE_SHUFFLE_STEPS + config.cells

    @staticmethod
    def scramble(
        board: Board,
        steps: int,
        model: MoveModel = MoveModel.ADJACENT,
        rng: random.Random | None = None,
    ) -> Board:
        """Return *board* after *steps* random legal moves.

        The walk never immediately undoes its previous move unless that is
        the only move available.
        """
        rng = rng or _default_rng
        table = move_table(board.config, model)
        cols = board.config.cols
        tiles = board.tiles
        blank = board.blank_index
        prev_blank: int | None = None

        for _ in range(steps):
            targets = table[blank]
            if prev_blank in targets and len(targets) > 1:
                targets = tuple(t for t in targets if t != prev_blank)
            target = rng.choice(targets)
            tiles = shift(tiles, blank, target, cols)
            prev_blank, blank = blank, target

        return Board(board.config, tiles)

    @staticmethod
    def generate(
        config: GridConfig,
        model: MoveModel = MoveModel.ADJACENT,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable*, unsolved board for *config*."""
        goal = GameGenerator.solved(config)
        steps = GameGenerator.shuffle_steps(config)
        attempts = 0
        while True:
            attempts += 1
            board = GameGenerator.scramble(goal, steps, model, rng)
            # Ensure the board is not already solved
            if not board.is_solved():
                break
            logger.debug("Random walk on %s returned to the goal; retrying.", config)
        logger.debug(
            "Shuffled %s board with %d %s moves in %d attempt(s).",
            config, steps, model, attempts,
        )
        return board


def shuffle(
    config: GridConfig,
    model: MoveModel = MoveModel.ADJACENT,
    rng: random.Random | None = None,
) -> Board:
    return GameGenerator.generate(config, model, rng)
