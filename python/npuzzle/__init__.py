"""Generalized N x M sliding puzzle engine.

Typical use::

    from npuzzle import GridConfig, shuffle, solve_sync, apply_move

    board = shuffle(GridConfig(3, 3))
    result = solve_sync(board)
    for move in result.moves:
        board = apply_move(board, move)
    assert board.is_solved()
"""

from npuzzle.engine.gamegenerator import GameGenerator, shuffle
from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.gamerules import (
    MoveModel,
    apply_move,
    count_inversions,
    direction_to_move,
    is_legal_move,
    is_solvable,
    possible_moves,
)
from npuzzle.engine.gamesolver import (
    SolveResult,
    SolveStatus,
    Solver,
    SolverConfig,
    Strategy,
    heuristic,
    linear_conflict,
    manhattan_distance,
    solve,
    solve_sync,
)
from npuzzle.errors import InvalidBoardError, InvalidGridError, InvalidMoveError, NPuzzleError
from npuzzle.models import PENALTY_PER_MOVE, Board, Direction, GridConfig, is_solved, score_of

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Direction",
    "GameGenerator",
    "GamePlay",
    "GridConfig",
    "InvalidBoardError",
    "InvalidGridError",
    "InvalidMoveError",
    "MoveModel",
    "NPuzzleError",
    "PENALTY_PER_MOVE",
    "SolveResult",
    "SolveStatus",
    "Solver",
    "SolverConfig",
    "Strategy",
    "apply_move",
    "count_inversions",
    "direction_to_move",
    "heuristic",
    "is_legal_move",
    "is_solvable",
    "is_solved",
    "linear_conflict",
    "manhattan_distance",
    "possible_moves",
    "score_of",
    "shuffle",
    "solve",
    "solve_sync",
]
