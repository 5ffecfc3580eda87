from npuzzle.models.board import Board, Direction, GridConfig, goal_tiles, is_solved
from npuzzle.models.score import PENALTY_PER_MOVE, score_of

__all__ = [
    "Board",
    "Direction",
    "GridConfig",
    "PENALTY_PER_MOVE",
    "goal_tiles",
    "is_solved",
    "score_of",
]
