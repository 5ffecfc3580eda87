from npuzzle.engine.gamerules.moves import (
    MoveModel,
    apply_move,
    direction_to_move,
    is_legal_move,
    possible_moves,
)
from npuzzle.engine.gamerules.solvability import count_inversions, is_solvable

__all__ = [
    "MoveModel",
    "apply_move",
    "count_inversions",
    "direction_to_move",
    "is_legal_move",
    "is_solvable",
    "possible_moves",
]
