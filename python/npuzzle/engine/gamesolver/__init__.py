from npuzzle.engine.gamesolver.heuristics import (
    heuristic,
    linear_conflict,
    manhattan_distance,
)
from npuzzle.engine.gamesolver.solver import (
    SolveResult,
    SolveStatus,
    Solver,
    SolverConfig,
    Strategy,
    solve,
    solve_sync,
)

__all__ = [
    "SolveResult",
    "SolveStatus",
    "Solver",
    "SolverConfig",
    "Strategy",
    "heuristic",
    "linear_conflict",
    "manhattan_distance",
    "solve",
    "solve_sync",
]
