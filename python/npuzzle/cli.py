"""Command-line interface for the puzzle engine.

Usage::

    npuzzle shuffle -r 3 -c 3 --seed 7
    npuzzle check "1,2,3,4,5,0,7,8,6" -r 3 -c 3
    npuzzle solve "1,2,3,4,5,0,7,8,6" -r 3 -c 3
    npuzzle score 3 3 42 95
"""

from __future__ import annotations

import asyncio
import random
import re
from typing import Optional

import rich.box
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from npuzzle.engine.gamegenerator import shuffle
from npuzzle.engine.gamerules.moves import MoveModel
from npuzzle.engine.gamerules.solvability import count_inversions, is_solvable
from npuzzle.engine.gamesolver.heuristics import heuristic
from npuzzle.engine.gamesolver.solver import Solver, SolverConfig
from npuzzle.errors import NPuzzleError
from npuzzle.models.board import Board, GridConfig
from npuzzle.models.score import PENALTY_PER_MOVE, score_of
from npuzzle.utils.logging_utils import LOG_LEVELS, setup_logger

console = Console()

app = typer.Typer(add_completion=False, help="Generalized N x M sliding puzzle engine.")

EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2


# -- helpers ------------------------------------------------------------------


def _parse_tiles(raw: str) -> list[int]:
    parts = [p for p in re.split(r"[,\s]+", raw.strip()) if p]
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise NPuzzleError(f"Tiles must be integers, got {raw!r}.") from None


def _load_board(raw: str, rows: int, cols: int) -> Board:
    return Board(GridConfig(rows, cols), tuple(_parse_tiles(raw)))


def _fail(exc: Exception) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    return typer.Exit(code=EXIT_BAD_INPUT)


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.config.cells - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width, justify="right")

    for r, row in enumerate(board.as_rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)
    return table


def _flat(board: Board) -> str:
    return ",".join(str(v) for v in board.tiles)


# -- options shared by several commands ---------------------------------------

_ROWS = typer.Option(3, "-r", "--rows", help="Number of rows (2-100).")
_COLS = typer.Option(3, "-c", "--cols", help="Number of columns (2-100).")
_MODEL = typer.Option(
    MoveModel.ADJACENT, "-m", "--model",
    help="Move model: adjacent swaps or linear slides.",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging."),
    log_level: str = typer.Option(
        "warning", "--log-level", envvar="NPUZZLE_LOG_LEVEL",
        help=f"Log level ({', '.join(LOG_LEVELS)}).",
    ),
) -> None:
    """Generalized N x M sliding puzzle engine."""
    level = LOG_LEVELS.get(log_level.lower())
    if level is None:
        raise typer.BadParameter(f"unknown log level {log_level!r}", param_hint="--log-level")
    setup_logger("npuzzle", LOG_LEVELS["debug"] if verbose else level)


# -- commands -----------------------------------------------------------------


@app.command("shuffle")
def shuffle_cmd(
    rows: int = _ROWS,
    cols: int = _COLS,
    model: MoveModel = _MODEL,
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible shuffle."),
) -> None:
    """Print a random solvable, unsolved board."""
    try:
        config = GridConfig(rows, cols)
    except NPuzzleError as exc:
        raise _fail(exc)
    rng = random.Random(seed) if seed is not None else None
    board = shuffle(config, model, rng)
    console.print(_render_board(board))
    console.print(_flat(board))


@app.command("check")
def check_cmd(
    tiles: str = typer.Argument(..., help="Row-major tiles, comma separated; 0 is the blank."),
    rows: int = _ROWS,
    cols: int = _COLS,
    model: MoveModel = _MODEL,
) -> None:
    """Report whether a board is solvable and how far it is from the goal."""
    try:
        board = _load_board(tiles, rows, cols)
    except NPuzzleError as exc:
        raise _fail(exc)
    solvable = is_solvable(board, model)
    console.print(_render_board(board))
    console.print(f"inversions: {count_inversions(board.tiles)}")
    console.print(f"solvable: {'yes' if solvable else 'no'}")
    console.print(f"solved: {'yes' if board.is_solved() else 'no'}")
    console.print(f"heuristic: {heuristic(board, model)}")


@app.command("solve")
def solve_cmd(
    tiles: str = typer.Argument(..., help="Row-major tiles, comma separated; 0 is the blank."),
    rows: int = _ROWS,
    cols: int = _COLS,
    model: MoveModel = _MODEL,
    max_nodes: int = typer.Option(
        SolverConfig.max_nodes, "--max-nodes", envvar="NPUZZLE_MAX_NODES",
        min=1, help="A* expansion cap.",
    ),
    max_cells: int = typer.Option(
        SolverConfig.max_cells, "--max-cells", envvar="NPUZZLE_MAX_CELLS",
        min=1, help="Largest board the solver will attempt.",
    ),
    astar_max_cells: int = typer.Option(
        SolverConfig.astar_max_cells, "--astar-max-cells", envvar="NPUZZLE_ASTAR_MAX_CELLS",
        min=0, help="Largest board solved with A*; larger ones use IDA*.",
    ),
    max_threshold: int = typer.Option(
        SolverConfig.max_threshold, "--max-threshold", envvar="NPUZZLE_MAX_THRESHOLD",
        min=1, help="IDA* bound at which the search gives up.",
    ),
    ida_max_nodes: int = typer.Option(
        SolverConfig.ida_max_nodes, "--ida-max-nodes", envvar="NPUZZLE_IDA_MAX_NODES",
        min=1, help="IDA* expansion cap.",
    ),
) -> None:
    """Find a shortest move sequence to the goal."""
    try:
        board = _load_board(tiles, rows, cols)
    except NPuzzleError as exc:
        raise _fail(exc)

    solver = Solver(SolverConfig(
        astar_max_cells=astar_max_cells,
        max_cells=max_cells,
        max_nodes=max_nodes,
        max_threshold=max_threshold,
        ida_max_nodes=ida_max_nodes,
    ))
    result = asyncio.run(solver.solve(board, model))

    console.print(f"status: {result.status}")
    console.print(f"strategy: {result.strategy}")
    console.print(f"nodes: {result.nodes_expanded}")
    if not result.ok:
        raise typer.Exit(code=EXIT_NO_SOLUTION)
    console.print(f"length: {len(result.moves)}")
    console.print(f"moves: {' '.join(str(m) for m in result.moves)}")


@app.command("score")
def score_cmd(
    rows: int = typer.Argument(..., min=2, max=100),
    cols: int = typer.Argument(..., min=2, max=100),
    moves: int = typer.Argument(..., min=0),
    seconds: float = typer.Argument(..., min=0),
    penalty: int = typer.Option(PENALTY_PER_MOVE, "--penalty", min=0, help="Points lost per move."),
) -> None:
    """Print the score for a finished game."""
    console.print(score_of(rows, cols, moves, seconds, penalty))


if __name__ == "__main__":
    app()
