"""Move generation and application.

A move is the board index of the cell that is merged into the blank's
slot.  Two move models exist and one is chosen per puzzle instance:

* ``ADJACENT``: the target must touch the blank; the two cells swap.
* ``LINEAR``: the target may be any cell in the blank's row or column;
  every tile in between shifts one slot toward the blank, which ends up
  at the target.

Everything here is pure: boards are never mutated.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache

from npuzzle.errors import InvalidMoveError
from npuzzle.models.board import Board, Direction, GridConfig


class MoveModel(StrEnum):
    ADJACENT = "adjacent"
    LINEAR = "linear"


# The offset points to the tile that will slide into the blank.
# UP    -> tile below the blank moves up
# DOWN  -> tile above the blank moves down
# LEFT  -> tile right of the blank moves left
# RIGHT -> tile left of the blank moves right
_DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


# -- precomputed tables ---------------------------------------------------------


@lru_cache(maxsize=64)
def move_table(config: GridConfig, model: MoveModel) -> tuple[tuple[int, ...], ...]:
    """Return, for every blank index, the legal move targets in order.

    Order is up, down, left, right; under ``LINEAR`` each direction lists
    the nearest cell first.
    """
    rows, cols = config.rows, config.cols
    reach = 1 if model is MoveModel.ADJACENT else max(rows, cols)
    table: list[tuple[int, ...]] = []
    for i in range(rows * cols):
        r, c = divmod(i, cols)
        targets: list[int] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            for k in range(1, reach + 1):
                nr, nc = r + dr * k, c + dc * k
                if not (0 <= nr < rows and 0 <= nc < cols):
                    break
                targets.append(nr * cols + nc)
        table.append(tuple(targets))
    return tuple(table)


def shift(tiles: tuple[int, ...], blank: int, target: int, cols: int) -> tuple[int, ...]:
    """Slide the tiles between *blank* and *target* toward the blank.

    *target* must share a row or column with *blank*; an adjacent target
    degenerates into a plain swap.
    """
    if target // cols == blank // cols:
        step = 1 if target > blank else -1
    else:
        step = cols if target > blank else -cols
    out = list(tiles)
    for i in range(blank, target, step):
        out[i] = out[i + step]
    out[target] = 0
    return tuple(out)


# -- public API -----------------------------------------------------------------


def possible_moves(board: Board, model: MoveModel = MoveModel.ADJACENT) -> list[int]:
    """Return every legal move target for *board* under *model*."""
    return list(move_table(board.config, model)[board.blank_index])


def is_legal_move(board: Board, move: int, model: MoveModel = MoveModel.ADJACENT) -> bool:
    return move in move_table(board.config, model)[board.blank_index]


def apply_move(board: Board, move: int, model: MoveModel = MoveModel.ADJACENT) -> Board:
    """Return the successor of *board* after *move*.

    Raises ``InvalidMoveError`` if *move* is not legal under *model*.
    """
    blank = board.blank_index
    if move not in move_table(board.config, model)[blank]:
        row, col = board.position_of(blank)
        raise InvalidMoveError(
            f"Cell {move} cannot move into the blank at ({row}, {col}) "
            f"under the {model} model."
        )
    return Board(board.config, shift(board.tiles, blank, move, board.config.cols))


def direction_to_move(board: Board, direction: Direction) -> int | None:
    """Map a tile direction to the adjacent move, or ``None`` off the edge."""
    br, bc = board.blank_pos
    dr, dc = _DIRECTION_OFFSETS[direction]
    tr, tc = br + dr, bc + dc
    if not (0 <= tr < board.rows and 0 <= tc < board.cols):
        return None
    return board.index_of(tr, tc)
