"""Inversion-parity solvability test.

For an N x M board:

* odd width  -> solvable iff the inversion count is even;
* even width -> with the blank on row ``d`` counted 1-based from the
  bottom, solvable iff ``d`` and the inversion count have different
  parity.

A linear slide over ``k`` cells is exactly ``k`` adjacent swaps along
one line, so both move models reach the same set of boards and share
this test.
"""

from __future__ import annotations

from collections.abc import Sequence

from npuzzle.engine.gamerules.moves import MoveModel
from npuzzle.models.board import Board


def count_inversions(tiles: Sequence[int]) -> int:
    """Count out-of-order pairs among the non-blank tiles."""
    flat = [t for t in tiles if t != 0]
    # Fenwick tree over tile values: O(n log n) so 100x100 boards stay cheap.
    size = len(flat)
    tree = [0] * (size + 1)
    inversions = 0
    for seen, value in enumerate(flat):
        i = value
        smaller_or_equal = 0
        while i > 0:
            smaller_or_equal += tree[i]
            i -= i & -i
        inversions += seen - smaller_or_equal
        i = value
        while i <= size:
            tree[i] += 1
            i += i & -i
    return inversions


def is_solvable(board: Board, model: MoveModel = MoveModel.ADJACENT) -> bool:
    """Return True if *board* can reach the goal under *model*."""
    del model  # both models share one reachable set
    inversions = count_inversions(board.tiles)
    if board.cols % 2 == 1:
        return inversions % 2 == 0
    blank_row, _ = board.blank_pos
    row_from_bottom = board.rows - blank_row
    if row_from_bottom % 2 == 0:
        return inversions % 2 == 1
    return inversions % 2 == 0
