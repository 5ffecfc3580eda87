"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from npuzzle.models.board import Board


class GameState:
    """Holds the current board, move counter, and optional move limit."""

    def __init__(self, board: Board, move_limit: int | None = None) -> None:
        if move_limit is not None and move_limit < 1:
            raise ValueError(f"move_limit must be positive, got {move_limit}.")
        self.board = board
        self.moves: int = 0
        self.move_limit = move_limit

    # -- moves ----------------------------------------------------------------

    def advance(self, board: Board) -> None:
        self.board = board
        self.moves += 1

    @property
    def moves_left(self) -> int | None:
        if self.move_limit is None:
            return None
        return max(0, self.move_limit - self.moves)

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
