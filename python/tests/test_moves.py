"""Move generation and application under both move models."""

from __future__ import annotations

import random

import pytest

from npuzzle.engine.gamerules.moves import (
    MoveModel,
    apply_move,
    direction_to_move,
    is_legal_move,
    possible_moves,
)
from npuzzle.errors import InvalidMoveError
from npuzzle.models.board import Board, Direction, GridConfig


# -- helpers ------------------------------------------------------------------


def _blank_at(rows: int, cols: int, index: int) -> Board:
    """Goal board with the blank moved to *index* by swapping it in place."""
    tiles = list(Board.goal(GridConfig(rows, cols)).tiles)
    last = rows * cols - 1
    tiles[last], tiles[index] = tiles[index], tiles[last]
    return Board(GridConfig(rows, cols), tuple(tiles))


def _assert_permutation(board: Board) -> None:
    assert sorted(board.tiles) == list(range(board.config.cells))


# -- generation ---------------------------------------------------------------


def test_adjacent_moves_corner_edge_center() -> None:
    assert possible_moves(_blank_at(3, 3, 8)) == [5, 7]
    assert possible_moves(_blank_at(3, 3, 0)) == [3, 1]
    assert possible_moves(_blank_at(3, 3, 1)) == [4, 0, 2]
    assert possible_moves(_blank_at(3, 3, 4)) == [1, 7, 3, 5]


def test_linear_moves_cover_row_and_column() -> None:
    board = _blank_at(3, 4, 5)  # row 1, col 1
    moves = possible_moves(board, MoveModel.LINEAR)
    # up, down, left, then right (nearest first)
    assert moves == [1, 9, 4, 6, 7]
    assert len(moves) == (3 - 1) + (4 - 1)


@pytest.mark.parametrize("rows, cols", [(2, 2), (3, 3), (4, 6), (5, 5)])
def test_linear_move_count(rows: int, cols: int) -> None:
    for index in range(rows * cols):
        board = _blank_at(rows, cols, index)
        assert len(possible_moves(board, MoveModel.LINEAR)) == rows + cols - 2
        assert 2 <= len(possible_moves(board)) <= 4


# -- application --------------------------------------------------------------


def test_adjacent_swap() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 5, 0, 7, 8, 6])
    after = apply_move(board, 8)
    assert after.tiles == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert after.is_solved()
    # input untouched
    assert board.tiles == (1, 2, 3, 4, 5, 0, 7, 8, 6)


def test_linear_slide_along_row() -> None:
    board = Board.from_flat(2, 4, [0, 1, 2, 3, 4, 5, 6, 7])
    after = apply_move(board, 3, MoveModel.LINEAR)
    assert after.tiles == (1, 2, 3, 0, 4, 5, 6, 7)
    back = apply_move(after, 0, MoveModel.LINEAR)
    assert back == board


def test_linear_slide_along_column() -> None:
    board = Board.from_flat(4, 2, [1, 2, 3, 4, 5, 6, 7, 0])
    after = apply_move(board, 1, MoveModel.LINEAR)
    assert after.tiles == (1, 0, 3, 2, 5, 4, 7, 6)
    assert after.blank_index == 1


def test_linear_adjacent_target_is_a_swap() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 5, 0, 7, 8, 6])
    assert apply_move(board, 8, MoveModel.LINEAR) == apply_move(board, 8)


@pytest.mark.parametrize("move", [-1, 9, 5, 0, 1])
def test_illegal_adjacent_move_rejected(move: int) -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 5, 0, 7, 8, 6])  # blank at 5
    assert not is_legal_move(board, move)
    with pytest.raises(InvalidMoveError):
        apply_move(board, move)


def test_linear_rejects_off_line_target() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 0, 5, 6, 7, 8])  # blank at center
    for target in (0, 2, 6, 8):
        assert not is_legal_move(board, target, MoveModel.LINEAR)
        with pytest.raises(InvalidMoveError):
            apply_move(board, target, MoveModel.LINEAR)


def test_adjacent_model_rejects_long_slide() -> None:
    board = Board.from_flat(2, 4, [0, 1, 2, 3, 4, 5, 6, 7])
    assert is_legal_move(board, 3, MoveModel.LINEAR)
    with pytest.raises(InvalidMoveError):
        apply_move(board, 3)


# -- invariants ---------------------------------------------------------------


@pytest.mark.parametrize("model", list(MoveModel))
@pytest.mark.parametrize("rows, cols", [(2, 2), (3, 3), (4, 5), (6, 3)])
def test_random_walk_preserves_permutation(model: MoveModel, rows: int, cols: int) -> None:
    rng = random.Random(rows * 100 + cols)
    board = Board.goal(GridConfig(rows, cols))
    for _ in range(300):
        move = rng.choice(possible_moves(board, model))
        after = apply_move(board, move, model)
        _assert_permutation(after)
        assert after.blank_index == move
        board = after


def test_adjacent_moves_are_reversible() -> None:
    rng = random.Random(7)
    board = Board.goal(GridConfig(4, 4))
    for _ in range(200):
        origin = board.blank_index
        move = rng.choice(possible_moves(board))
        after = apply_move(board, move)
        assert apply_move(after, origin) == board
        board = after


@pytest.mark.parametrize("rows, cols", [(2, 2), (3, 3), (3, 5), (4, 4)])
def test_one_move_from_goal_is_not_solved(rows: int, cols: int) -> None:
    goal = Board.goal(GridConfig(rows, cols))
    for model in MoveModel:
        for move in possible_moves(goal, model):
            assert not apply_move(goal, move, model).is_solved()


# -- directions ---------------------------------------------------------------


def test_direction_to_move() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 0, 5, 6, 7, 8])  # blank at center
    assert direction_to_move(board, Direction.UP) == 7
    assert direction_to_move(board, Direction.DOWN) == 1
    assert direction_to_move(board, Direction.LEFT) == 5
    assert direction_to_move(board, Direction.RIGHT) == 3


def test_direction_off_edge() -> None:
    goal = Board.goal(GridConfig(3, 3))  # blank bottom-right
    assert direction_to_move(goal, Direction.UP) is None
    assert direction_to_move(goal, Direction.LEFT) is None
    assert direction_to_move(goal, Direction.DOWN) == 5
