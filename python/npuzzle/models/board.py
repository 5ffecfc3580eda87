"""Board model for the sliding puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from npuzzle.errors import InvalidBoardError, InvalidGridError

MIN_SIDE = 2
MAX_SIDE = 100


class Direction(StrEnum):
    """Direction a *tile* travels into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class GridConfig:
    """Dimensions of one puzzle instance.

    Both sides must lie in ``[2, 100]``; anything else is rejected before a
    board can be built for it.
    """

    rows: int
    cols: int

    def __post_init__(self) -> None:
        for name, value in (("rows", self.rows), ("cols", self.cols)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidGridError(f"{name} must be an integer, got {value!r}.")
            if not MIN_SIDE <= value <= MAX_SIDE:
                raise InvalidGridError(
                    f"{name} must be between {MIN_SIDE} and {MAX_SIDE}, got {value}."
                )

    @property
    def cells(self) -> int:
        return self.rows * self.cols

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"


@dataclass(frozen=True)
class Board:
    """An immutable arrangement of tiles.

    Tiles are stored as a flat row-major tuple. 0 represents the blank.
    """

    config: GridConfig
    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        tiles = tuple(self.tiles)
        object.__setattr__(self, "tiles", tiles)
        n = self.config.cells
        if len(tiles) != n:
            raise InvalidBoardError(
                f"Expected {n} tiles for a {self.config} board, got {len(tiles)}."
            )
        if any(type(t) is not int for t in tiles) or set(tiles) != set(range(n)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{n - 1}, got {list(tiles)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, rows: int, cols: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(config=GridConfig(rows, cols), tiles=tuple(flat))

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of equally long rows."""
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise InvalidBoardError("Rows must be non-empty and of equal length.")
        flat = [v for row in rows for v in row]
        return cls.from_flat(len(rows), len(rows[0]), flat)

    @classmethod
    def goal(cls, config: GridConfig) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls(config=config, tiles=goal_tiles(config.cells))

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.position_of(self.blank_index)

    def index_of(self, row: int, col: int) -> int:
        return row * self.config.cols + col

    def position_of(self, index: int) -> tuple[int, int]:
        return divmod(index, self.config.cols)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[self.index_of(row, col)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self.tiles == goal_tiles(self.config.cells)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        index = self.index_of(row, col)
        val = self.tiles[index]
        if val == 0:
            return index == self.config.cells - 1
        return index == val - 1

    def as_rows(self) -> list[list[int]]:
        cols = self.config.cols
        return [list(self.tiles[r * cols : (r + 1) * cols]) for r in range(self.config.rows)]


@lru_cache(maxsize=128)
def goal_tiles(cells: int) -> tuple[int, ...]:
    """Return the goal tile sequence for a board of *cells* cells."""
    return tuple(range(1, cells)) + (0,)


def is_solved(board: Board) -> bool:
    return board.is_solved()
