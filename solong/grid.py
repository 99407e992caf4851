"""Map grid primitives: tile kinds and lookups over a grid of characters."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Tuple, Union

Grid = Sequence[Sequence[str]]
Position = Tuple[int, int]


class Tile(str, Enum):
    """The characters a map is made of."""

    EMPTY = "0"
    WALL = "1"
    PLAYER = "P"
    EXIT = "E"
    COLLECTABLE = "C"
    ENEMY = "T"
    BULLET = "B"
    FILLED = "X"


def find_tile(grid: Grid, tile: Union[Tile, str]) -> Optional[Position]:
    """Return the (row, column) of the first ``tile`` in row-major order, or None."""
    wanted = tile.value if isinstance(tile, Tile) else tile
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row):
            if cell == wanted:
                return row_index, col_index
    return None


def has_collectables(grid: Grid) -> bool:
    """Return True while any collectable is left on the grid."""
    return find_tile(grid, Tile.COLLECTABLE) is not None


def grid_size(grid: Grid) -> Tuple[int, int]:
    """Return (rows, columns), the column count taken from the first row."""
    rows = len(grid)
    columns = len(grid[0]) if rows else 0
    return rows, columns