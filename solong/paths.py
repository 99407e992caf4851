"""Reachability checks: flood fill from the player over walkable tiles."""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

from .grid import Tile, find_tile, grid_size
from .maps import MapError

Row = Union[str, Sequence[str]]

_FILLABLE = frozenset(
    {Tile.PLAYER.value, Tile.EMPTY.value, Tile.COLLECTABLE.value, Tile.EXIT.value}
)
_MUST_BE_REACHED = frozenset(
    {Tile.PLAYER.value, Tile.COLLECTABLE.value, Tile.EXIT.value}
)


def flood_fill(grid: Sequence[Row], start: Tuple[int, int]) -> List[str]:
    """Return a copy of ``grid`` with every tile reachable from ``start`` set to ``X``.

    ``start`` is (row, column). Player, empty, collectable and exit tiles are
    filled; an exit is filled but the fill does not pass through it. The grid
    is bounded by the row count and the length of the first row. The input
    grid is left unchanged.
    """
    cells = [list(row) for row in grid]
    rows, columns = grid_size(cells)
    stack = [start]
    while stack:
        row, col = stack.pop()
        if not (0 <= row < rows and 0 <= col < columns) or col >= len(cells[row]):
            continue
        cell = cells[row][col]
        if cell not in _FILLABLE:
            continue
        cells[row][col] = Tile.FILLED.value
        if cell == Tile.EXIT.value:
            continue
        stack.extend(((row, col - 1), (row, col + 1), (row - 1, col), (row + 1, col)))
    return ["".join(row) for row in cells]


def check_reachable(grid: Sequence[Row]) -> bool:
    """Check that the player can reach every collectable and the exit.

    Returns False for an empty grid and True when everything is reachable;
    raises MapError when some player, collectable or exit tile is left unfilled.
    """
    if not grid:
        return False
    start = find_tile(grid, Tile.PLAYER)
    if start is None:
        start = (0, 0)
    filled = flood_fill(grid, start)
    if any(cell in _MUST_BE_REACHED for row in filled for cell in row):
        raise MapError("not every collectable and exit can be reached")
    return True