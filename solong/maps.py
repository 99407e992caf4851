"""Loading and validating ``.ber`` map files."""

from __future__ import annotations

import os
from typing import List, Sequence, Tuple, Union

from .grid import Tile
from .lines import read_lines

MAP_SUFFIX = ".ber"

_KNOWN_TILES = frozenset(
    {Tile.EMPTY.value, Tile.WALL.value, Tile.PLAYER.value, Tile.EXIT.value, Tile.COLLECTABLE.value, "\n"}
)


class MapError(ValueError):
    """Raised when a map file or its content is not acceptable."""

    def __init__(self, detail: str = "Error") -> None:
        super().__init__(detail)
        self.detail = detail


def validate_filename(path: Union[str, os.PathLike]) -> str:
    """Return ``path`` as a string if it names a ``.ber`` file, else raise MapError."""
    name = os.fspath(path)
    if isinstance(name, bytes):
        name = os.fsdecode(name)
    name = name.split("\n", 1)[0]
    if len(name) < len(MAP_SUFFIX) or not name.endswith(MAP_SUFFIX):
        raise MapError(f"map file must end with {MAP_SUFFIX!r}: {name!r}")
    return name


def load_map(path: Union[str, os.PathLike]) -> List[str]:
    """Read a map file into a list of rows without their newlines.

    Raises MapError if the file cannot be read or is empty.
    """
    try:
        lines = read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(f"cannot read map {os.fspath(path)!r}: {exc}") from exc
    if not lines:
        raise MapError(f"map {os.fspath(path)!r} is empty")
    return [line[:-1] if line.endswith("\n") else line for line in lines]


def _row_text(row: Union[str, Sequence[str]]) -> str:
    text = row if isinstance(row, str) else "".join(row)
    return text.split("\n", 1)[0]


def count_features(grid: Sequence[Union[str, Sequence[str]]], bonus: bool = False) -> Tuple[int, int]:
    """Count (players plus exits, collectables) on the grid.

    In the standard game any tile other than ``0 1 P E C`` raises MapError.
    In the bonus game counting simply stops at the first such tile, so tiles
    such as enemies and bullets end the count where they appear.
    """
    endpoints = 0
    collectables = 0
    for row in grid:
        for cell in row:
            if cell in (Tile.EXIT.value, Tile.PLAYER.value):
                endpoints += 1
            elif cell == Tile.COLLECTABLE.value:
                collectables += 1
            elif cell not in _KNOWN_TILES:
                if bonus:
                    return endpoints, collectables
                raise MapError(f"unknown map tile {cell!r}")
    return endpoints, collectables


def _check_walls(rows: List[str]) -> None:
    width = len(rows[0])
    if width == 0:
        raise MapError("map rows are empty")
    for edge in (rows[0], rows[-1]):
        if any(cell != Tile.WALL.value for cell in edge):
            raise MapError("map is not closed by walls")
    for row in rows:
        if row[0] != Tile.WALL.value or row[width - 1] != Tile.WALL.value:
            raise MapError("map is not closed by walls")


def validate_map(grid: Sequence[Union[str, Sequence[str]]], bonus: bool = False) -> Tuple[int, int]:
    """Check that the map is a walled rectangle with its required tiles.

    Returns (height, width) of the map. Raises MapError on the first problem:
    rows of unequal length, an open border, a player and exit total other
    than two, or no collectable.
    """
    if not grid:
        raise MapError("map has no rows")
    rows = [_row_text(row) for row in grid]
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("map is not rectangular")
    _check_walls(rows)
    endpoints, collectables = count_features(grid, bonus)
    if endpoints != 2:
        raise MapError("map needs exactly one player and one exit")
    if collectables < 1:
        raise MapError("map needs at least one collectable")
    return len(rows), width