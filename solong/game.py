"""Rules of the standard game: moving the player, collecting and the exit door."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .grid import Tile, find_tile, has_collectables

FRAME_INTERVAL = 1000
COIN_FRAMES = 8
DOOR_FRAMES = 5
DOOR_OPEN_FRAME = 4


class Key(Enum):
    """Keys the game reacts to."""

    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"
    ESCAPE = "escape"


class Outcome(Enum):
    """What a key press led to."""

    IGNORED = "ignored"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


_STEPS = {
    Key.UP: (-1, 0),
    Key.LEFT: (0, -1),
    Key.DOWN: (1, 0),
    Key.RIGHT: (0, 1),
}

_WALL_ONLY = frozenset({Tile.WALL.value})
_BLOCKERS = {
    Key.UP: _WALL_ONLY,
    Key.LEFT: frozenset({Tile.WALL.value, Tile.ENEMY.value, Tile.BULLET.value}),
    Key.DOWN: _WALL_ONLY,
    Key.RIGHT: _WALL_ONLY,
}


class Game:
    """State of one standard game on a validated map.

    ``grid`` is a list of rows of single-character tiles, changed in place as
    the player moves. ``moves`` counts accepted moves, ``coin_frame`` and
    ``door_frame`` follow the animations, and ``exit_open`` turns true once the
    door animation has finished after the last collectable is taken.
    """

    def __init__(self, grid: Sequence[Union[str, Sequence[str]]]) -> None:
        self.grid: List[List[str]] = [list(row) for row in grid]
        self.moves = 0
        self.exit_open = False
        self.coin_frame = 0
        self.door_frame = 0
        self._counter = 0

    def player_position(self) -> Optional[Tuple[int, int]]:
        """Return the player's (row, column), or None if there is no player."""
        return find_tile(self.grid, Tile.PLAYER)

    def _at(self, row: int, col: int) -> Optional[str]:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return None

    def press(self, key: Key) -> Outcome:
        """Apply one key press.

        ESCAPE quits. Stepping onto the exit once it is open wins. A step into
        anything but a wall is counted as a move; while the exit is closed a
        step towards it is counted but the player stays put.
        """
        if key is Key.ESCAPE:
            return Outcome.QUIT
        position = self.player_position()
        if position is None:
            return Outcome.IGNORED
        row, col = position
        d_row, d_col = _STEPS[key]
        target_row, target_col = row + d_row, col + d_col
        target = self._at(target_row, target_col)
        if self.exit_open and target == Tile.EXIT.value:
            return Outcome.WON
        if target is None or target in _BLOCKERS[key]:
            return Outcome.IGNORED
        if self.exit_open or target != Tile.EXIT.value:
            self.grid[row][col] = Tile.EMPTY.value
            self.grid[target_row][target_col] = Tile.PLAYER.value
        self.moves += 1
        return Outcome.MOVED

    def tick(self) -> None:
        """Advance the animations by one frame of the main loop."""
        if self.door_frame == DOOR_OPEN_FRAME and find_tile(self.grid, Tile.EXIT) is not None:
            self.exit_open = True
        if self._counter % FRAME_INTERVAL == 0:
            self.coin_frame = (self.coin_frame + 1) % COIN_FRAMES
            if has_collectables(self.grid):
                self._counter = 0
            elif not self.exit_open:
                self.door_frame = (self.door_frame + 1) % DOOR_FRAMES
        self._counter += 1