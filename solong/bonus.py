"""Rules of the bonus game: enemies, a bullet and the animated exit door."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .game import COIN_FRAMES, DOOR_FRAMES, DOOR_OPEN_FRAME, Key, Outcome
from .grid import Tile, find_tile, has_collectables

FRAME_INTERVAL = 750
ENEMY_INTERVAL = 400
ENEMY_FRAMES = 7
BULLET_INTERVAL = 170
BULLET_FRAMES = 7
BULLET_FIRE_FRAME = 6

Position = Tuple[int, int]

_STEPS = {
    Key.UP: (-1, 0),
    Key.LEFT: (0, -1),
    Key.DOWN: (1, 0),
    Key.RIGHT: (0, 1),
}

_BLOCKERS = frozenset({Tile.WALL.value, Tile.ENEMY.value, Tile.BULLET.value})


@dataclass
class Bullet:
    """Animation and travel state of the bullet.

    ``position`` is where the bullet was last seen, ``origin`` where it was
    first seen and where it returns after hitting something.
    """

    counter: int = -1
    frame: int = 1
    position: Optional[Position] = None
    origin: Optional[Position] = None


class BonusGame:
    """State of one bonus game on a validated map.

    ``grid`` is a list of rows of single-character tiles, changed in place.
    ``over`` turns true when the player is caught by an enemy or the bullet;
    from then on moves and animations stop.
    """

    def __init__(self, grid: Sequence[Union[str, Sequence[str]]]) -> None:
        self.grid: List[List[str]] = [list(row) for row in grid]
        self.moves = 0
        self.exit_open = False
        self.over = False
        self.coin_frame = 0
        self.door_frame = 0
        self.enemy_frame = 0
        self.bullet = Bullet()
        self._counter = 0
        self._enemy_counter = 0

    def player_position(self) -> Optional[Position]:
        """Return the player's (row, column), or None if there is no player."""
        return find_tile(self.grid, Tile.PLAYER)

    def _at(self, row: int, col: int) -> Optional[str]:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return None

    def _next_to_exit(self, row: int, col: int) -> bool:
        return any(
            self._at(row + d_row, col + d_col) == Tile.EXIT.value
            for d_row, d_col in _STEPS.values()
        )

    def press(self, key: Key) -> Outcome:
        """Apply one key press.

        ESCAPE quits. Once the exit is open, any direction key wins while the
        player stands next to it. A step into anything but a wall, an enemy or
        the bullet is counted; while the exit is closed a step towards it is
        counted but the player stays put. Facing an enemy after the step ends
        the game.
        """
        if key is Key.ESCAPE:
            return Outcome.QUIT
        if self.over:
            return Outcome.IGNORED
        position = self.player_position()
        if position is None:
            return Outcome.IGNORED
        row, col = position
        if self.exit_open and self._next_to_exit(row, col):
            return Outcome.WON
        outcome = self._move(row, col, key)
        self._check_enemy(key)
        return outcome

    def _move(self, row: int, col: int, key: Key) -> Outcome:
        d_row, d_col = _STEPS[key]
        target_row, target_col = row + d_row, col + d_col
        target = self._at(target_row, target_col)
        if target is None or target in _BLOCKERS:
            return Outcome.IGNORED
        if self.exit_open or target != Tile.EXIT.value:
            self.grid[row][col] = Tile.EMPTY.value
            self.grid[target_row][target_col] = Tile.PLAYER.value
        self.moves += 1
        return Outcome.MOVED

    def _check_enemy(self, key: Key) -> None:
        position = self.player_position()
        if position is None:
            return
        d_row, d_col = _STEPS[key]
        if self._at(position[0] + d_row, position[1] + d_col) == Tile.ENEMY.value:
            self.over = True

    def tick(self) -> None:
        """Advance door, enemy and bullet by one frame of the main loop."""
        if self.over:
            return
        self._advance_door()
        self._advance_enemies()
        self._advance_bullet()

    def _advance_door(self) -> None:
        if self.door_frame == DOOR_OPEN_FRAME and find_tile(self.grid, Tile.EXIT) is not None:
            self.exit_open = True
        if self._counter % FRAME_INTERVAL == 0:
            self.coin_frame = (self.coin_frame + 1) % COIN_FRAMES
            if has_collectables(self.grid):
                self._counter = 0
            elif not self.exit_open:
                self.door_frame = (self.door_frame + 1) % DOOR_FRAMES
        self._counter += 1

    def _advance_enemies(self) -> None:
        if self._enemy_counter % ENEMY_INTERVAL == 0:
            self.enemy_frame = (self.enemy_frame + 1) % ENEMY_FRAMES
            self._enemy_counter = 0
        self._enemy_counter += 1

    def _advance_bullet(self) -> None:
        for row_index, row in enumerate(self.grid):
            for col_index, cell in enumerate(row):
                if cell == Tile.BULLET.value:
                    self._handle_bullet(row_index, col_index)
        bullet = self.bullet
        if bullet.counter % BULLET_INTERVAL == 0:
            bullet.frame = (bullet.frame + 1) % BULLET_FRAMES
            bullet.counter = 0
        bullet.counter += 1

    def _handle_bullet(self, row: int, col: int) -> None:
        bullet = self.bullet
        if bullet.frame == BULLET_FIRE_FRAME:
            left = self._at(row, col - 1) if col > 0 else None
            if left == Tile.EMPTY.value:
                self.grid[row][col] = Tile.EMPTY.value
                self.grid[row][col - 1] = Tile.BULLET.value
                bullet.frame = 0
            elif col > 0 and Tile.PLAYER.value in (left, self._at(row, col + 1)):
                self.over = True
            else:
                self._reset_bullet()
        bullet.position = (row, col)
        if bullet.origin is None:
            bullet.origin = (row, col)

    def _reset_bullet(self) -> None:
        bullet = self.bullet
        player = self.player_position() or (0, 0)
        if bullet.origin == player:
            self.over = True
            return
        if bullet.position is not None:
            self.grid[bullet.position[0]][bullet.position[1]] = Tile.EMPTY.value
        if bullet.origin is not None:
            self.grid[bullet.origin[0]][bullet.origin[1]] = Tile.BULLET.value
        bullet.frame = 0