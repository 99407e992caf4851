# solong

A small tile-based game. You walk a character around a walled map, pick up
every coin, and once the last coin is gone the exit door animates open. Step
into the open door to win. The bonus mode adds enemy troops, a bullet that
flies leftwards across the map, and a move counter drawn in the window.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used for the window, the images and the
keyboard.

## Playing

```
solong [--bonus] [--textures DIR] MAP.ber
```

- `--bonus` plays the bonus rules (troops, bullet, on-screen move counter).
- `--textures DIR` reads the images from `DIR` instead of `textures` in the
  current directory.

Keys:

- `W`, `A`, `S`, `D`: move up, left, down, right
- `Esc`, or closing the window: quit

In the standard mode the move count is printed to standard output after every
move. In the bonus mode it is drawn in a box at the top left of the window.

In the bonus mode the game is lost when the player faces a troop after a
move, or when the bullet reaches the player. The window then shows the game
over picture until you press `Esc` or close it.

Any problem with the arguments or the map prints `Error` and a short reason on
standard error, and the command exits with status 1. Otherwise it exits with 0.

### Textures

The images are looked up under the texture directory:

| File                                   | Used for                      |
|----------------------------------------|-------------------------------|
| `Background.xpm`, `wall.xpm`           | floor and walls               |
| `character/CharacterRight.xpm`         | player before the first move  |
| `character/CharacterMoreRight.xpm`     | player after moving left      |
| `character/CharacterLeft.xpm`          | player after moving right     |
| `character/CharacterCenter.xpm`        | player after moving up / down |
| `coins/c1.xpm` … `coins/c8.xpm`        | coin animation                |
| `door/door1.xpm` … `door/door5.xpm`    | exit door animation           |
| `enemy/enemy1.xpm` … `enemy/enemy8.xpm`| troops (bonus)                |
| `bullet/bullet7.xpm` … `bullet1.xpm`   | bullet animation (bonus)      |
| `gameover.xpm`                         | game over picture (bonus)     |

An image that cannot be loaded is simply not drawn. `solong.display.texture_paths`
returns these paths as a `TextureSet`.

## Map files

A map is a plain text file whose name ends in `.ber`. Every row must be the
same width, and the whole border must be wall. The characters are:

| Char | Meaning                    |
|------|----------------------------|
| `1`  | wall                       |
| `0`  | floor                      |
| `P`  | player start (exactly one) |
| `E`  | exit (exactly one)         |
| `C`  | coin (at least one)        |
| `T`  | troop (bonus mode only)    |
| `B`  | bullet (bonus mode only)   |

The player must be able to reach every coin and the exit without walking
through the exit. In the standard mode any other character rejects the map.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

Loading, checking and the game rules do not need a window:

```python
from solong.maps import load_map, validate_map
from solong.paths import check_reachable
from solong.game import Game, Key

grid = load_map("level.ber")          # list of rows, newlines removed
validate_map(grid, bonus=False)       # returns (height, width)
check_reachable(grid)

game = Game(grid)
outcome = game.press(Key.RIGHT)       # Outcome.MOVED, IGNORED, WON or QUIT
game.tick()                           # advance the coin and door animations
print(game.player_position(), game.moves, game.exit_open)
```

- `solong.maps`: `load_map`, `validate_filename`, `validate_map`,
  `count_features`, and `MapError`, raised for any unacceptable file name or map.
- `solong.paths`: `flood_fill` and `check_reachable`.
- `solong.grid`: the `Tile` enum, `find_tile`, `has_collectables`, `grid_size`.
- `solong.lines`: `iter_lines` and `read_lines`, which split on `\n` and keep it.
- `solong.game`: `Game`, `Key`, `Outcome`.
- `solong.bonus`: `BonusGame` has the same `press`, `tick` and
  `player_position` methods, plus `over`, `enemy_frame` and a `Bullet`.
- `solong.display`: `Renderer`, `run` and `main`, the pieces behind the
  `solong` command.

The exit only opens after all coins are taken and enough `tick()` calls have
run the door animation to its last frame, so a script driving `Game` directly
has to call `tick()` as the window loop does.

## Running the tests

```
pip install .[test]
pytest
```