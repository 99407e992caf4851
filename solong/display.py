"""Window, textures and the main loop that ties map, rules and drawing together."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pygame

from .bonus import BonusGame
from .game import Game, Key, Outcome
from .grid import Tile, grid_size
from .maps import MapError, load_map, validate_filename, validate_map
from .paths import check_reachable

TILE_SIZE = 64
WINDOW_TITLE = "So_Long"
STATUS_SIZE = (200, 30)
STATUS_BACKGROUND = (0x65, 0x43, 0x21)
STATUS_TEXT = (0xFF, 0xFF, 0xFF)

_KEYS = {
    pygame.K_w: Key.UP,
    pygame.K_a: Key.LEFT,
    pygame.K_s: Key.DOWN,
    pygame.K_d: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}


@dataclass(frozen=True)
class TextureSet:
    """Image files for every sprite the game draws."""

    background: Path
    wall: Path
    character: Path
    character_left: Path
    character_right: Path
    character_center: Path
    coins: Tuple[Path, ...]
    doors: Tuple[Path, ...]
    enemies: Tuple[Path, ...] = ()
    bullets: Tuple[Path, ...] = ()
    game_over: Optional[Path] = None


def texture_paths(root: Union[str, os.PathLike] = "textures", bonus: bool = False) -> TextureSet:
    """Return the texture files under ``root``; the bonus game adds enemies, bullets and game over."""
    base = Path(root)
    character = base / "character"
    coins = tuple(base / "coins" / f"c{number}.xpm" for number in range(1, 9))
    doors = tuple(base / "door" / f"door{number}.xpm" for number in range(1, 6))
    enemies: Tuple[Path, ...] = ()
    bullets: Tuple[Path, ...] = ()
    game_over = None
    if bonus:
        enemies = tuple(base / "enemy" / f"enemy{number}.xpm" for number in range(1, 9))
        bullets = tuple(base / "bullet" / f"bullet{number}.xpm" for number in range(7, 0, -1))
        game_over = base / "gameover.xpm"
    return TextureSet(
        background=base / "Background.xpm",
        wall=base / "wall.xpm",
        character=character / "CharacterRight.xpm",
        character_left=character / "CharacterMoreRight.xpm",
        character_right=character / "CharacterLeft.xpm",
        character_center=character / "CharacterCenter.xpm",
        coins=coins,
        doors=doors,
        enemies=enemies,
        bullets=bullets,
        game_over=game_over,
    )


def move_count_text(count: int) -> str:
    """Return the label shown for the number of moves in the bonus game."""
    return f"Move count: {count}"


def _load_image(path: Optional[Path]) -> Optional[pygame.Surface]:
    if path is None:
        return None
    try:
        return pygame.image.load(os.fspath(path))
    except (pygame.error, OSError):
        return None


class Renderer:
    """Draws a game onto a surface, opening its own window when none is given.

    ``last_key`` chooses which way the player sprite faces.
    """

    def __init__(
        self,
        textures: TextureSet,
        rows: int,
        columns: int,
        *,
        bonus: bool = False,
        surface: Optional[pygame.Surface] = None,
    ) -> None:
        self.rows = rows
        self.columns = columns
        self.bonus = bonus
        self.last_key: Optional[Key] = None
        self._owns_display = surface is None
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode((TILE_SIZE * columns, TILE_SIZE * rows))
            pygame.display.set_caption(WINDOW_TITLE)
        self.surface = surface
        self._font: Optional[pygame.font.Font] = None
        self._single: Dict[str, Optional[pygame.Surface]] = {
            "background": _load_image(textures.background),
            "wall": _load_image(textures.wall),
            "character": _load_image(textures.character),
            "character_left": _load_image(textures.character_left),
            "character_right": _load_image(textures.character_right),
            "character_center": _load_image(textures.character_center),
            "game_over": _load_image(textures.game_over),
        }
        self._frames: Dict[str, List[Optional[pygame.Surface]]] = {
            "coins": [_load_image(path) for path in textures.coins],
            "doors": [_load_image(path) for path in textures.doors],
            "enemies": [_load_image(path) for path in textures.enemies],
            "bullets": [_load_image(path) for path in textures.bullets],
        }

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _blit(self, image: Optional[pygame.Surface], row: int, col: int) -> None:
        if image is not None:
            self.surface.blit(image, (col * TILE_SIZE, row * TILE_SIZE))

    def _frame(self, name: str, index: int) -> Optional[pygame.Surface]:
        frames = self._frames[name]
        if not frames:
            return None
        return frames[min(max(index, 0), len(frames) - 1)]

    def _player_image(self) -> Optional[pygame.Surface]:
        if self.last_key is Key.LEFT:
            return self._single["character_left"]
        if self.last_key is Key.RIGHT:
            return self._single["character_right"]
        if self.last_key in (Key.UP, Key.DOWN):
            return self._single["character_center"]
        return self._single["character"]

    def _tile_image(self, cell: str, game: Union[Game, BonusGame]) -> Optional[pygame.Surface]:
        if cell == Tile.WALL.value:
            return self._single["wall"]
        if cell == Tile.PLAYER.value:
            return self._player_image()
        if cell == Tile.COLLECTABLE.value:
            return self._frame("coins", game.coin_frame)
        if cell == Tile.EXIT.value:
            return self._frame("doors", game.door_frame)
        if isinstance(game, BonusGame):
            if cell == Tile.ENEMY.value:
                return self._frame("enemies", game.enemy_frame)
            if cell == Tile.BULLET.value:
                return self._frame("bullets", game.bullet.frame)
        return None

    def _draw_game_over(self) -> None:
        image = self._single["game_over"]
        if image is None:
            return
        width, height = image.get_size()
        center_x = self.columns * TILE_SIZE // 2 - width // 2
        center_y = self.rows * TILE_SIZE // 2 - height // 2
        self.surface.blit(image, (center_x, center_y))

    def _draw_status(self, moves: int) -> None:
        self.surface.fill(STATUS_BACKGROUND, pygame.Rect((0, 0), STATUS_SIZE))
        if not pygame.font.get_init():
            pygame.font.init()
        if self._font is None:
            self._font = pygame.font.Font(None, 20)
        text = self._font.render(move_count_text(moves), True, STATUS_TEXT)
        self.surface.blit(text, (10, 8))

    def draw(self, game: Union[Game, BonusGame]) -> None:
        """Draw the whole map, or the game-over picture once a bonus game is lost."""
        self.surface.fill((0, 0, 0))
        if isinstance(game, BonusGame) and game.over:
            self._draw_game_over()
        else:
            background = self._single["background"]
            for row_index, row in enumerate(game.grid):
                for col_index, cell in enumerate(row):
                    self._blit(background, row_index, col_index)
                    self._blit(self._tile_image(cell, game), row_index, col_index)
            if self.bonus:
                self._draw_status(game.moves)
        if self._owns_display:
            pygame.display.flip()

    def close(self) -> None:
        """Release the images and, if this renderer opened it, the window."""
        self._single.clear()
        self._frames.clear()
        if self._owns_display:
            self._owns_display = False
            pygame.display.quit()
            pygame.quit()


def run(
    path: Union[str, os.PathLike],
    bonus: bool = False,
    texture_root: Union[str, os.PathLike] = "textures",
) -> Outcome:
    """Load and check the map at ``path``, then play it in a window until it ends.

    Raises MapError if the map is not acceptable. Returns WON or QUIT.
    """
    name = validate_filename(path)
    grid = load_map(name)
    validate_map(grid, bonus)
    check_reachable(grid)
    game: Union[Game, BonusGame] = BonusGame(grid) if bonus else Game(grid)
    rows, columns = grid_size(game.grid)
    with Renderer(texture_paths(texture_root, bonus), rows, columns, bonus=bonus) as renderer:
        renderer.draw(game)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return Outcome.QUIT
                if event.type != pygame.KEYDOWN:
                    continue
                key = _KEYS.get(event.key)
                if key is None:
                    continue
                moves_before = game.moves
                outcome = game.press(key)
                if key is not Key.ESCAPE:
                    renderer.last_key = key
                if outcome in (Outcome.WON, Outcome.QUIT):
                    return outcome
                if not bonus and game.moves != moves_before:
                    print(game.moves, flush=True)
            game.tick()
            renderer.draw(game)


def _parse(args: Sequence[str]) -> Tuple[str, bool, str]:
    bonus = False
    texture_root = "textures"
    positional: List[str] = []
    items = iter(args)
    for arg in items:
        if arg == "--bonus":
            bonus = True
        elif arg == "--textures":
            texture_root = next(items, "")
            if not texture_root:
                raise MapError("--textures needs a directory")
        else:
            positional.append(arg)
    if len(positional) != 1:
        raise MapError("expected exactly one map file")
    return positional[0], bonus, texture_root


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: ``solong [--bonus] [--textures DIR] MAP.ber``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path, bonus, texture_root = _parse(args)
        run(path, bonus, texture_root)
    except MapError as exc:
        print("Error", file=sys.stderr)
        print(exc.detail, file=sys.stderr)
        return 1
    return 0