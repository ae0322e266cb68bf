"""Drawing the map with pygame and running the game loop."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from .game import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, Game, Key, Outcome
from .mapfile import MapFileError, check_map_path
from .validation import MapError, load_map

TILE_SIZE = 40
TITLE = "so_long"
USAGE = "./so_long mappe.ber"

_KEYMAP = {
    pygame.K_a: Key.LEFT,
    pygame.K_w: Key.UP,
    pygame.K_d: Key.RIGHT,
    pygame.K_s: Key.DOWN,
    pygame.K_ESCAPE: Key.ESCAPE,
}


@dataclass
class Textures:
    """The images used to draw each kind of tile."""

    wall: pygame.Surface
    floor: pygame.Surface
    player: pygame.Surface
    door: pygame.Surface
    collectible: pygame.Surface
    open_door: pygame.Surface
    king_door: pygame.Surface


_TEXTURE_FILES = {
    "wall": "wall.xpm",
    "floor": "floor.xpm",
    "player": "king.xpm",
    "door": "door.xpm",
    "collectible": "banana.xpm",
    "open_door": "open_door.xpm",
    "king_door": "king_door.xpm",
}


def load_textures(directory: str | os.PathLike[str]) -> Textures:
    """Load every tile image from *directory*; raise OSError if one fails."""
    images = {}
    for field, name in _TEXTURE_FILES.items():
        path = Path(directory) / name
        try:
            images[field] = pygame.image.load(os.fspath(path))
        except (OSError, pygame.error) as exc:
            raise OSError(f"cannot load texture {path}") from exc
    return Textures(**images)


class Screen:
    """An off-screen picture of the game, redrawn as the player moves."""

    def __init__(self, game: Game, textures: Textures) -> None:
        self.game = game
        self.textures = textures
        self.surface = pygame.Surface(
            (game.width * TILE_SIZE, game.height * TILE_SIZE)
        )

    def _put(self, image: pygame.Surface, x: int, y: int) -> None:
        self.surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))

    def _draw_open_door(self) -> None:
        if self.game.door_open():
            position = self.game.exit_position
            if position is not None:
                self._put(self.textures.open_door, *position)

    def draw_all(self) -> None:
        """Draw every tile of the map."""
        images = {
            FLOOR: self.textures.floor,
            COLLECTIBLE: self.textures.collectible,
            EXIT: self.textures.door,
            WALL: self.textures.wall,
            PLAYER: self.textures.player,
        }
        for y, row in enumerate(self.game.grid):
            for x, tile in enumerate(row):
                image = images.get(tile)
                if image is not None:
                    self._put(image, x, y)
        self._draw_open_door()

    def draw_step(self, old_x: int, old_y: int) -> None:
        """Redraw the tile the player left and the one it now stands on."""
        self._draw_open_door()
        t = self.textures
        old_image = t.door if self.game.tile(old_x, old_y) == EXIT else t.floor
        self._put(old_image, old_x, old_y)
        x, y = self.game.x, self.game.y
        new_image = t.king_door if self.game.tile(x, y) == EXIT else t.player
        self._put(new_image, x, y)


def run(path: str | os.PathLike[str], textures_dir: str | os.PathLike[str] = "textures") -> Outcome:
    """Open a window on the map at *path* and play until the game ends."""
    game = Game(load_map(path))
    pygame.init()
    try:
        window = pygame.display.set_mode(
            (game.width * TILE_SIZE, game.height * TILE_SIZE)
        )
        pygame.display.set_caption(TITLE)
        screen = Screen(game, load_textures(textures_dir))
        screen.draw_all()
        while True:
            window.blit(screen.surface, (0, 0))
            pygame.display.flip()
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return Outcome.QUIT
            if event.type != pygame.KEYDOWN or event.key not in _KEYMAP:
                continue
            old = (game.x, game.y)
            outcome = game.press(_KEYMAP[event.key])
            if outcome in (Outcome.QUIT, Outcome.WON):
                return outcome
            screen.draw_step(*old)
            if outcome is Outcome.MOVED:
                print(game.moves, flush=True)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``so_long map.ber``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 0
    try:
        check_map_path(args[0])
        load_map(args[0])
    except MapFileError as exc:
        print(exc, end="")
        return 0
    except MapError:
        print("PARSING:\nwrong input", end="")
        return 0
    try:
        run(args[0])
    except OSError as exc:
        print(exc, file=sys.stderr)
    return 0