"""Game state and player movement on a validated map."""

from __future__ import annotations

from enum import Enum

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"


class Key(Enum):
    """Keys the game reacts to."""

    LEFT = "a"
    UP = "w"
    RIGHT = "d"
    DOWN = "s"
    ESCAPE = "escape"


class Outcome(Enum):
    """What a key press led to."""

    STAYED = "stayed"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


_STEPS = {
    Key.LEFT: (-1, 0),
    Key.UP: (0, -1),
    Key.RIGHT: (1, 0),
    Key.DOWN: (0, 1),
}


def find_tile(rows: list[str], tile: str) -> tuple[int, int] | None:
    """Return the ``(x, y)`` of the first *tile* in row-major order, or None."""
    for y, row in enumerate(rows):
        x = row.find(tile)
        if x >= 0:
            return x, y
    return None


class Game:
    """A player walking a map, collecting items and heading for the exit."""

    def __init__(self, rows: list[str]) -> None:
        start = find_tile(rows, PLAYER)
        if start is None:
            raise ValueError("map has no player start")
        self.grid = [list(row) for row in rows]
        self.x, self.y = start
        self.moves = 0

    @property
    def rows(self) -> list[str]:
        """The current map, one string per row."""
        return ["".join(row) for row in self.grid]

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def exit_position(self) -> tuple[int, int] | None:
        return find_tile(self.rows, EXIT)

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column *x*, row *y*; outside the map is a wall."""
        if 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y]):
            return self.grid[y][x]
        return WALL

    def is_walkable(self, x: int, y: int) -> bool:
        """Return True unless the tile at *x*, *y* is a wall."""
        return self.tile(x, y) != WALL

    def door_open(self) -> bool:
        """Return True once every collectible has been picked up."""
        return not any(COLLECTIBLE in row for row in self.grid)

    def press(self, key: Key) -> Outcome:
        """Apply a key press and report what happened."""
        if key is Key.ESCAPE:
            return Outcome.QUIT
        old = (self.x, self.y)
        step = _STEPS.get(key)
        if step is not None:
            nx, ny = self.x + step[0], self.y + step[1]
            if self.is_walkable(nx, ny):
                self.x, self.y = nx, ny
        if self.door_open() and self.tile(self.x, self.y) == EXIT:
            return Outcome.WON
        if self.tile(self.x, self.y) == COLLECTIBLE:
            self.grid[self.y][self.x] = FLOOR
        if (self.x, self.y) != old:
            self.moves += 1
            return Outcome.MOVED
        return Outcome.STAYED