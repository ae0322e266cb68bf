"""Checks that a map is playable."""

from __future__ import annotations

import os
from collections import deque

from .mapfile import MapFileError, read_map

REQUIRED_TILES = "01CEP"
WALL = "1"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
_MARK = "2"
_BLOCKING = (WALL, _MARK, PLAYER)


class MapError(ValueError):
    """Raised when a map fails validation."""


def has_required_tiles(rows: list[str]) -> bool:
    """Return True if every one of the tiles ``0 1 C E P`` appears in the map."""
    return all(any(tile in row for row in rows) for tile in REQUIRED_TILES)


def rectangle_width(rows: list[str]) -> int | None:
    """Return the common width of the rows, or None if they differ."""
    if not rows:
        return None
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        return None
    return width


def is_enclosed(rows: list[str]) -> bool:
    """Return True if the (rectangular) map is surrounded by walls."""
    if len(rows) < 2:
        return False
    if any(tile != WALL for tile in rows[0]):
        return False
    for row in rows[1:-1]:
        if not row or row[0] != WALL or row[-1] != WALL:
            return False
    return all(tile == WALL for tile in rows[-1])


def _tile(grid: list[list[str]], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return WALL


def _neighbours(x: int, y: int) -> list[tuple[int, int]]:
    return [(x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)]


def is_reachable(rows: list[str], x: int, y: int) -> bool:
    """Return True if the player can walk to the tile at column *x*, row *y*.

    The search spreads from the first open neighbour of the target (right,
    left, down, up); a target whose only open neighbour is the player itself
    is therefore reported unreachable.
    """
    grid = [list(row) for row in rows]
    frontier = deque(
        (cx, cy)
        for cy, row in enumerate(grid)
        for cx, tile in enumerate(row)
        if tile == _MARK
    )
    for nx, ny in _neighbours(x, y):
        if _tile(grid, nx, ny) not in _BLOCKING:
            grid[ny][nx] = _MARK
            frontier.append((nx, ny))
            break
    if not frontier:
        return False
    marked = list(frontier)
    while frontier:
        cx, cy = frontier.popleft()
        for nx, ny in _neighbours(cx, cy):
            if _tile(grid, nx, ny) not in _BLOCKING:
                grid[ny][nx] = _MARK
                frontier.append((nx, ny))
                marked.append((nx, ny))
    return any(
        _tile(grid, nx, ny) == PLAYER
        for cx, cy in marked
        for nx, ny in _neighbours(cx, cy)
    )


def targets_reachable(rows: list[str]) -> bool:
    """Return True if every exit and collectible can be reached by the player."""
    return all(
        is_reachable(rows, x, y)
        for y, row in enumerate(rows)
        for x, tile in enumerate(row)
        if tile in (EXIT, COLLECTIBLE)
    )


def load_map(path: str | os.PathLike[str]) -> list[str]:
    """Read and validate a map file, returning its rows."""
    try:
        rows = read_map(path)
    except MapFileError as exc:
        raise MapError(f"wrong input: {exc}") from exc
    if not has_required_tiles(rows):
        raise MapError("wrong input: missing required tiles")
    if not rectangle_width(rows):
        raise MapError("wrong input: map is not rectangular")
    if not is_enclosed(rows):
        raise MapError("wrong input: map is not enclosed by walls")
    if not targets_reachable(rows):
        raise MapError("wrong input: exit or collectible unreachable")
    return rows