# solong

A small top-down puzzle game played on a grid map. Walk the king around,
pick up every banana, and once the last one is gone the door opens. Step
onto the open door to win. Every move is counted and printed to standard
output.

## Installing

    pip install .

The game window is drawn with pygame.

## Playing

    solong path/to/level.ber

Controls:

| Key    | Action      |
|--------|-------------|
| W      | move up     |
| A      | move left   |
| S      | move down   |
| D      | move right  |
| Escape | quit        |

Closing the window also quits. A move into a wall leaves the king where he
is and is not counted. The king may stand on the door before it is open.
The game only ends in a win when every banana has been collected.

The textures are loaded from a `textures/` directory relative to where the
game is started: `wall.xpm`, `floor.xpm`, `king.xpm`, `door.xpm`,
`banana.xpm`, `open_door.xpm` and `king_door.xpm`. If one of them cannot be
loaded, the error is printed to standard error and the game stops.

With no map argument, or with more than one, the command prints
`./so_long mappe.ber` to standard error and exits.

## Map files

A map is a plain-text file whose name ends in `.ber`. Each line is one row
of tiles:

| Char | Tile              |
|------|-------------------|
| `1`  | wall              |
| `0`  | floor             |
| `P`  | player start      |
| `C`  | banana to collect |
| `E`  | exit door         |

A map is accepted only if all of these hold:

- the file is not empty and does not end with a newline (blank lines
  inside the file are ignored);
- all five tile kinds appear at least once;
- every row has the same length;
- the border is made entirely of walls;
- the player can reach every banana and every exit.

Reachability is searched outward from the first open tile next to each
target, trying right, left, down and up in that order. A target whose only
open neighbour is the player's start tile is reported as unreachable.

Example:

    1111111
    1P0C0E1
    1111111

If the file name is wrong or the file cannot be opened, the command prints
`File error: name` or `File error: opening`. If the contents are wrong it
prints `PARSING:` followed by `wrong input`. In both cases it exits without
opening a window.

## Using it as a library

- `solong.mapfile.check_map_path(path)` checks the `.ber` suffix and that
  the file can be opened, raising `MapFileError` otherwise.
- `solong.mapfile.read_map(path)` returns the rows of a map file.
- `solong.mapfile.iter_lines(stream)` yields the lines of a text or binary
  stream, each keeping its newline.
- `solong.validation.load_map(path)` reads and checks a map, returning its
  rows or raising `MapError`. The individual checks are
  `has_required_tiles`, `rectangle_width`, `is_enclosed`, `is_reachable`
  and `targets_reachable`.
- `solong.game.Game(rows)` holds the play state: the grid, the player's
  `x` and `y`, and the `moves` count. `Game.press(key)` takes a `Key`
  (`LEFT`, `UP`, `RIGHT`, `DOWN`, `ESCAPE`) and returns an `Outcome`
  (`STAYED`, `MOVED`, `WON`, `QUIT`). `Game.door_open()` tells whether
  every banana has been collected.
- `solong.display.load_textures(directory)` loads the tile images into a
  `Textures` record. `Screen(game, textures)` draws the game onto an
  off-screen surface.
- `solong.display.run(path, textures_dir="textures")` opens the window and
  plays a map until the player wins or quits, returning the `Outcome`.

## Running the tests

    pip install .[test]
    pytest