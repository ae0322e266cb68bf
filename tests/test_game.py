import pytest

from solong.game import Game, Key, Outcome, find_tile

ROWS = [
    "111111",
    "1P0C01",
    "1000E1",
    "111111",
]


def test_find_tile_returns_first_match():
    assert find_tile(ROWS, "P") == (1, 1)
    assert find_tile(ROWS, "E") == (4, 2)


def test_find_tile_missing():
    assert find_tile(ROWS, "X") is None


def test_game_requires_player():
    with pytest.raises(ValueError):
        Game(["111", "1E1", "111"])


def test_start_position_and_counter():
    game = Game(ROWS)
    assert (game.x, game.y) == (1, 1)
    assert game.moves == 0


def test_is_walkable():
    game = Game(ROWS)
    assert game.is_walkable(2, 1)
    assert not game.is_walkable(0, 0)
    assert not game.is_walkable(-5, 40)


def test_move_right_counts():
    game = Game(ROWS)
    assert game.press(Key.RIGHT) is Outcome.MOVED
    assert (game.x, game.y) == (2, 1)
    assert game.moves == 1


def test_wall_blocks_move():
    game = Game(ROWS)
    assert game.press(Key.UP) is Outcome.STAYED
    assert game.press(Key.LEFT) is Outcome.STAYED
    assert (game.x, game.y) == (1, 1)
    assert game.moves == 0


def test_collecting_opens_door():
    game = Game(ROWS)
    assert not game.door_open()
    game.press(Key.RIGHT)
    game.press(Key.RIGHT)
    assert game.tile(3, 1) == "0"
    assert game.door_open()
    assert game.moves == 2


def test_exit_closed_allows_standing_on_it():
    game = Game(ROWS)
    game.press(Key.DOWN)
    game.press(Key.RIGHT)
    game.press(Key.RIGHT)
    assert game.press(Key.RIGHT) is Outcome.MOVED
    assert (game.x, game.y) == (4, 2)
    assert game.tile(4, 2) == "E"


def test_win_after_collecting():
    game = Game(ROWS)
    game.press(Key.RIGHT)
    game.press(Key.RIGHT)
    game.press(Key.RIGHT)
    moves_before = game.moves
    assert game.press(Key.DOWN) is Outcome.WON
    assert game.moves == moves_before


def test_escape_quits():
    game = Game(ROWS)
    assert game.press(Key.ESCAPE) is Outcome.QUIT
    assert game.moves == 0


def test_rows_does_not_alias_input():
    rows = list(ROWS)
    game = Game(rows)
    game.press(Key.RIGHT)
    game.press(Key.RIGHT)
    assert rows == ROWS
    assert game.rows[1] == "1P0001"