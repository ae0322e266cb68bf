import pytest

from solong.validation import (
    MapError,
    has_required_tiles,
    is_enclosed,
    is_reachable,
    load_map,
    rectangle_width,
    targets_reachable,
)

GOOD = ["1111111", "1P0C0E1", "1111111"]


def test_has_required_tiles():
    assert has_required_tiles(GOOD)
    assert not has_required_tiles(["11111", "1P0E1", "11111"])


def test_rectangle_width():
    assert rectangle_width(GOOD) == len(GOOD[0])
    assert rectangle_width(["111", "1111"]) is None


def test_is_enclosed():
    assert is_enclosed(GOOD)
    assert not is_enclosed(["1111111", "1P0C0E0", "1111111"])
    assert not is_enclosed(["1111011", "1P0C0E1", "1111111"])
    assert not is_enclosed(["1111111", "1P0C0E1", "1110111"])


def test_is_reachable_open_path():
    assert is_reachable(GOOD, 5, 1)
    assert is_reachable(GOOD, 3, 1)


def test_is_reachable_blocked_by_wall():
    rows = ["1111111", "1P01CE1", "1111111"]
    assert not is_reachable(rows, 4, 1)
    assert not is_reachable(rows, 5, 1)


def test_target_with_only_player_as_neighbour_is_unreachable():
    rows = ["11111", "10PE1", "1C111", "11111"]
    assert not is_reachable(rows, 3, 1)


def test_is_reachable_does_not_change_rows():
    rows = list(GOOD)
    is_reachable(rows, 5, 1)
    assert rows == GOOD


def test_targets_reachable():
    assert targets_reachable(GOOD)
    assert not targets_reachable(["1111111", "1P01CE1", "1111111"])


def _write(tmp_path, text):
    path = tmp_path / "map.ber"
    path.write_text(text, encoding="latin-1", newline="")
    return path


def test_load_map_valid(tmp_path):
    assert load_map(_write(tmp_path, "\n".join(GOOD))) == GOOD


@pytest.mark.parametrize(
    "text",
    [
        "1111111\n1P0C0E1\n1111111\n",
        "11111\n1P0E1\n11111",
        "1111111\n1P0C0E1\n111111",
        "1111111\n1P0C0E0\n1111111",
        "1111111\n1P01CE1\n1111111",
    ],
)
def test_load_map_rejects(tmp_path, text):
    with pytest.raises(MapError, match="wrong input"):
        load_map(_write(tmp_path, text))