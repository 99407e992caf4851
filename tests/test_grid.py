import pytest

from solong.grid import Tile, find_tile, grid_size, has_collectables


@pytest.fixture
def sample():
    return [
        list("11111"),
        list("1PC01"),
        list("10CE1"),
        list("11111"),
    ]


def test_tile_matches_map_characters():
    assert [t.value for t in (Tile.WALL, Tile.EMPTY, Tile.PLAYER, Tile.EXIT)] == [
        "1",
        "0",
        "P",
        "E",
    ]
    assert Tile("C") is Tile.COLLECTABLE


def test_find_player(sample):
    assert find_tile(sample, Tile.PLAYER) == (1, 1)


def test_find_accepts_plain_character(sample):
    assert find_tile(sample, "E") == find_tile(sample, Tile.EXIT)
    assert find_tile(sample, "E") == (2, 3)


def test_find_returns_first_in_row_major_order(sample):
    row, col = find_tile(sample, Tile.COLLECTABLE)
    assert sample[row][col] == "C"
    assert (row, col) == (1, 2)


def test_find_missing_tile_is_none(sample):
    assert find_tile(sample, Tile.ENEMY) is None


def test_find_works_on_string_rows():
    rows = ["111", "1P1", "111"]
    assert find_tile(rows, Tile.PLAYER) == (1, 1)


def test_has_collectables_tracks_removal(sample):
    assert has_collectables(sample)
    for row in sample:
        for index, cell in enumerate(row):
            if cell == "C":
                row[index] = "0"
    assert not has_collectables(sample)


def test_grid_size(sample):
    assert grid_size(sample) == (len(sample), len(sample[0]))


def test_grid_size_uses_first_row():
    assert grid_size(["1111", "11"]) == (2, 4)


def test_grid_size_empty():
    assert grid_size([]) == (0, 0)