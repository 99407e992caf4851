import pytest

from solong.maps import MapError
from solong.paths import check_reachable, flood_fill


OPEN_MAP = [
    "111111",
    "1P0C01",
    "10C0E1",
    "111111",
]


def test_flood_fill_covers_every_walkable_tile():
    filled = flood_fill(OPEN_MAP, (1, 1))
    for row in filled:
        assert set(row) <= {"1", "X"}


def test_flood_fill_keeps_walls_in_place():
    filled = flood_fill(OPEN_MAP, (1, 1))
    for original, result in zip(OPEN_MAP, filled):
        for before, after in zip(original, result):
            if before == "1":
                assert after == "1"


def test_flood_fill_leaves_input_unchanged():
    grid = list(OPEN_MAP)
    flood_fill(grid, (1, 1))
    assert grid == OPEN_MAP


def test_flood_fill_accepts_list_rows():
    grid = [list(row) for row in OPEN_MAP]
    assert flood_fill(grid, (1, 1)) == flood_fill(OPEN_MAP, (1, 1))


def test_flood_fill_stops_at_exit():
    grid = ["1111111", "1P0E0C1", "1111111"]
    filled = flood_fill(grid, (1, 1))
    assert filled[1] == "1XXX0C1"


def test_flood_fill_from_outside_changes_nothing():
    assert flood_fill(OPEN_MAP, (-1, 0)) == OPEN_MAP
    assert flood_fill(OPEN_MAP, (0, 99)) == OPEN_MAP


def test_flood_fill_from_wall_changes_nothing():
    assert flood_fill(OPEN_MAP, (0, 0)) == OPEN_MAP


def test_check_reachable_accepts_open_map():
    assert check_reachable(OPEN_MAP) is True


def test_check_reachable_rejects_walled_off_collectable():
    grid = ["1111111", "1P0E1C1", "1111111"]
    with pytest.raises(MapError):
        check_reachable(grid)


def test_check_reachable_rejects_collectable_behind_exit():
    grid = ["1111111", "1P0E0C1", "1111111"]
    with pytest.raises(MapError):
        check_reachable(grid)


def test_check_reachable_rejects_unreachable_exit():
    grid = ["111111", "1PC1E1", "111111"]
    with pytest.raises(MapError):
        check_reachable(grid)


def test_check_reachable_empty_grid():
    assert check_reachable([]) is False