import pytest

from solong.game import DOOR_OPEN_FRAME, Game, Key, Outcome


MAP = ["111111", "1PC0E1", "111111"]


def rows(game):
    return ["".join(row) for row in game.grid]


def open_exit(game, limit=20000):
    ticks = 0
    while not game.exit_open and ticks < limit:
        game.tick()
        ticks += 1
    return ticks


def test_player_position_found():
    game = Game(MAP)
    assert game.player_position() == (1, 1)


def test_player_position_missing():
    game = Game(["1111", "1001", "1111"])
    assert game.player_position() is None


def test_escape_quits():
    game = Game(MAP)
    assert game.press(Key.ESCAPE) is Outcome.QUIT
    assert rows(game) == MAP


def test_move_right_collects():
    game = Game(MAP)
    assert game.press(Key.RIGHT) is Outcome.MOVED
    assert game.player_position() == (1, 2)
    assert rows(game)[1] == "10P0E1"
    assert game.moves == 1


def test_wall_blocks_without_counting():
    game = Game(MAP)
    for key in (Key.LEFT, Key.UP, Key.DOWN):
        assert game.press(key) is Outcome.IGNORED
    assert game.moves == 0
    assert rows(game) == MAP


def test_closed_exit_counts_but_does_not_move():
    game = Game(MAP)
    game.press(Key.RIGHT)
    game.press(Key.RIGHT)
    position = game.player_position()
    assert game.press(Key.RIGHT) is Outcome.MOVED
    assert game.player_position() == position
    assert game.moves == 3
    assert "E" in rows(game)[1]


def test_vertical_moves():
    grid = ["1111", "1P01", "1C01", "1E01", "1111"]
    game = Game(grid)
    assert game.press(Key.DOWN) is Outcome.MOVED
    assert game.player_position() == (2, 1)
    assert game.press(Key.UP) is Outcome.MOVED
    assert game.player_position() == (1, 1)
    assert game.moves == 2


def test_left_blocked_by_enemy_and_bullet():
    for blocker in ("T", "B"):
        game = Game(["11111", f"1{blocker}P01", "11111"])
        assert game.press(Key.LEFT) is Outcome.IGNORED
        assert game.player_position() == (1, 2)


def test_exit_stays_closed_while_collectables_remain():
    game = Game(MAP)
    for _ in range(5000):
        game.tick()
    assert game.exit_open is False
    assert game.door_frame == 0
    assert 0 <= game.coin_frame < 8


def test_coin_animation_advances_on_first_tick():
    game = Game(MAP)
    game.tick()
    assert game.coin_frame == 1


def test_exit_opens_after_door_animation():
    game = Game(MAP)
    game.press(Key.RIGHT)
    ticks = open_exit(game)
    assert game.exit_open is True
    assert game.door_frame == DOOR_OPEN_FRAME
    assert ticks == 3002


def test_door_frame_stops_once_open():
    game = Game(MAP)
    game.press(Key.RIGHT)
    open_exit(game)
    for _ in range(3000):
        game.tick()
    assert game.door_frame == DOOR_OPEN_FRAME


def test_reaching_open_exit_wins():
    game = Game(MAP)
    game.press(Key.RIGHT)
    game.press(Key.RIGHT)
    open_exit(game)
    moves = game.moves
    assert game.press(Key.RIGHT) is Outcome.WON
    assert game.moves == moves


def test_moves_freely_once_open():
    game = Game(MAP)
    game.press(Key.RIGHT)
    open_exit(game)
    assert game.press(Key.RIGHT) is Outcome.MOVED
    assert game.player_position() == (1, 3)


@pytest.mark.parametrize("key", [Key.UP, Key.LEFT, Key.DOWN, Key.RIGHT])
def test_single_player_invariant(key):
    game = Game(["11111", "10001", "10P01", "1CE01", "11111"])
    game.press(key)
    assert sum(row.count("P") for row in rows(game)) == 1