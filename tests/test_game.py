import io
import sys

import pytest

from cadetkit.game import Game, GameOver, Key, main
from cadetkit.game_map import parse_map

LEVEL = "111111\n1P0C01\n100001\n1E0001\n111111\n"


@pytest.fixture
def game():
    return Game(parse_map(LEVEL))


def test_initial_state(game):
    assert game.position == (1, 1)
    assert (game.coins, game.total_coins, game.moves) == (1, 1, 0)


def test_wall_blocks_movement(game):
    assert game.handle_key(Key.UP) is False
    assert game.handle_key(Key.LEFT) is False
    assert game.position == (1, 1)
    assert game.moves == 0


def test_raw_key_codes_move(game):
    assert game.handle_key(2) is True
    assert game.position == (2, 1)
    assert game.handle_key(1) is True
    assert game.position == (2, 2)
    assert game.handle_key(13) is True
    assert game.handle_key(0) is True
    assert game.position == (1, 1)
    assert game.moves == 4


def test_unknown_key_is_ignored(game):
    assert game.handle_key(99) is False
    assert game.position == (1, 1)


def test_collecting_a_coin(game):
    game.handle_key(Key.RIGHT)
    game.handle_key(Key.RIGHT)
    assert game.position == (3, 1)
    assert game.coins == 0
    assert game.render().splitlines()[1] == "100P01"


def test_exit_with_coins_left_does_not_end(game):
    game.handle_key(Key.DOWN)
    game.handle_key(Key.DOWN)
    assert game.position == (1, 3)
    assert game.render().splitlines()[3] == "1P0001"
    game.handle_key(Key.RIGHT)
    assert game.render().splitlines()[3] == "1EP001"


def test_exit_after_all_coins_wins(game):
    for key in (Key.RIGHT, Key.RIGHT, Key.DOWN, Key.DOWN, Key.LEFT):
        assert game.handle_key(key) is True
    with pytest.raises(GameOver) as info:
        game.handle_key(Key.LEFT)
    assert info.value.won is True
    assert info.value.moves == 6


def test_escape_quits(game):
    with pytest.raises(GameOver) as info:
        game.handle_key(Key.ESC)
    assert info.value.won is False


def test_move_must_be_one_step(game):
    with pytest.raises(ValueError):
        game.move(2, 0)


def test_render_initial(game):
    assert game.render() == LEVEL.rstrip("\n")


def _write(tmp_path, text):
    path = tmp_path / "level.ber"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_main_needs_one_argument():
    assert main([]) == 1
    assert main(["a", "b"]) == 1


def test_main_invalid_character(tmp_path, capsys):
    assert main([_write(tmp_path, "111\n1Z1\n111\n")]) == 1
    assert "Invalid Map Character" in capsys.readouterr().out


def test_main_unreachable_coin(tmp_path, capsys):
    assert main([_write(tmp_path, "1111111\n1PE1C01\n1111111\n")]) == 1
    out = capsys.readouterr().out
    assert "Coins found = 0/1" in out
    assert "Something went wrong!" in out


def test_main_open_wall(tmp_path, capsys):
    assert main([_write(tmp_path, "11111\n1PCE0\n11111\n")]) == 1
    assert "Something went wrong!" in capsys.readouterr().out


def test_main_plays_to_the_exit(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("d\nd\ns\ns\na\na\n"))
    assert main([_write(tmp_path, LEVEL)]) == 0
    out = capsys.readouterr().out
    assert "Coins found = 1/1\nExits found = 1/1\nPlayers found = 1/1" in out
    assert "coins = 1/1" in out
    assert "You escaped in 6 moves" in out


def test_main_quit(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("d\nq\nd\n"))
    assert main([_write(tmp_path, LEVEL)]) == 0
    out = capsys.readouterr().out
    assert "moves = 1" in out
    assert "moves = 2" not in out