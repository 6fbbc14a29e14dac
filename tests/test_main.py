import pytest

from classic_snake.main import build_config, main, parse_args


def test_defaults():
    cfg = build_config(parse_args([]))
    assert (cfg.grid_w, cfg.grid_h) == (32, 32)
    assert cfg.move_every_ms == 120
    assert cfg.seed is None


def test_overrides():
    cfg = build_config(parse_args(["--grid", "12", "9", "--speed", "200", "--seed", "5"]))
    assert (cfg.grid_w, cfg.grid_h) == (12, 9)
    assert cfg.move_every_ms == 200
    assert cfg.min_move_ms == 45
    assert cfg.seed == 5


def test_slow_floor_follows_fast_start():
    cfg = build_config(parse_args(["--speed", "30"]))
    assert cfg.min_move_ms == 30


def test_bad_grid_exits_before_opening_a_window():
    with pytest.raises(SystemExit):
        main(["--grid", "3", "3"])
