import pygame
import pytest

from classic_snake.config import BG, HEAD, RIGHT, UP
from classic_snake.engine import Phase, TickEngine
from classic_snake.render import cell_rect, draw_frame, draw_game, draw_head


@pytest.fixture
def screen(cfg):
    return pygame.Surface((cfg.grid_w * 20, cfg.grid_h * 20))


def test_cell_rect():
    assert cell_rect(3, 2, 10) == pygame.Rect(30, 20, 10, 10)


def test_draw_game_paints_head_and_background(screen, font, cfg):
    engine = TickEngine(cfg)
    engine.state.food = None
    draw_game(screen, font, engine)
    hx, hy = engine.head
    # left edge, mid-height of the head cell: inside the rounded rect, clear of eyes
    assert screen.get_at((hx * 20 + 2, hy * 20 + 8))[:3] == HEAD
    assert screen.get_at((9 * 20 + 10, 9 * 20 + 10))[:3] == BG


def test_head_eyes_follow_direction():
    up = pygame.Surface((20, 20))
    right = pygame.Surface((20, 20))
    draw_head(up, 0, 0, UP)
    draw_head(right, 0, 0, RIGHT)
    # upper-left eye only exists when heading up
    assert up.get_at((6, 7))[:3] != HEAD
    assert right.get_at((6, 7))[:3] == HEAD


@pytest.mark.parametrize("phase", list(Phase))
def test_draw_frame_every_phase(screen, font, cfg, phase):
    engine = TickEngine(cfg)
    engine.state.phase = phase
    draw_frame(screen, font, engine)
