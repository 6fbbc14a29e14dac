import os

# Headless pygame for tests that touch surfaces or fonts
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from classic_snake.config import Config
from classic_snake.engine import TickEngine


@pytest.fixture
def cfg():
    return Config(seed=7, grid_w=10, grid_h=10)


@pytest.fixture
def engine(cfg):
    eng = TickEngine(cfg, rng=np.random.default_rng(7))
    eng.start()
    return eng


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 24)
    pygame.font.quit()
