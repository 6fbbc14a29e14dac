# controls.py
import logging
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .engine import Phase, TickEngine

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

PAUSE_KEYS = (pygame.K_SPACE, pygame.K_p)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def key_direction(key: int) -> Optional[Tuple[int, int]]:
    return KEY_DIRECTIONS.get(key)


def handle_event(engine: TickEngine, event: pygame.event.Event) -> bool:
    """Apply one event to the engine. Return False to quit."""
    if event.type == pygame.QUIT:
        return False

    # Auto-pause when the window loses focus
    if event.type == pygame.WINDOWFOCUSLOST:
        if engine.suspend():
            logger.info("Window lost focus, game paused")
        return True

    if event.type != pygame.KEYDOWN:
        return True

    if event.key == pygame.K_ESCAPE:
        return False

    cand = key_direction(event.key)
    if cand is not None:
        # After game over only restart/start keys do anything
        if engine.enqueue_direction(cand) and engine.phase is Phase.IDLE:
            engine.start()
    elif event.key in PAUSE_KEYS:
        engine.pause()
    elif event.key in START_KEYS:
        if engine.phase is Phase.TERMINAL:
            engine.restart()
        engine.start()
    elif event.key == pygame.K_r:
        engine.restart()
    return True


def handle_input(engine: TickEngine) -> bool:
    """Drain the pygame event queue. Return False to quit."""
    for event in pygame.event.get():
        if not handle_event(engine, event):
            return False
    return True
