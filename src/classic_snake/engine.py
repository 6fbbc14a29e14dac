# engine.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import CFG, Config, RIGHT

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    TERMINAL = "terminal"


class Collision(Enum):
    WALL = "wall"
    SELF = "self"


class TickResult(Enum):
    """Outcome of a single call to TickEngine.advance()."""
    SKIPPED = "skipped"    # engine was not running
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"

    @property
    def is_terminal(self) -> bool:
        return self in (TickResult.HIT_WALL, TickResult.HIT_SELF)


# ---------- Helpers ----------
def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def spawn_food(snake: List[Cell], grid_w: int, grid_h: int,
               rng: np.random.Generator) -> Optional[Cell]:
    """
    Pick a uniformly random cell not covered by the snake.
    Returns None when the snake fills the whole grid.
    """
    free = np.ones((grid_h, grid_w), dtype=bool)
    for x, y in snake:
        free[y, x] = False
    ys, xs = np.nonzero(free)
    if xs.size == 0:
        return None
    i = int(rng.integers(xs.size))
    return (int(xs[i]), int(ys[i]))


def speed_for_score(score: int, cfg: Config = CFG) -> int:
    """Tick interval (ms) for a given score: one step faster every N foods, floored."""
    steps = score // cfg.foods_per_speedup
    return max(cfg.min_move_ms, cfg.move_every_ms - steps * cfg.speedup_step_ms)


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Tuple[int, int]
    pending: Tuple[int, int]
    food: Optional[Cell]
    score: int
    speed_ms: int                  # current step interval
    phase: Phase = Phase.IDLE
    collision: Optional[Collision] = None


def new_game_state(cfg: Config, rng: np.random.Generator) -> GameState:
    cx, cy = cfg.grid_w // 2, cfg.grid_h // 2
    snake = [(cx - i, cy) for i in range(cfg.initial_length)]
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=spawn_food(snake, cfg.grid_w, cfg.grid_h, rng),
        score=0,
        speed_ms=speed_for_score(0, cfg),
    )


# ---------- Engine ----------
class TickEngine:
    """
    Owns one game's state and advances it one grid step per tick.

    Mutators: advance(), enqueue_direction(), start(), pause(), suspend()
    and restart(). Everything else is read-only.
    """

    def __init__(self, cfg: Optional[Config] = None,
                 rng: Optional[np.random.Generator] = None):
        self.cfg = cfg or CFG
        self.rng = rng if rng is not None else np.random.default_rng(self.cfg.seed)
        self.state = new_game_state(self.cfg, self.rng)

    # ----- read-only views -----
    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def interval_ms(self) -> int:
        return self.state.speed_ms

    @property
    def snake(self) -> List[Cell]:
        return self.state.snake

    @property
    def head(self) -> Cell:
        return self.state.snake[0]

    @property
    def food(self) -> Optional[Cell]:
        return self.state.food

    @property
    def score(self) -> int:
        return self.state.score

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cfg.grid_w and 0 <= y < self.cfg.grid_h

    # ----- commands -----
    def enqueue_direction(self, direction: Tuple[int, int]) -> bool:
        """Queue a turn for the next tick. Reversals and post-game-over input are dropped."""
        if self.state.phase is Phase.TERMINAL:
            return False
        if is_opposite(direction, self.state.direction):
            return False
        self.state.pending = direction
        return True

    def start(self) -> bool:
        if self.state.phase is not Phase.IDLE:
            return False
        self._set_phase(Phase.RUNNING)
        return True

    def pause(self) -> bool:
        """Toggle between RUNNING and PAUSED."""
        if self.state.phase is Phase.RUNNING:
            self._set_phase(Phase.PAUSED)
        elif self.state.phase is Phase.PAUSED:
            self._set_phase(Phase.RUNNING)
        else:
            return False
        return True

    def suspend(self) -> bool:
        """Pause without ever resuming (window lost focus)."""
        if self.state.phase is not Phase.RUNNING:
            return False
        self._set_phase(Phase.PAUSED)
        return True

    def restart(self) -> None:
        self.state = new_game_state(self.cfg, self.rng)
        logger.info("Game reset")

    def advance(self) -> TickResult:
        """Advance the game by one tick. Only a RUNNING game moves."""
        state = self.state
        if state.phase is not Phase.RUNNING:
            return TickResult.SKIPPED

        # Commit direction once per tick
        if not is_opposite(state.pending, state.direction):
            state.direction = state.pending

        hx, hy = state.snake[0]
        dx, dy = state.direction
        new_head = (hx + dx, hy + dy)

        if not self.in_bounds(*new_head):
            return self._game_over(Collision.WALL)

        # The tail still counts: it only moves out after the head moves in
        if new_head in state.snake:
            return self._game_over(Collision.SELF)

        state.snake.insert(0, new_head)

        if new_head == state.food:
            state.score += 1
            state.food = spawn_food(state.snake, self.cfg.grid_w, self.cfg.grid_h, self.rng)
            speed = speed_for_score(state.score, self.cfg)
            if speed != state.speed_ms:
                logger.debug("Speed up at score %d: %d ms -> %d ms",
                             state.score, state.speed_ms, speed)
            state.speed_ms = speed
            if state.food is None:
                logger.info("Board full at score %d, no more food", state.score)
            return TickResult.ATE

        state.snake.pop()
        return TickResult.MOVED

    # ----- internals -----
    def _set_phase(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self.state.phase.value, phase.value)
        self.state.phase = phase

    def _game_over(self, collision: Collision) -> TickResult:
        self._set_phase(Phase.TERMINAL)
        self.state.collision = collision
        logger.info("Game over (%s collision), score %d", collision.value, self.state.score)
        if collision is Collision.WALL:
            return TickResult.HIT_WALL
        return TickResult.HIT_SELF
