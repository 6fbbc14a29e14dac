from dataclasses import dataclass

# ----- Window & grid -----
WIDTH, HEIGHT = 640, 640
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE
FPS = 60

# ----- Colors -----
BG         = (2, 4, 10)
BODY       = (67, 176, 71)
HEAD       = (47, 163, 58)
SHADE      = (55, 150, 60)
EYE        = (255, 255, 255)
PUPIL      = (11, 11, 11)
APPLE      = (255, 43, 43)
APPLE_DARK = (196, 29, 29)
APPLE_LEAF = (47, 163, 58)
APPLE_STEM = (90, 45, 24)
TEXT       = (220, 220, 230)
TITLE      = (240, 240, 250)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

INITIAL_LENGTH = 4

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    seed: int | None = None
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    initial_length: int = INITIAL_LENGTH
    move_every_ms: int = 120
    foods_per_speedup: int = 5
    speedup_step_ms: int = 8
    min_move_ms: int = 45

    def __post_init__(self):
        if self.grid_w < 1 or self.grid_h < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.grid_w}x{self.grid_h}")
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be positive, got {self.initial_length}")
        if self.initial_length > self.grid_w // 2 + 1:
            raise ValueError(
                f"A {self.initial_length}-cell snake does not fit a grid {self.grid_w} cells wide"
            )
        if self.min_move_ms <= 0 or self.move_every_ms < self.min_move_ms:
            raise ValueError(
                f"Need 0 < min_move_ms <= move_every_ms, got {self.min_move_ms} and {self.move_every_ms}"
            )
        if self.foods_per_speedup <= 0 or self.speedup_step_ms < 0:
            raise ValueError("foods_per_speedup must be positive and speedup_step_ms non-negative")


CFG = Config()

