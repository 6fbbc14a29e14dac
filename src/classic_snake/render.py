# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import (
    CELL_SIZE,
    BG, BODY, HEAD, SHADE, EYE, PUPIL,
    APPLE, APPLE_DARK, APPLE_LEAF, APPLE_STEM,
    TEXT, TITLE,
    UP, DOWN, LEFT, RIGHT,
)
from .engine import Phase, TickEngine

# Eye centres as fractions of a cell, per heading
EYE_OFFSETS = {
    RIGHT: ((0.65, 0.28), (0.65, 0.72)),
    LEFT:  ((0.35, 0.28), (0.35, 0.72)),
    DOWN:  ((0.30, 0.65), (0.70, 0.65)),
    UP:    ((0.30, 0.35), (0.70, 0.35)),
}


# ---------- Helpers ----------
def cell_rect(gx: int, gy: int, cell: int = CELL_SIZE) -> pygame.Rect:
    return pygame.Rect(gx * cell, gy * cell, cell, cell)


def draw_segment(screen: pygame.Surface, gx: int, gy: int,
                 color: Tuple[int, int, int], radius: int = 6,
                 cell: int = CELL_SIZE) -> None:
    rect = cell_rect(gx, gy, cell)
    pygame.draw.rect(screen, color, rect, border_radius=min(radius, cell // 2))
    # thin darker band for a bit of body texture
    band = pygame.Rect(rect.x + int(cell * 0.05), rect.y + int(cell * 0.55),
                       int(cell * 0.9), max(1, int(cell * 0.15)))
    pygame.draw.rect(screen, SHADE, band)


def draw_head(screen: pygame.Surface, gx: int, gy: int,
              direction: Tuple[int, int], cell: int = CELL_SIZE) -> None:
    draw_segment(screen, gx, gy, HEAD, radius=7, cell=cell)
    eye_r = max(2, int(cell * 0.12))
    pupil_r = max(1, int(eye_r * 0.55))
    for fx, fy in EYE_OFFSETS.get(direction, EYE_OFFSETS[RIGHT]):
        cx = int(gx * cell + fx * cell)
        cy = int(gy * cell + fy * cell)
        pygame.draw.circle(screen, EYE, (cx, cy), eye_r)
        pygame.draw.circle(screen, PUPIL, (cx + max(1, eye_r // 6), cy), pupil_r)


def draw_apple(screen: pygame.Surface, gx: int, gy: int, cell: int = CELL_SIZE) -> None:
    cx = gx * cell + cell // 2
    cy = gy * cell + cell // 2
    r = max(2, int(cell * 0.36))

    pygame.draw.circle(screen, APPLE_DARK, (cx, cy), r)
    pygame.draw.circle(screen, APPLE, (cx, cy), max(1, r - 2))
    # stem
    pygame.draw.line(screen, APPLE_STEM,
                     (cx + r // 10, cy - int(r * 0.4)),
                     (cx + r // 5, cy - int(r * 0.9)),
                     max(1, int(cell * 0.06)))
    # leaf
    leaf = pygame.Rect(0, 0, max(2, int(r * 0.5)), max(1, int(r * 0.28)))
    leaf.center = (cx + int(r * 0.3), cy - int(r * 0.6))
    pygame.draw.ellipse(screen, APPLE_LEAF, leaf)


# ---------- Frames ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font,
              engine: TickEngine, cell: int = CELL_SIZE) -> None:
    screen.fill(BG)
    state = engine.state
    # food
    if state.food is not None:
        draw_apple(screen, state.food[0], state.food[1], cell)
    # snake: body first so the head is drawn on top
    for x, y in state.snake[1:]:
        draw_segment(screen, x, y, BODY, cell=cell)
    hx, hy = state.snake[0]
    draw_head(screen, hx, hy, state.direction, cell)
    # score
    txt = font.render(f"Score: {state.score}", True, TEXT)
    screen.blit(txt, (8, 6))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font,
                 title: str, *lines: str) -> None:
    width, height = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    surf = font.render(title, True, TITLE)
    screen.blit(surf, surf.get_rect(center=(width // 2, height // 2 - 16)))
    for i, line in enumerate(lines):
        surf = font.render(line, True, TEXT)
        screen.blit(surf, surf.get_rect(center=(width // 2, height // 2 + 16 + 28 * i)))


def draw_frame(screen: pygame.Surface, font: pygame.font.Font,
               engine: TickEngine, cell: int = CELL_SIZE) -> None:
    """Board plus whichever overlay the current phase calls for."""
    draw_game(screen, font, engine, cell)
    phase = engine.phase
    if phase is Phase.IDLE:
        draw_overlay(screen, font, "SNAKE", "Arrow keys or Enter to start")
    elif phase is Phase.PAUSED:
        draw_overlay(screen, font, "PAUSED", "Space to resume")
    elif phase is Phase.TERMINAL:
        draw_overlay(screen, font, "GAME OVER",
                     f"Score: {engine.score}", "Enter to play again, R to reset")
