# main.py
import argparse
import dataclasses
import logging

import pygame  # type: ignore

from .clock import TickClock
from .config import CFG, CELL_SIZE, FPS, Config
from .controls import handle_input
from .engine import Phase, TickEngine
from .render import draw_frame

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="classic-snake", description="Grid Snake in a pygame window.")
    parser.add_argument("--grid", type=int, nargs=2, metavar=("W", "H"),
                        default=(CFG.grid_w, CFG.grid_h), help="grid size in cells")
    parser.add_argument("--cell", type=int, default=CELL_SIZE, help="cell size in pixels")
    parser.add_argument("--speed", type=int, default=CFG.move_every_ms,
                        help="starting tick interval in ms (lower = faster)")
    parser.add_argument("--seed", type=int, default=None, help="seed food placement")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return dataclasses.replace(
        CFG,
        seed=args.seed,
        grid_w=args.grid[0],
        grid_h=args.grid[1],
        move_every_ms=args.speed,
        min_move_ms=min(CFG.min_move_ms, args.speed),
    )


def run(cfg: Config, cell: int = CELL_SIZE) -> None:
    pygame.init()
    try:
        font = pygame.font.Font(None, 28)
        screen = pygame.display.set_mode((cfg.grid_w * cell, cfg.grid_h * cell))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()

        engine = TickEngine(cfg)
        ticker = TickClock(pygame.time.get_ticks())
        logger.info("Starting on a %dx%d grid, %d ms per tick",
                    cfg.grid_w, cfg.grid_h, engine.interval_ms)

        running = True
        while running:
            # 1) input
            running = handle_input(engine)
            if not running:
                break

            # 2) update
            now = pygame.time.get_ticks()
            if engine.phase is Phase.RUNNING:
                if ticker.due(now, engine.interval_ms):
                    engine.advance()
            else:
                ticker.hold(now)

            # 3) render
            draw_frame(screen, font, engine, cell)
            pygame.display.flip()
            clock.tick(FPS)  # high FPS; movement gated by the tick clock
    finally:
        pygame.quit()


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.cell < 4:
        raise SystemExit("--cell must be at least 4 pixels")
    try:
        cfg = build_config(args)
    except ValueError as exc:
        raise SystemExit(f"Invalid settings: {exc}") from exc
    run(cfg, args.cell)


if __name__ == "__main__":
    main()
