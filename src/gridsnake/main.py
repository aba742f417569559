# main.py
from __future__ import annotations
import argparse
import dataclasses
import logging
from typing import List, Optional

import pygame # type: ignore

from .config import CFG, Config
from .game import Direction, GameState, new_game_state
from .render import draw_game, draw_game_over, hit_button

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

def key_to_direction(key: int) -> Optional[Direction]:
    return KEYMAP.get(key)

def start_game(cfg: Config, game_no: int) -> GameState:
    # With a fixed seed each restart gets its own, still reproducible, food sequence
    seed = None if cfg.seed is None else cfg.seed + game_no
    state = new_game_state(dataclasses.replace(cfg, seed=seed))
    logger.info("game %d: %dx%d board, seed=%s", game_no, cfg.grid_w, cfg.grid_h, seed)
    return state

def run(cfg: Config) -> None:
    pygame.init()
    try:
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode((cfg.width_px, cfg.height_px))
        pygame.display.set_caption("Snake Game")
        clock = pygame.time.Clock()

        game_no = 1
        state = start_game(cfg, game_no)
        last_move = pygame.time.get_ticks()
        running = True

        while running:
            # 1) input
            restart = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and state.game_over:
                        restart = True
                    else:
                        direction = key_to_direction(event.key)
                        if direction is not None:
                            state.request_direction_change(direction)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    direction = hit_button(event.pos, cfg)
                    if direction is not None:
                        state.request_direction_change(direction)
                    elif state.game_over and event.pos[1] < cfg.board_h_px:
                        restart = True
            if not running:
                break
            if restart:
                game_no += 1
                state = start_game(cfg, game_no)
                last_move = pygame.time.get_ticks()

            # 2) update, fixed cadence
            now = pygame.time.get_ticks()
            if not state.game_over and now - last_move >= cfg.move_every_ms:
                state.tick()
                last_move = now
                if state.game_over:
                    logger.info("game %d over: score=%d length=%d", game_no, state.score, len(state))

            # 3) render
            snap = state.snapshot()
            draw_game(screen, font, snap, cfg)
            if snap.game_over:
                draw_game_over(screen, font, snap.score, cfg)
            pygame.display.flip()
            clock.tick(60)  # high FPS; movement gated on move_every_ms
    finally:
        pygame.quit()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game.")
    parser.add_argument("--width", type=int, default=CFG.grid_w, help="board width in cells")
    parser.add_argument("--height", type=int, default=CFG.grid_h, help="board height in cells")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size, help="cell size in pixels")
    parser.add_argument("--tick-ms", type=int, default=CFG.move_every_ms, help="milliseconds per move")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for reproducible food placement")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1 or args.width * args.height < 2:
        parser.error(f"board {args.width}x{args.height} is too small (needs at least 2 cells)")
    if args.cell_size <= 0:
        parser.error("--cell-size must be positive")
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")
    return args

def config_from_args(args: argparse.Namespace) -> Config:
    return dataclasses.replace(
        CFG,
        seed=args.seed,
        grid_w=args.width,
        grid_h=args.height,
        cell_size=args.cell_size,
        move_every_ms=args.tick_ms,
    )

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    cfg = config_from_args(args)
    try:
        run(cfg)
    except KeyboardInterrupt:
        logger.info("Interrupted, bye")

if __name__ == "__main__":
    main()
