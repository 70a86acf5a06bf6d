"""Frogger - hop across the bug lanes to reach the water.

Click an avatar to start. Arrow keys hop one tile (on key release).
Reaching the water scores 10, a gem scores 5, a bug resets the score.

Controls:
  Click       Choose avatar (intro screen)
  Arrows      Hop
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from frogger import Game, GameConfig
from frogger.commands import DOWN, LEFT, RIGHT, UP
from frogger.render import ASSET_URLS, render
from ui.canvas import PygameCanvas
from ui.constants import BG_COLOR, FONT_NAME, FONT_SIZE, FPS, TEXT_COLOR, TITLE
from ui.resources import ImageCache

KEYS = {
    pygame.K_LEFT: LEFT,
    pygame.K_UP: UP,
    pygame.K_RIGHT: RIGHT,
    pygame.K_DOWN: DOWN,
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Frogger - tick-driven arcade demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame cap (default: {FPS})")
    p.add_argument("--assets", type=str, default=".",
                   help="Directory holding images/ (default: current directory)")
    p.add_argument("--log-level", type=str, default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = GameConfig()
    pygame.init()
    screen = pygame.display.set_mode((config.stage_width, config.stage_height))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)

    canvas = PygameCanvas(screen, font, TEXT_COLOR)
    cache = ImageCache(args.assets)
    game = Game(config, seed=args.seed, start_ms=pygame.time.get_ticks())

    cache.on_ready(lambda: game.start(pygame.time.get_ticks()))
    cache.load(ASSET_URLS)

    running = True
    while running:
        clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYUP and event.key in KEYS:
                game.move(KEYS[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                game.click(*event.pos)

        # --- Tick ---
        game.step(pygame.time.get_ticks())

        # --- Render ---
        canvas.clear(BG_COLOR)
        render(game.state, canvas, cache)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
