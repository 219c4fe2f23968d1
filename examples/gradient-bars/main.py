"""Gradient Bars — drag bars to resize them and reshape their gradients.

Controls:
  Drag bar up/down          Resize from the nearer edge (top or bottom half)
  Drag bar left/right       Reshape the bar's gradient curve
  Drag background up/down   Reshape the background gradient curve
  Escape                    Quit
"""
from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from gradient_bars import CanvasConfig, InteractionController, Scene, Theme, draw_scene
from ui.constants import BAR_COUNT, DRAG_BUTTONS, FPS, MARGIN, SCREEN_H, SCREEN_W, THEME, TITLE

logger = logging.getLogger("gradient_bars")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Gradient Bars — interactive gradient canvas")
    p.add_argument("--width", type=int, default=SCREEN_W, help=f"Window width (default: {SCREEN_W})")
    p.add_argument("--height", type=int, default=SCREEN_H, help=f"Window height (default: {SCREEN_H})")
    p.add_argument("--bars", type=int, default=BAR_COUNT, help=f"Number of bars (default: {BAR_COUNT})")
    p.add_argument("--margin", type=float, default=MARGIN, help=f"Gap in pixels (default: {MARGIN})")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    # Bad literals or sizes fail here, before the window opens
    config = CanvasConfig(margin=args.margin, bar_count=args.bars)
    theme = Theme(**THEME)
    scene = Scene.create(config, args.width, args.height, theme, random.Random(args.seed))
    controller = InteractionController(scene)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    logger.info("started with %d bars at %dx%d", config.bar_count, args.width, args.height)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

            elif event.type == pygame.VIDEORESIZE:
                w, h = max(1, event.w), max(1, event.h)
                screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                scene.resize(w, h)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in DRAG_BUTTONS:
                controller.press(*event.pos)

            elif event.type == pygame.MOUSEMOTION and any(event.buttons):
                controller.drag(*event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button in DRAG_BUTTONS:
                # Released outside the window still counts
                controller.release()

            elif event.type == pygame.WINDOWFOCUSLOST:
                controller.release()

        # --- Render ---
        draw_scene(screen, scene, theme)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
