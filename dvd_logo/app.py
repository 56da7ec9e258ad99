"""Command-line entry point: set up pygame, load the logo and run the loop."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

import pygame

from dvd_logo import constants
from dvd_logo.assets import AssetLoadError, load_logo, read_logo_bytes
from dvd_logo.game_loop import GameLoop, WallClock
from dvd_logo.input import PygameInputSource
from dvd_logo.motion import PhysicsConfig
from dvd_logo.render import PygameRenderer
from dvd_logo.state import SimulationState

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dvd-logo", description="Bouncing DVD logo screensaver")
    parser.add_argument("--seed", type=int, default=None, help="seed for the logo's start position")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging verbosity (default: WARNING)",
    )
    return parser


def initial_state(config: PhysicsConfig, rng: random.Random) -> SimulationState:
    """Place the logo at a random whole-pixel spot, moving down and to the right."""

    return SimulationState(
        x=float(rng.randrange(int(config.max_x))),
        y=float(rng.randrange(int(config.max_y))),
        vx=constants.LOGO_START_VELOCITY,
        vy=constants.LOGO_START_VELOCITY,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Program entry point.  Returns the process exit status."""

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    try:
        screen = pygame.display.set_mode((constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT))
        pygame.display.set_caption(constants.WINDOW_TITLE)

        try:
            logo = load_logo(read_logo_bytes())
        except AssetLoadError as exc:
            logger.critical("%s", exc)
            return 1

        config = PhysicsConfig(logo_height=logo.height)
        state = initial_state(config, random.Random(args.seed))
        logger.info("logo starts at (%.0f, %.0f)", state.x, state.y)

        loop = GameLoop(
            state=state,
            config=config,
            input_source=PygameInputSource(),
            renderer=PygameRenderer(screen, logo),
            clock=WallClock(),
        )
        frame_clock = pygame.time.Clock()
        loop.run(lambda: frame_clock.tick(constants.FPS))
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
