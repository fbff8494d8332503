#!/usr/bin/env python3
"""
Play snake in the terminal.

Usage:
    python main.py
    python main.py --seed 42 --tick-ms 80

Controls:
    w / a / s / d or the arrow keys steer the snake
    q or Ctrl+C quits

Settings can also be given as SNAKE_* environment variables or in a .env
file (see config.py); command line flags take precedence.
"""

import argparse
import curses
import logging
import random
import sys
from dataclasses import replace
from typing import List, Optional

from config import Settings, LOG_LEVELS, load_settings
from domain.constants import BOARD_WIDTH, BOARD_HEIGHT
from runtime import GameSession, TickScheduler, TerminalRuntime

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Terminal snake: eat the food, avoid the walls and yourself.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Timer period in milliseconds; the snake moves every second tick (default: 100)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement, for reproducible games")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable colours")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file (logs are discarded otherwise)")
    return parser


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Overlay command line flags on settings loaded from the environment."""
    overrides = {}
    if args.tick_ms is not None:
        if args.tick_ms <= 0:
            raise ValueError(f"--tick-ms must be positive, got {args.tick_ms}")
        overrides['tick_ms'] = args.tick_ms
    if args.seed is not None:
        overrides['seed'] = args.seed
    if args.no_color:
        overrides['color'] = False
    if args.log_level is not None:
        overrides['log_level'] = args.log_level
    if args.log_file is not None:
        overrides['log_file'] = args.log_file
    return replace(settings, **overrides)


def configure_logging(settings: Settings):
    # The game owns the screen, so without a log file records go nowhere.
    if settings.log_file:
        logging.basicConfig(
            level=settings.log_level,
            format=LOG_FORMAT,
            filename=settings.log_file
        )
    else:
        logging.basicConfig(level=settings.log_level, handlers=[logging.NullHandler()])


def run(settings: Settings) -> GameSession:
    """Play one session with the given settings and return it once finished."""
    rng = random.Random(settings.seed)
    session = GameSession(BOARD_WIDTH, BOARD_HEIGHT, rng=rng)
    scheduler = TickScheduler(settings.tick_seconds)
    logger.info(
        f"New {BOARD_WIDTH}x{BOARD_HEIGHT} game (tick={settings.tick_ms}ms, seed={settings.seed})"
    )
    TerminalRuntime(session, scheduler, use_color=settings.color).run()
    return session


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = apply_args(load_settings(), args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    try:
        configure_logging(settings)
    except OSError as e:
        print(f"Configuration error: cannot open log file: {e}", file=sys.stderr)
        return 2

    try:
        session = run(settings)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except (curses.error, OSError) as e:
        logger.error(f"Terminal failure: {e}")
        print(f"Alas, there's been an error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Session ended: status={session.state.status}, length={session.state.length}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
