"""
termsnake - Command line entry point

Usage:  termsnake [--window] [--log-level LEVEL]
"""

import argparse
import logging
import sys

from .config import GameConfig
from .errors import SnakeError
from .log import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake in your terminal.")
    parser.add_argument("--window", action="store_true",
                        help="play in a pygame window instead of the terminal")
    parser.add_argument("--log-level", default=None,
                        help="log level for the session log file (default: INFO)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = GameConfig.from_env()
        if args.log_level:
            config.log_level = args.log_level.upper()
            config.validate()
    except SnakeError as exc:
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1

    log_file = setup_logging(config.log_dir, config.log_level)
    logger.info("Session log: %s", log_file)

    if args.window:
        from .window import play
    else:
        from .terminal import play

    try:
        game = play(config)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 0
    except SnakeError as exc:
        logger.error("Aborted: %s", exc)
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Crashed")
        raise

    print(f"Game over! Score: {game.score}")
    return 0
