"""Main entry point for the Angler Strike game."""

import argparse
import logging
import sys

from anglerstrike.game_loop import GameLoop
from anglerstrike.logger import get_logger, setup_logger

# Get logger for this module
logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Angler Strike")
    parser.add_argument("--debug", action="store_true", help="Start with the debug overlay on")
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, default=None, help="Override the configured log level"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Initializes and runs the game."""
    args = parse_args(argv)

    if args.log_level:
        setup_logger(getattr(logging, args.log_level))

    try:
        logger.info("Starting Angler Strike")
        GameLoop(debug=args.debug).run()
    except Exception as e:
        # Log the exception
        logger.error("An error occurred: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
