"""Command-line entry point: play one round and print the result."""

import argparse
import logging
import sys
from dataclasses import replace

from blackjack.display import RoundReport
from blackjack.game import BlackjackRound
from blackjack.utils import setup_logging
from config import config

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="blackjack-round",
        description="Deal one two-card blackjack round between a player and a dealer",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Seed for the shuffle (overrides BLACKJACK_SEED)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also list the remaining deck with full card names",
    )
    parser.add_argument(
        "--no-shuffle",
        action="store_true",
        help="Deal from the unshuffled deck",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (overrides BLACKJACK_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    round_config = config.round
    if args.seed is not None:
        round_config = replace(round_config, seed=args.seed)
    if args.verbose:
        round_config = replace(round_config, show_verbose_deck=True)
    if args.no_shuffle:
        round_config = replace(round_config, shuffle=False)

    setup_logging(args.log_level or config.logging.level)
    logger.debug("Starting round with %s", round_config)

    result = BlackjackRound(config=round_config).play()
    RoundReport(show_verbose_deck=round_config.show_verbose_deck).print_round(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
