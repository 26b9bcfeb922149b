"""Logging setup."""

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Logs go to stderr so they never mix with the round report on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
