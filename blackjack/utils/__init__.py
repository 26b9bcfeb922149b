"""Utility helpers."""

from blackjack.utils.logger import setup_logging

__all__ = ["setup_logging"]
