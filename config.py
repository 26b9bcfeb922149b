"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field
from random import Random


def _env_flag(name: str, default: str) -> bool:
    """Read a true/false environment variable."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or blank means an unseeded shuffle."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )


@dataclass(frozen=True)
class RoundConfig:
    """Settings for a single deal-and-compare round."""

    seed: int | None = field(default_factory=_parse_seed)
    shuffle: bool = field(default_factory=lambda: _env_flag("BLACKJACK_SHUFFLE", "true"))
    show_verbose_deck: bool = field(
        default_factory=lambda: _env_flag("BLACKJACK_VERBOSE", "false")
    )
    cards_per_hand: int = 2

    def make_rng(self) -> Random:
        """Build the shuffle RNG, seeded when a seed is configured."""
        return Random(self.seed)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    round: RoundConfig = field(default_factory=RoundConfig)


# Global configuration instance
config = AppConfig()
