"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from carddeck.logging_utils import LOG_DATEFMT, LOG_FORMAT


def _parse_seed() -> int | None:
    """Parse DECK_SEED environment variable."""
    seed = os.getenv("DECK_SEED", "").strip()
    if not seed:
        return None
    try:
        return int(seed)
    except ValueError:
        raise ValueError(f"DECK_SEED must be an integer, got {seed!r}") from None


def _parse_hand_sizes() -> list[int]:
    """Parse HAND_SIZES environment variable."""
    raw = os.getenv("HAND_SIZES", "50,10")
    try:
        sizes = [int(s) for s in raw.split(",") if s.strip()]
    except ValueError:
        raise ValueError(f"HAND_SIZES must be comma-separated integers, got {raw!r}") from None
    if any(size < 0 for size in sizes):
        raise ValueError(f"HAND_SIZES must not contain negative sizes, got {raw!r}")
    return sizes


@dataclass(frozen=True)
class DeckConfig:
    """Deck and dealing defaults."""

    seed: int | None = field(default_factory=_parse_seed)
    hand_sizes: list[int] = field(default_factory=_parse_hand_sizes)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    format: str = LOG_FORMAT
    datefmt: str = LOG_DATEFMT


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    deck: DeckConfig = field(default_factory=DeckConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
