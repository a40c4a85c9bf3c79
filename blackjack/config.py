"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from blackjack.hand import ScoringPolicy


def _parse_scoring() -> ScoringPolicy:
    """Parse BLACKJACK_SCORING environment variable."""
    raw = os.getenv("BLACKJACK_SCORING", ScoringPolicy.ACE_AWARE.value).strip().lower()
    try:
        return ScoringPolicy(raw)
    except ValueError:
        choices = ", ".join(p.value for p in ScoringPolicy)
        raise ValueError(f"BLACKJACK_SCORING must be one of: {choices} (got {raw!r})") from None


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    raw = os.getenv("BLACKJACK_SEED")
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(frozen=True)
class GameConfig:
    """Game configuration."""

    scoring: ScoringPolicy = field(default_factory=_parse_scoring)
    seed: int | None = field(default_factory=_parse_seed)
    pause: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_PAUSE", "true").lower() == "true"
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config() -> AppConfig:
    """Build a configuration from the current environment."""
    return AppConfig()
