"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "true") -> bool:
    """Parse a boolean environment variable."""
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration for the engine logger hierarchy."""

    level: str = field(default_factory=lambda: os.getenv("ENGINE_LOG_LEVEL", "WARNING").upper())
    format: str = "%(asctime)s %(name)s %(levelname)s %(message)s"


@dataclass(frozen=True)
class PayoutConfig:
    """
    Main bet and side bet payout defaults.

    These only reach the engine through ``RuleSet.from_config``;
    ``DEFAULT_RULES`` always holds the standard 3:2 table.
    """

    blackjack_payout: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_PAYOUT", "1.5"))
    )
    surrender_refund: float = field(
        default_factory=lambda: float(os.getenv("SURRENDER_REFUND", "0.5"))
    )
    perfect_pairs_payout: float = field(
        default_factory=lambda: float(os.getenv("PERFECT_PAIRS_PAYOUT", "5"))
    )


@dataclass(frozen=True)
class TableConfig:
    """Side bets offered at the table."""

    lucky_lucky_enabled: bool = field(default_factory=lambda: _env_flag("LUCKY_LUCKY_ENABLED"))
    perfect_pairs_enabled: bool = field(default_factory=lambda: _env_flag("PERFECT_PAIRS_ENABLED"))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "false"))

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    payouts: PayoutConfig = field(default_factory=PayoutConfig)
    table: TableConfig = field(default_factory=TableConfig)


def configure_logging(
    cfg: LoggingConfig | None = None, debug: bool | None = None
) -> logging.Logger:
    """
    Attach a stream handler to the engine logger.

    Calling this more than once only updates the level.

    Args:
        cfg: Logging settings (defaults to the global configuration)
        debug: Force DEBUG level (defaults to the global ``debug`` flag)

    Returns:
        The configured ``engine`` logger
    """
    cfg = cfg or config.logging
    logger = logging.getLogger("engine")
    if debug is None:
        debug = config.debug
    logger.setLevel("DEBUG" if debug else cfg.level)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(cfg.format))
        logger.addHandler(handler)

    return logger


# Global configuration instance
config = AppConfig()
