"""
countdown_bot/config.py

Compiled-in countdown settings, environment lookup and logger setup.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional

import httpx

from .errors import ConfigurationError


# =============================================================================
# Fixed Settings
# =============================================================================

BOT_NAME = "Dreamers in Tech Hackathon countdown bot"

# July 18, 2025, 5pm PDT
TARGET_DATE = datetime.fromisoformat("2025-07-18T17:00:00-07:00")

# Update every minute
UPDATE_INTERVAL_MS = 60000

WEBHOOK_URL_ENV = "SLACK_WEBHOOK_URL"
LOG_LEVEL_ENV = "COUNTDOWN_LOG_LEVEL"
LOG_FILE_ENV = "COUNTDOWN_LOG_FILE"

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class BotConfig:
    """
    Runtime configuration for one bot process.

    Attributes:
        webhook_url: Incoming webhook endpoint.
        target: Instant being counted down to.
        interval: Seconds between ticks.
        log_level: Logging level constant.
        log_file: Log file path (None for stderr).
    """

    webhook_url: str
    target: datetime = TARGET_DATE
    interval: float = UPDATE_INTERVAL_MS / 1000
    log_level: int = logging.INFO
    log_file: Optional[str] = None


def validate_webhook_url(url: str) -> str:
    """
    Check that a webhook URL is an absolute http(s) URL.

    Production webhooks are https; plain http is accepted so the bot can
    be pointed at a local test receiver.

    Raises:
        ConfigurationError: If the URL cannot be used.
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigurationError(f"Invalid webhook URL: {e}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigurationError(
            f"{WEBHOOK_URL_ENV} must be an absolute https URL "
            "(http is accepted for local testing)"
        )
    return url


def parse_log_level(name: str) -> int:
    """Map a level name such as 'debug' to its logging constant."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name!r}")
    return level


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    require_webhook: bool = True,
) -> BotConfig:
    """
    Build the bot configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ).
        require_webhook: If False, a missing webhook URL is allowed
            (used for dry runs that never send anything).

    Returns:
        BotConfig instance.

    Raises:
        ConfigurationError: If the webhook URL is missing or malformed,
            or the log level is unknown.
    """
    if environ is None:
        environ = os.environ

    webhook_url = environ.get(WEBHOOK_URL_ENV, "").strip()
    if webhook_url:
        validate_webhook_url(webhook_url)
    elif require_webhook:
        raise ConfigurationError(
            f"{WEBHOOK_URL_ENV} environment variable is not set. "
            "Please set it to your Slack incoming webhook URL"
        )

    log_level = parse_log_level(environ.get(LOG_LEVEL_ENV, "info"))
    log_file = environ.get(LOG_FILE_ENV) or None

    return BotConfig(
        webhook_url=webhook_url,
        log_level=log_level,
        log_file=log_file,
    )


def configure_logger(logger,
                     log_file=None,
                     log_format=None,
                     log_level=logging.INFO):
    """Configure a logger with a file or stream handler

    Args:
        logger: Logger instance or logger name string
        log_file: File path string or file-like object (None for stderr)
        log_format: Format string for log messages
        log_level: Logging level (e.g., logging.INFO, logging.DEBUG)

    Returns:
        Configured logger instance
    """
    if isinstance(log_file, str):
        handler = logging.FileHandler(
            log_file,
            mode='a',
            encoding='utf-8',
            errors='replace'
        )
    else:
        handler = logging.StreamHandler(log_file)  # Default to stderr if None

    formatter = logging.Formatter(log_format or DEFAULT_LOG_FORMAT)

    if isinstance(logger, str):
        logger = logging.getLogger(logger)

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(log_level)

    return logger
