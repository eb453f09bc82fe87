"""
countdown_bot/errors.py

Countdown bot exceptions.
"""

from typing import Optional


class CountdownBotError(Exception):
    """Base exception for countdown bot errors."""
    pass


class ConfigurationError(CountdownBotError):
    """Required configuration missing or invalid."""
    pass


class DeliveryError(CountdownBotError):
    """Webhook delivery failed."""
    pass


class TransportError(DeliveryError):
    """Network-level failure (DNS, connection, TLS, timeout)."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Webhook transport error: {cause!r}")


class RemoteRejection(DeliveryError):
    """Webhook answered with a non-200 status."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body or ""
        super().__init__(
            f"Webhook returned status {status_code}: {self.body}"
        )
