"""
countdown_bot

Posts a countdown to a fixed event time to a Slack incoming webhook.

Provides:
- Remaining-time calculation (days / HH:MM:SS)
- Slack block message formatting
- Webhook delivery over HTTPS
- A fixed-interval scheduler that stops once the event begins
"""

from .blocks import MessagePayload, format_message
from .bot import CountdownBot
from .config import BotConfig, load_config
from .countdown import RemainingDuration, compute_remaining
from .errors import (
    ConfigurationError,
    CountdownBotError,
    DeliveryError,
    RemoteRejection,
    TransportError,
)
from .scheduler import CountdownScheduler
from .webhook import WebhookClient

__all__ = [
    "BotConfig",
    "ConfigurationError",
    "CountdownBot",
    "CountdownBotError",
    "CountdownScheduler",
    "DeliveryError",
    "MessagePayload",
    "RemainingDuration",
    "RemoteRejection",
    "TransportError",
    "WebhookClient",
    "compute_remaining",
    "format_message",
    "load_config",
]
