"""
tests/conftest.py

Shared fixtures for countdown bot tests.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest


WEBHOOK_URL = "https://hooks.slack.test/services/T000/B000/XXXX"


@pytest.fixture
def webhook_url():
    """Webhook endpoint used by tests."""
    return WEBHOOK_URL


@pytest.fixture
def now():
    """A fixed 'current' instant."""
    return datetime(2025, 7, 10, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def future_target(now):
    """Target far enough ahead that no test reaches it."""
    return now + timedelta(days=8)


@pytest.fixture
def past_target(now):
    """Target that has already passed."""
    return now - timedelta(seconds=1)


@pytest.fixture
def mock_client():
    """Webhook client stand-in that records deliveries."""
    client = MagicMock()
    client.deliver = AsyncMock(return_value="ok")
    client.close = AsyncMock()
    return client


@pytest.fixture
def mock_transport():
    """
    Factory for an httpx.MockTransport that records requests.

    Usage:
        transport, requests = mock_transport(httpx.Response(200, text="ok"))
    """
    def _make_transport(response=None, error=None):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error(f"simulated {error.__name__}", request=request)
            return response

        return httpx.MockTransport(handler), requests

    return _make_transport
