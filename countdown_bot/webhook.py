"""
Incoming Webhook Client

Posts message payloads to a Slack-compatible incoming webhook.
Each delivery is a single POST; retrying is left to the caller.
"""

import json
import logging
from typing import Optional

import httpx

from .blocks import MessagePayload
from .errors import RemoteRejection, TransportError

logger = logging.getLogger(__name__)


class WebhookClient:
    """
    Delivers payloads to one webhook endpoint.

    Args:
        url: Webhook endpoint URL.
        client: Optional pre-built httpx.AsyncClient. When omitted a client
            is created on first use and closed by close().
    """

    def __init__(self, url: str, client: Optional[httpx.AsyncClient] = None):
        self.url = url
        self._client = client
        self._owns_client = client is None
        self.logger = logging.getLogger(f"{__name__}.WebhookClient")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient()
            self._owns_client = True
        return self._client

    @staticmethod
    def serialize(payload: MessagePayload) -> bytes:
        """Encode a payload as the UTF-8 JSON request body."""
        return json.dumps(payload.to_dict(), ensure_ascii=False).encode("utf-8")

    async def deliver(self, payload: MessagePayload) -> str:
        """
        POST a payload to the webhook.

        Args:
            payload: Message to send.

        Returns:
            Raw response body on HTTP 200.

        Raises:
            RemoteRejection: If the webhook answers with any other status.
            TransportError: If the request never got a response.
        """
        client = await self._get_client()
        body = self.serialize(payload)

        try:
            # httpx derives Content-Length from the encoded body
            response = await client.post(
                self.url,
                content=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.RequestError as e:
            self.logger.error(f"Error sending to webhook: {e!r}")
            raise TransportError(e) from e

        if response.status_code != 200:
            self.logger.error(
                f"Webhook API error: {response.status_code} - {response.text}"
            )
            raise RemoteRejection(response.status_code, response.text)

        self.logger.info("Successfully sent countdown update to webhook")
        return response.text

    async def close(self) -> None:
        """Close HTTP client if this instance created it."""
        if self._client and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
