"""
SMS gateway transport adapter - Delivers verification messages by SMS.

Posts {"to": ..., "message": ...} as JSON to an HTTP gateway with a
bearer API key. Any network error or non-2xx response is a delivery failure.
"""

import logging

import httpx

from src.domain.exceptions import TransportError

logger = logging.getLogger(__name__)


class SmsGatewayTransport:
    """Implements Transport protocol via an HTTP SMS gateway."""

    def __init__(
        self,
        url: str,
        api_key: str = "",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self._headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._client = client or httpx.Client(timeout=timeout)

    def send(self, message: str, destination: str) -> None:
        """
        Submit the message to the gateway.

        Raises:
            TransportError: If the request fails or the gateway rejects it
        """
        try:
            response = self._client.post(
                self.url,
                json={"to": destination, "message": message},
                headers=self._headers,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("SMS delivery to %s failed: %s", destination, e)
            raise TransportError() from e

    def close(self) -> None:
        self._client.close()
