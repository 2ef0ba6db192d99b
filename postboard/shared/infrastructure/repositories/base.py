"""Base repository for thin REST wrappers.

A repository issues exactly one request per public method. It has no retry,
caching or connection reuse; each call opens and closes its own client.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from postboard.shared.infrastructure.http import (
    ClientFactory,
    InvalidPayloadError,
    NetworkError,
)

logger = logging.getLogger(__name__)


class Repository:
    """Base class holding the client factory and shared response helpers.

    Example:
        class PostRepository(Repository):
            async def fetch_posts(self) -> list[Post]:
                async with self._clients.create() as client:
                    response = await self._send(client, "GET", url)
                ...
    """

    def __init__(self, clients: ClientFactory):
        """
        Args:
            clients: Factory producing configured httpx clients
        """
        self._clients = clients

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send one request, wrapping transport failures.

        Raises:
            NetworkError: If no response was received
        """
        logger.debug(f"{method} {url}")
        try:
            return await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e!r}")
            raise NetworkError(f"Network error: {e.__class__.__name__}") from e

    @staticmethod
    def _decode_json(response: httpx.Response) -> Any:
        """Decode a response body as JSON.

        Raises:
            InvalidPayloadError: If the body is not valid JSON
        """
        try:
            return response.json()
        except ValueError as e:
            raise InvalidPayloadError(
                "Response body is not valid JSON", status_code=response.status_code
            ) from e
