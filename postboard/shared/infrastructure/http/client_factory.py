"""
HTTP client factory.

Centralises httpx client creation so every repository sends the same
headers and timeout, and tests can swap the transport.
"""

from __future__ import annotations

from typing import Dict, Optional

import httpx

from postboard import __version__
from postboard.shared.core.configuration import ApiConfig


class ClientFactory:
    """Factory for short-lived ``httpx.AsyncClient`` instances."""

    def __init__(
        self,
        config: ApiConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            config: API section of the system configuration
            transport: Optional transport override (``httpx.MockTransport`` in tests)
        """
        self.config = config
        self.transport = transport

    def default_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": f"{self.config.app_name}/{__version__}",
        }

    def create(self, extra_headers: Optional[Dict[str, str]] = None) -> httpx.AsyncClient:
        """Create a client; callers use it as an async context manager.

        Args:
            extra_headers: Headers added on top of the defaults

        Returns:
            A new, unopened client
        """
        headers = self.default_headers()
        if extra_headers:
            headers.update(extra_headers)

        return httpx.AsyncClient(
            headers=headers,
            timeout=self.config.timeout,
            transport=self.transport,
        )

    def create_login_client(self) -> httpx.AsyncClient:
        """Client for the login endpoint, carrying the API key when configured."""
        extra = {"x-api-key": self.config.login_api_key} if self.config.login_api_key else None
        return self.create(extra)
