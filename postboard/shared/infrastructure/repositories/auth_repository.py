"""Repository for the login endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from postboard.shared.domain.models import LoginRequest, User
from postboard.shared.infrastructure.http import (
    ClientFactory,
    InvalidPayloadError,
    RequestFailedError,
)
from .base import Repository

logger = logging.getLogger(__name__)


class AuthRepository(Repository):
    """Logs a user in with a single POST."""

    def __init__(self, clients: ClientFactory, login_url: str | None = None):
        super().__init__(clients)
        self.login_url = login_url or clients.config.login_url

    async def login(self, email: str, password: str) -> User:
        """Exchange credentials for a token.

        Args:
            email: Account email
            password: Account password

        Returns:
            The signed-in user

        Raises:
            RequestFailedError: On any status other than 200; the message
                is the server's ``error`` field when present
            InvalidPayloadError: If a 200 body carries no token
            NetworkError: If the request did not complete
        """
        request = LoginRequest(email=email, password=password)

        async with self._clients.create_login_client() as client:
            response = await self._send(client, "POST", self.login_url, json=request.to_json())

        if response.status_code != 200:
            logger.warning(f"Login for {email} returned HTTP {response.status_code}")
            raise RequestFailedError(
                self._error_message(self._safe_json(response)),
                status_code=response.status_code,
            )

        data = self._decode_json(response)
        try:
            user = User.from_login_response(email, data)
        except ValueError as e:
            raise InvalidPayloadError(
                "Failed to parse login response", status_code=response.status_code
            ) from e

        logger.info(f"Logged in as {email}")
        return user

    @staticmethod
    def _safe_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _error_message(body: Any) -> str:
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, str) and error.strip():
                return f"Failed to login: {error.strip()}"
        return "Failed to login"
