"""
Repository error hierarchy.

Every failure a repository surfaces to the state layer is a RepositoryError,
so cubits only need one ``except`` clause.
"""

from __future__ import annotations

from typing import Optional


class RepositoryError(Exception):
    """Base error raised by repositories.

    Attributes:
        message: Human readable message, shown as-is in the UI
        status_code: HTTP status of the response, when one was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class RequestFailedError(RepositoryError):
    """The server answered with a status other than 200."""


class InvalidPayloadError(RepositoryError):
    """A 200 response whose body could not be parsed into models."""


class NetworkError(RepositoryError):
    """The request never produced a response (connect error, timeout, ...)."""
