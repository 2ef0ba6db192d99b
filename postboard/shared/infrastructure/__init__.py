"""
Shared Infrastructure Module
============================

HTTP client factory, repository errors and the REST repositories.
"""

from postboard.shared.infrastructure.http import (
    ClientFactory,
    RepositoryError,
    RequestFailedError,
    InvalidPayloadError,
    NetworkError,
)
from postboard.shared.infrastructure.repositories import (
    AuthRepository,
    PostRepository,
)

__all__ = [
    "ClientFactory",
    "RepositoryError",
    "RequestFailedError",
    "InvalidPayloadError",
    "NetworkError",
    "AuthRepository",
    "PostRepository",
]
