"""
HTTP layer - client factory and repository error hierarchy.
"""

from postboard.shared.infrastructure.http.base import (
    RepositoryError,
    RequestFailedError,
    InvalidPayloadError,
    NetworkError,
)
from postboard.shared.infrastructure.http.client_factory import ClientFactory

__all__ = [
    # Errors
    "RepositoryError",
    "RequestFailedError",
    "InvalidPayloadError",
    "NetworkError",
    # Factory
    "ClientFactory",
]
