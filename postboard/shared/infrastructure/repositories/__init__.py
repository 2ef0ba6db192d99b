"""
Repositories - one HTTP call per method, no retry or caching.
"""

from postboard.shared.infrastructure.repositories.base import Repository
from postboard.shared.infrastructure.repositories.post_repository import PostRepository
from postboard.shared.infrastructure.repositories.auth_repository import AuthRepository

__all__ = [
    "Repository",
    "PostRepository",
    "AuthRepository",
]
