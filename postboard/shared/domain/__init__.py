"""
Shared Domain Module
====================

Data records parsed from the REST payloads.
"""

from postboard.shared.domain.models import LoginRequest, Post, User

__all__ = ["LoginRequest", "Post", "User"]
