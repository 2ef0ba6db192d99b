"""Repository for the posts endpoint."""

from __future__ import annotations

import logging
from typing import List

from postboard.shared.domain.models import Post
from postboard.shared.infrastructure.http import (
    ClientFactory,
    InvalidPayloadError,
    RequestFailedError,
)
from .base import Repository

logger = logging.getLogger(__name__)


class PostRepository(Repository):
    """Fetches the list of posts with a single GET."""

    def __init__(self, clients: ClientFactory, posts_url: str | None = None):
        super().__init__(clients)
        self.posts_url = posts_url or clients.config.posts_url

    async def fetch_posts(self) -> List[Post]:
        """Fetch all posts.

        Returns:
            Posts in server order

        Raises:
            RequestFailedError: On any status other than 200
            InvalidPayloadError: If a 200 body is not a list of posts
            NetworkError: If the request did not complete
        """
        async with self._clients.create() as client:
            response = await self._send(client, "GET", self.posts_url)

        if response.status_code != 200:
            logger.warning(f"Fetching posts returned HTTP {response.status_code}")
            raise RequestFailedError("Failed to load posts", status_code=response.status_code)

        data = self._decode_json(response)
        try:
            posts = Post.list_from_json(data)
        except ValueError as e:
            raise InvalidPayloadError(
                "Failed to parse posts", status_code=response.status_code
            ) from e

        logger.info(f"Fetched {len(posts)} posts")
        return posts
