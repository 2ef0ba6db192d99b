"""Posts list state."""

from __future__ import annotations

import logging
from typing import Any, List

from fletx.core import RxList

from postboard.shared.core import events
from postboard.shared.core.event_bus import EventBus
from postboard.shared.domain.models import Post
from postboard.shared.infrastructure.repositories import PostRepository
from .cubit import Cubit
from .view_state import ViewState

logger = logging.getLogger(__name__)


class PostsCubit(Cubit[List[Post]]):
    """Maps ``PostRepository.fetch_posts`` onto the four view states."""

    name = "posts"
    topic = events.TOPIC_POSTS_STATE

    def __init__(self, event_bus: EventBus, repository: PostRepository) -> None:
        super().__init__(event_bus)
        self.repository = repository
        self.posts: RxList[Post] = RxList([])

    async def fetch_posts(self) -> None:
        """Load posts: LOADING, then SUCCESS(posts) or FAILURE(message)."""
        if self.state.is_loading:
            logger.debug("fetch_posts ignored: request already in flight")
            return

        await self._load(self.repository.fetch_posts)

    def _mirror(self, state: ViewState[List[Post]]) -> None:
        self.posts.value = list(state.data) if state.data is not None else []

    def _event_data(self, state: ViewState[List[Post]]) -> Any:
        if state.data is None:
            return None
        return {"count": len(state.data)}
