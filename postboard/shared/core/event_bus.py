"""In-process event bus connecting cubits to the application shell."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, FrozenSet, Iterable, List, Set

from . import events
from .events import EventHandler, EventPayload

__all__ = ["EventBus", "EventHandler", "EventPayload"]


class EventBus:
    """Async PubSub hub shared by cubits, app state and screens.

    Only topics from ``events.TOPICS`` are accepted, so a misspelt topic
    fails at subscribe or publish time instead of dropping events.
    Handlers run as separate tasks; one failing handler is logged and the
    others still receive the event.
    """

    def __init__(self, topics: Iterable[str] = events.TOPICS) -> None:
        self.topics: FrozenSet[str] = frozenset(topics)
        self._subscribers: Dict[str, List[EventHandler]] = {topic: [] for topic in self.topics}
        self._pending_tasks: Set[asyncio.Task] = set()
        self._logger = logging.getLogger(__name__)

    def _handlers(self, topic: str) -> List[EventHandler]:
        try:
            return self._subscribers[topic]
        except KeyError:
            raise ValueError(f"Unknown event topic '{topic}'") from None

    def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Register an async handler for a topic. Registering twice is a no-op."""
        handlers = self._handlers(topic)
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        handlers = self._handlers(topic)
        if handler in handlers:
            handlers.remove(handler)

    def subscriber_count(self, topic: str) -> int:
        return len(self._handlers(topic))

    async def publish(self, topic: str, payload: EventPayload) -> None:
        """Schedule every handler of ``topic`` with ``payload``.

        Handlers are started in subscription order. Use
        :meth:`wait_until_idle` to wait for them.
        """
        handlers = list(self._handlers(topic))
        if not handlers:
            self._logger.debug(f"No subscribers for topic '{topic}'")
            return

        for handler in handlers:
            task = asyncio.create_task(self._safe_dispatch(topic, handler, payload))
            self._pending_tasks.add(task)
            task.add_done_callback(self._pending_tasks.discard)

    async def wait_until_idle(self, timeout: float = 10.0) -> bool:
        """Wait for running handlers, including events they publish in turn.

        Returns:
            True once nothing is pending, False if ``timeout`` seconds passed first
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while self._pending_tasks:
            remaining = deadline - loop.time()
            if remaining <= 0:
                self._logger.warning(
                    f"EventBus: Timeout reached with {len(self._pending_tasks)} pending handler(s)"
                )
                return False
            await asyncio.wait(set(self._pending_tasks), timeout=remaining)
        return True

    async def _safe_dispatch(
        self,
        topic: str,
        handler: EventHandler,
        payload: EventPayload,
    ) -> None:
        handler_name = getattr(handler, "__name__", str(handler))
        try:
            await handler(payload)
        except Exception:
            self._logger.exception(f"EventBus handler error in '{handler_name}' for topic '{topic}'")

    def clear(self) -> None:
        """Remove all subscriptions."""
        for handlers in self._subscribers.values():
            handlers.clear()
