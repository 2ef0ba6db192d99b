"""Canonical event definitions for Postboard.

Every topic the application publishes on is listed in :data:`TOPICS`; the
EventBus refuses anything else.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, Dict, FrozenSet, Optional, TypeAlias

EventPayload: TypeAlias = Dict[str, Any]
EventHandler: TypeAlias = Callable[[EventPayload], Awaitable[None]]

# Shell topics
TOPIC_LOGS_EVENT = "logs.event"
TOPIC_NAV_SELECT = "nav.select"

# Cubit state changes
TOPIC_POSTS_STATE = "posts.state"
TOPIC_LOGIN_STATE = "login.state"

CUBIT_TOPICS: FrozenSet[str] = frozenset({TOPIC_POSTS_STATE, TOPIC_LOGIN_STATE})
TOPICS: FrozenSet[str] = frozenset({TOPIC_LOGS_EVENT, TOPIC_NAV_SELECT}) | CUBIT_TOPICS


def create_state_changed_event(
    cubit: str,
    status: str,
    message: Optional[str] = None,
    data: Any = None,
) -> EventPayload:
    """Create a cubit state-changed event.

    Args:
        cubit: Name of the emitting cubit (e.g. ``"posts"``)
        status: New status value
        message: Failure message, if any
        data: Success payload, if any
    """
    return {
        "cubit": cubit,
        "status": status,
        "message": message,
        "data": data,
    }


def create_log_event(message: str, level: str = "info") -> EventPayload:
    """Create a UI log panel entry."""
    return {"message": message, "level": level, "ts": time.time()}


def create_nav_select_event(route_id: str) -> EventPayload:
    return {"id": route_id}
