"""Application Shell State Management.

Navigation, status line and log panel for the shell, as FletXr reactive
fields fed from EventBus events.
"""

from __future__ import annotations

from typing import Any, Dict, List

from fletx.core import RxBool, RxList, RxStr

from postboard.shared.core import events
from postboard.shared.core.event_bus import EventBus, EventPayload

NAV_ITEMS: List[Dict[str, str]] = [
    {"id": "posts", "label": "Posts", "icon": "article"},
    {"id": "login", "label": "Login", "icon": "login"},
]

# cubit name -> status -> (status line, log level)
_STATUS_LINES: Dict[str, Dict[str, tuple]] = {
    "posts": {
        "loading": ("Loading posts...", "info"),
        "success": ("Posts loaded", "success"),
        "failure": ("Failed to load posts", "error"),
    },
    "login": {
        "initial": ("Signed out", "info"),
        "loading": ("Signing in...", "info"),
        "success": ("Signed in", "success"),
        "failure": ("Login failed", "error"),
    },
}


class AppState:
    """Reactive state for the application shell.

    Subscribes to EventBus topics and updates reactive properties that the
    shell layout listens to.
    """

    def __init__(self, event_bus: EventBus, max_log_entries: int = 100) -> None:
        """
        Args:
            event_bus: The shared event bus
            max_log_entries: Oldest log entries are dropped beyond this size
        """
        self.bus = event_bus
        self.max_log_entries = max_log_entries

        # Navigation State
        self.nav_items: RxList[Dict[str, str]] = RxList([dict(item) for item in NAV_ITEMS])
        self.nav_selected: RxStr = RxStr(NAV_ITEMS[0]["id"])

        # Status & Readiness
        self.is_ready: RxBool = RxBool(False)
        self.status_text: RxStr = RxStr("Ready")

        # Log entries (each is a dict: {message, level, ts})
        self.logs: RxList[Dict[str, Any]] = RxList([])

        self._started = False

    def initialize(self) -> None:
        """Bind to EventBus topics. Safe to call more than once."""
        if self._started:
            return

        self.bus.subscribe(events.TOPIC_NAV_SELECT, self._handle_nav_select)
        self.bus.subscribe(events.TOPIC_LOGS_EVENT, self._handle_log_event)
        for topic in events.CUBIT_TOPICS:
            self.bus.subscribe(topic, self._handle_cubit_state)

        self._started = True
        self.is_ready.value = True

    # --- Public Actions ---

    def set_nav(self, route_id: str) -> None:
        """Change the selected navigation route."""
        if route_id in {item["id"] for item in self.nav_items.value}:
            self.nav_selected.value = route_id

    async def publish(self, topic: str, payload: EventPayload) -> None:
        await self.bus.publish(topic, payload)

    async def push_log(self, message: str, level: str = "info") -> None:
        """Publish a log line for the log panel."""
        await self.publish(events.TOPIC_LOGS_EVENT, events.create_log_event(message, level))

    # --- Event Handlers ---

    async def _handle_nav_select(self, payload: EventPayload) -> None:
        selection = payload.get("id")
        if selection:
            self.set_nav(str(selection))

    async def _handle_log_event(self, payload: EventPayload) -> None:
        if not payload:
            return
        entries = list(self.logs.value)
        entries.append(payload)
        self.logs.value = entries[-self.max_log_entries:]

    async def _handle_cubit_state(self, payload: EventPayload) -> None:
        """Turn cubit transitions into a status line and a log entry."""
        cubit = payload.get("cubit", "")
        status = payload.get("status", "")
        line = _STATUS_LINES.get(cubit, {}).get(status)
        if line is None:
            return

        text, level = line
        data = payload.get("data") or {}
        if status == "success" and "count" in data:
            text = f"Loaded {data['count']} posts"
        elif status == "success" and "email" in data:
            text = f"Signed in as {data['email']}"
        elif status == "failure" and payload.get("message"):
            text = str(payload["message"])

        self.status_text.value = text
        await self._append_log(text, level)

    async def _append_log(self, message: str, level: str) -> None:
        await self._handle_log_event(events.create_log_event(message, level))
