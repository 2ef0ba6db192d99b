"""Shared fixtures for Postboard tests.

HTTP is never real: repositories get an ``httpx.MockTransport`` whose
handler each test supplies.
"""
import os

# Must precede the first fletx import, or FletX disables logging for the run
os.environ.setdefault("FLETX_ENABLE_LOGGING", "1")

from typing import Callable, Dict, List  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from postboard.shared.core.configuration import ApiConfig, SystemConfig  # noqa: E402
from postboard.shared.core.event_bus import EventBus  # noqa: E402
from postboard.shared.infrastructure.http import ClientFactory  # noqa: E402

POSTS_URL = "https://api.test/posts"
LOGIN_URL = "https://api.test/login"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def posts_payload() -> List[Dict]:
    return [
        {"userId": 1, "id": 1, "title": "first title", "body": "first body"},
        {"userId": 1, "id": 2, "title": "second title", "body": "second body"},
    ]


@pytest.fixture
def api_config() -> ApiConfig:
    return ApiConfig(posts_url=POSTS_URL, login_url=LOGIN_URL, timeout=5.0)


@pytest.fixture
def system_config(api_config: ApiConfig) -> SystemConfig:
    return SystemConfig(api=api_config)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Handler):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport() -> Callable[[Handler], RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def make_clients(api_config: ApiConfig) -> Callable[[httpx.AsyncBaseTransport], ClientFactory]:
    def _make(transport: httpx.AsyncBaseTransport) -> ClientFactory:
        return ClientFactory(api_config, transport=transport)
    return _make
