"""Tests for the four-state transition table of PostsCubit and LoginCubit."""
import asyncio
import logging
from typing import List

import httpx
import pytest

from postboard.app.state import LoginCubit, PostsCubit, ViewState, ViewStatus
from postboard.app.state.cubit import UNEXPECTED_ERROR
from postboard.app.state.login_cubit import MISSING_CREDENTIALS
from postboard.shared.core import events
from postboard.shared.domain.models import Post, User
from postboard.shared.infrastructure.http import RequestFailedError, NetworkError
from postboard.shared.infrastructure.repositories import PostRepository


# =============================================================================
# Fakes
# =============================================================================

class FakePostRepository:
    def __init__(self, results):
        # Each item is either a list of posts or an exception to raise
        self.results = list(results)
        self.calls = 0
        self.gate = None

    async def fetch_posts(self) -> List[Post]:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class FakeAuthRepository:
    def __init__(self, result):
        self.result = result
        self.calls = []

    async def login(self, email: str, password: str) -> User:
        self.calls.append((email, password))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def record(cubit) -> List[ViewStatus]:
    statuses: List[ViewStatus] = []
    cubit.listen(lambda state: statuses.append(state.status))
    return statuses


@pytest.fixture
def posts(posts_payload) -> List[Post]:
    return Post.list_from_json(posts_payload)


# =============================================================================
# PostsCubit
# =============================================================================

@pytest.mark.asyncio
async def test_posts_cubit_starts_initial(event_bus):
    cubit = PostsCubit(event_bus, FakePostRepository([]))

    assert cubit.state == ViewState.initial()
    assert cubit.status.value == "initial"


@pytest.mark.asyncio
async def test_posts_cubit_success(event_bus, posts):
    cubit = PostsCubit(event_bus, FakePostRepository([posts]))
    statuses = record(cubit)

    await cubit.fetch_posts()

    assert statuses == [ViewStatus.LOADING, ViewStatus.SUCCESS]
    assert cubit.state.data == posts
    assert cubit.state.message is None
    assert cubit.status.value == "success"
    assert list(cubit.posts.value) == posts


@pytest.mark.asyncio
async def test_posts_cubit_failure(event_bus):
    repository = FakePostRepository([RequestFailedError("Failed to load posts", status_code=500)])
    cubit = PostsCubit(event_bus, repository)
    statuses = record(cubit)

    await cubit.fetch_posts()

    assert statuses == [ViewStatus.LOADING, ViewStatus.FAILURE]
    assert cubit.state.message == "Failed to load posts"
    assert cubit.state.data is None
    assert cubit.message.value == "Failed to load posts"


@pytest.mark.asyncio
async def test_posts_cubit_retry_after_failure(event_bus, posts):
    repository = FakePostRepository([NetworkError("Network error: ConnectError"), posts])
    cubit = PostsCubit(event_bus, repository)
    statuses = record(cubit)

    await cubit.fetch_posts()
    await cubit.fetch_posts()

    assert statuses == [
        ViewStatus.LOADING, ViewStatus.FAILURE,
        ViewStatus.LOADING, ViewStatus.SUCCESS,
    ]
    assert cubit.message.value == ""
    assert repository.calls == 2


@pytest.mark.asyncio
async def test_posts_cubit_refetch_from_success(event_bus, posts):
    repository = FakePostRepository([posts, RequestFailedError("Failed to load posts", 404)])
    cubit = PostsCubit(event_bus, repository)

    await cubit.fetch_posts()
    await cubit.fetch_posts()

    assert cubit.state.status is ViewStatus.FAILURE
    assert list(cubit.posts.value) == []


@pytest.mark.asyncio
async def test_posts_cubit_ignores_fetch_while_loading(event_bus, posts):
    repository = FakePostRepository([posts])
    repository.gate = asyncio.Event()
    cubit = PostsCubit(event_bus, repository)

    first = asyncio.create_task(cubit.fetch_posts())
    await asyncio.sleep(0)
    assert cubit.state.status is ViewStatus.LOADING

    await cubit.fetch_posts()
    repository.gate.set()
    await first

    assert repository.calls == 1
    assert cubit.state.status is ViewStatus.SUCCESS


@pytest.mark.asyncio
async def test_posts_cubit_unexpected_errors_propagate(event_bus, posts):
    repository = FakePostRepository([KeyError("bug"), posts])
    cubit = PostsCubit(event_bus, repository)
    statuses = record(cubit)

    with pytest.raises(KeyError):
        await cubit.fetch_posts()

    assert cubit.state == ViewState.failure(UNEXPECTED_ERROR)

    # Not stuck in LOADING: the next fetch reaches the repository
    await cubit.fetch_posts()

    assert repository.calls == 2
    assert statuses == [
        ViewStatus.LOADING, ViewStatus.FAILURE,
        ViewStatus.LOADING, ViewStatus.SUCCESS,
    ]


@pytest.mark.asyncio
async def test_posts_cubit_cancelled_fetch_leaves_loading(event_bus, posts):
    repository = FakePostRepository([posts, posts])
    repository.gate = asyncio.Event()
    cubit = PostsCubit(event_bus, repository)

    task = asyncio.create_task(cubit.fetch_posts())
    await asyncio.sleep(0)
    assert cubit.state.status is ViewStatus.LOADING

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert cubit.state.status is ViewStatus.FAILURE

    repository.gate.set()
    await cubit.fetch_posts()
    assert repository.calls == 2
    assert cubit.state.status is ViewStatus.SUCCESS


@pytest.mark.asyncio
async def test_raising_listener_does_not_block_others(event_bus, posts, caplog):
    received = []

    async def on_state(payload):
        received.append(payload["status"])

    def broken(state):
        raise RuntimeError("listener bug")

    event_bus.subscribe(events.TOPIC_POSTS_STATE, on_state)
    cubit = PostsCubit(event_bus, FakePostRepository([posts]))
    cubit.listen(broken)
    statuses = record(cubit)

    await cubit.fetch_posts()
    await event_bus.wait_until_idle()

    assert statuses == [ViewStatus.LOADING, ViewStatus.SUCCESS]
    assert received == ["loading", "success"]
    assert cubit.state.status is ViewStatus.SUCCESS
    assert "state listener 'broken' failed" in caplog.text


@pytest.mark.asyncio
async def test_repository_warnings_survive_cubit_emits(event_bus, make_transport, make_clients, caplog):
    transport = make_transport(lambda request: httpx.Response(500))
    cubit = PostsCubit(event_bus, PostRepository(make_clients(transport)))

    with caplog.at_level(logging.WARNING):
        await cubit.fetch_posts()
        await cubit.fetch_posts()

    assert logging.root.manager.disable == logging.NOTSET
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert warnings == ["Fetching posts returned HTTP 500"] * 2
    assert cubit.state.status is ViewStatus.FAILURE


@pytest.mark.asyncio
async def test_posts_cubit_publishes_state_events(event_bus, posts):
    received = []

    async def on_state(payload):
        received.append(payload)

    event_bus.subscribe(events.TOPIC_POSTS_STATE, on_state)
    cubit = PostsCubit(event_bus, FakePostRepository([posts]))

    await cubit.fetch_posts()
    await event_bus.wait_until_idle()

    assert [p["status"] for p in received] == ["loading", "success"]
    assert received[1]["cubit"] == "posts"
    assert received[1]["data"] == {"count": 2}


@pytest.mark.asyncio
async def test_emit_same_state_is_noop(event_bus):
    cubit = PostsCubit(event_bus, FakePostRepository([]))
    statuses = record(cubit)

    await cubit.emit(ViewState.initial())

    assert statuses == []


@pytest.mark.asyncio
async def test_listen_cancel(event_bus, posts):
    cubit = PostsCubit(event_bus, FakePostRepository([posts]))
    statuses = []
    cancel = cubit.listen(lambda state: statuses.append(state.status))
    cancel()

    await cubit.fetch_posts()

    assert statuses == []


# =============================================================================
# LoginCubit
# =============================================================================

@pytest.mark.asyncio
async def test_login_cubit_success(event_bus):
    user = User(email="eve@example.com", token="tok")
    repository = FakeAuthRepository(user)
    cubit = LoginCubit(event_bus, repository)
    statuses = record(cubit)

    await cubit.login(" eve@example.com ", "pistol")

    assert statuses == [ViewStatus.LOADING, ViewStatus.SUCCESS]
    assert repository.calls == [("eve@example.com", "pistol")]
    assert cubit.user == user
    assert cubit.user_email.value == "eve@example.com"
    assert cubit.is_authenticated.value is True


@pytest.mark.asyncio
async def test_login_cubit_failure(event_bus):
    repository = FakeAuthRepository(RequestFailedError("Failed to login: user not found", 400))
    cubit = LoginCubit(event_bus, repository)
    statuses = record(cubit)

    await cubit.login("nobody@example.com", "x")

    assert statuses == [ViewStatus.LOADING, ViewStatus.FAILURE]
    assert cubit.state.message == "Failed to login: user not found"
    assert cubit.is_authenticated.value is False


@pytest.mark.asyncio
async def test_login_cubit_unexpected_error_leaves_loading(event_bus):
    repository = FakeAuthRepository(TypeError("bug"))
    cubit = LoginCubit(event_bus, repository)

    with pytest.raises(TypeError):
        await cubit.login("eve@example.com", "pistol")

    assert cubit.state == ViewState.failure(UNEXPECTED_ERROR)
    assert cubit.is_authenticated.value is False

    repository.result = User(email="eve@example.com", token="tok")
    await cubit.login("eve@example.com", "pistol")

    assert len(repository.calls) == 2
    assert cubit.state.status is ViewStatus.SUCCESS


@pytest.mark.asyncio
@pytest.mark.parametrize("email,password", [("", "pistol"), ("   ", "pistol"), ("eve@example.com", "")])
async def test_login_cubit_requires_credentials(event_bus, email, password):
    repository = FakeAuthRepository(User(email="eve@example.com", token="tok"))
    cubit = LoginCubit(event_bus, repository)

    await cubit.login(email, password)

    assert repository.calls == []
    assert cubit.state == ViewState.failure(MISSING_CREDENTIALS)


@pytest.mark.asyncio
async def test_login_cubit_logout(event_bus):
    cubit = LoginCubit(event_bus, FakeAuthRepository(User(email="eve@example.com", token="tok")))
    await cubit.login("eve@example.com", "pistol")

    await cubit.logout()

    assert cubit.state.status is ViewStatus.INITIAL
    assert cubit.user is None
    assert cubit.user_email.value == ""
    assert cubit.is_authenticated.value is False


@pytest.mark.asyncio
async def test_login_event_omits_token(event_bus):
    received = []

    async def on_state(payload):
        received.append(payload)

    event_bus.subscribe(events.TOPIC_LOGIN_STATE, on_state)
    cubit = LoginCubit(event_bus, FakeAuthRepository(User(email="eve@example.com", token="secret")))

    await cubit.login("eve@example.com", "pistol")
    await event_bus.wait_until_idle()

    assert received[-1]["data"] == {"email": "eve@example.com"}
    assert "secret" not in repr(received)
