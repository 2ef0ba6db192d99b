"""Cubit - observable holder of a single ViewState.

A cubit replaces its whole state on every transition. Screens bind to the
FletXr mirrors (``status``, ``message``) or register a callback with
:meth:`Cubit.listen`; other components follow the EventBus topic.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, List, TypeVar

from fletx.core import RxStr

from postboard.shared.core import events
from postboard.shared.core.event_bus import EventBus
from postboard.shared.infrastructure.http import RepositoryError
from .view_state import ViewState

T = TypeVar("T")
StateListener = Callable[[ViewState[Any]], None]

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "Unexpected error"


class Cubit(Generic[T]):
    """Base class for state containers.

    Subclasses set ``name`` and ``topic`` and may override
    :meth:`_mirror` to push state data into extra reactive fields.
    """

    name: str = "cubit"
    topic: str = ""

    def __init__(self, event_bus: EventBus) -> None:
        self.bus = event_bus
        self._state: ViewState[T] = ViewState.initial()
        self._listeners: List[StateListener] = []

        # Reactive mirrors for Flet bindings
        self.status: RxStr = RxStr(self._state.status.value)
        self.message: RxStr = RxStr("")

    @property
    def state(self) -> ViewState[T]:
        return self._state

    def listen(self, callback: StateListener) -> Callable[[], None]:
        """Register a callback invoked with every new state.

        Returns:
            A function that removes the callback
        """
        self._listeners.append(callback)

        def _cancel() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return _cancel

    async def emit(self, state: ViewState[T]) -> None:
        """Replace the current state and notify observers.

        Emitting a state equal to the current one does nothing.
        """
        if state == self._state:
            return

        logger.debug(f"{self.name}: {self._state.status.value} -> {state.status.value}")
        self._state = state

        self._mirror(state)
        self.message.value = state.message or ""
        # Status last, so bindings reading other fields see the new values
        self.status.value = state.status.value

        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                listener_name = getattr(listener, "__name__", str(listener))
                logger.exception(f"{self.name}: state listener '{listener_name}' failed")

        if self.topic:
            await self.bus.publish(
                self.topic,
                events.create_state_changed_event(
                    cubit=self.name,
                    status=state.status.value,
                    message=state.message,
                    data=self._event_data(state),
                ),
            )

    async def _load(self, request: Callable[[], Awaitable[T]]) -> None:
        """Emit LOADING, await ``request`` and emit SUCCESS or FAILURE.

        A ``RepositoryError`` becomes FAILURE with its message. Anything else
        (a bug, or the task being cancelled) emits FAILURE(UNEXPECTED_ERROR)
        and is re-raised, so the cubit never stays in LOADING.
        """
        await self.emit(ViewState.loading())
        try:
            data = await request()
        except RepositoryError as e:
            await self.emit(ViewState.failure(str(e)))
            return
        except (Exception, asyncio.CancelledError):
            await self.emit(ViewState.failure(UNEXPECTED_ERROR))
            raise

        await self.emit(ViewState.success(data))

    def _mirror(self, state: ViewState[T]) -> None:
        """Hook for subclasses to update their own reactive fields."""

    def _event_data(self, state: ViewState[T]) -> Any:
        """Summary of ``state.data`` placed in the state-changed event."""
        return None

    async def reset(self) -> None:
        await self.emit(ViewState.initial())
