"""Login state."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fletx.core import RxBool, RxStr

from postboard.shared.core import events
from postboard.shared.core.event_bus import EventBus
from postboard.shared.domain.models import User
from postboard.shared.infrastructure.repositories import AuthRepository
from .cubit import Cubit
from .view_state import ViewState

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Email and password are required"


class LoginCubit(Cubit[User]):
    """Maps ``AuthRepository.login`` onto the four view states."""

    name = "login"
    topic = events.TOPIC_LOGIN_STATE

    def __init__(self, event_bus: EventBus, repository: AuthRepository) -> None:
        super().__init__(event_bus)
        self.repository = repository
        self.user_email: RxStr = RxStr("")
        self.is_authenticated: RxBool = RxBool(False)

    @property
    def user(self) -> Optional[User]:
        return self.state.data

    async def login(self, email: str, password: str) -> None:
        """Log in: LOADING, then SUCCESS(user) or FAILURE(message).

        Blank credentials fail straight away without a request.
        """
        if self.state.is_loading:
            logger.debug("login ignored: request already in flight")
            return

        email = (email or "").strip()
        if not email or not password:
            await self.emit(ViewState.failure(MISSING_CREDENTIALS))
            return

        await self._load(lambda: self.repository.login(email, password))

    async def logout(self) -> None:
        await self.reset()

    def _mirror(self, state: ViewState[User]) -> None:
        user = state.data
        self.user_email.value = user.email if user else ""
        self.is_authenticated.value = user is not None

    def _event_data(self, state: ViewState[User]) -> Any:
        # Never put the token on the bus
        return {"email": state.data.email} if state.data else None
