"""Global State Store - Service Locator Pattern.

Wires one repository into each cubit and gives UI components a single
place to reach shared state.
"""

from __future__ import annotations

from typing import Optional

import httpx

from postboard.shared.core.configuration import SystemConfig
from postboard.shared.core.event_bus import EventBus
from postboard.shared.infrastructure.http import ClientFactory
from postboard.shared.infrastructure.repositories import AuthRepository, PostRepository
from .app_state import AppState
from .login_cubit import LoginCubit
from .posts_cubit import PostsCubit


class Store:
    """Global state store for the application.

    Usage:
        # During app initialization
        store = Store.initialize(event_bus, config)
        store.app.initialize()

        # In any UI component
        store = Store.get()
        await store.posts.fetch_posts()
    """

    _instance: Optional['Store'] = None

    def __init__(
        self,
        event_bus: EventBus,
        config: SystemConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Build state objects and their repositories.

        Note: Do not call directly. Use Store.initialize() instead.

        Args:
            event_bus: The shared event bus instance
            config: Validated system configuration
            transport: Optional httpx transport override, used by tests
        """
        self.config = config
        clients = ClientFactory(config.api, transport=transport)

        self.app = AppState(event_bus, max_log_entries=config.ui.max_log_entries)
        self.posts = PostsCubit(event_bus, PostRepository(clients))
        self.login = LoginCubit(event_bus, AuthRepository(clients))

    @property
    def bus(self) -> EventBus:
        return self.app.bus

    @classmethod
    def initialize(
        cls,
        event_bus: EventBus,
        config: SystemConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> 'Store':
        """Initialize the global store instance.

        Raises:
            RuntimeError: If store is already initialized
        """
        if cls._instance is not None:
            raise RuntimeError("Store already initialized!")

        cls._instance = cls(event_bus, config, transport)
        return cls._instance

    @classmethod
    def get(cls) -> 'Store':
        """Get the global store instance.

        Raises:
            RuntimeError: If store has not been initialized
        """
        if cls._instance is None:
            raise RuntimeError("Store not initialized! Call Store.initialize() first.")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the global instance. Used by tests."""
        cls._instance = None
