"""
Shared Core Module
==================

Event system and configuration.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Configuration
from .configuration import (
    ApiConfig,
    ConfigManager,
    SystemConfig,
    UIConfig,
    ValidationLevel,
    get_config,
    get_config_manager,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Configuration
    "ApiConfig",
    "ConfigManager",
    "SystemConfig",
    "UIConfig",
    "ValidationLevel",
    "get_config",
    "get_config_manager",
]
