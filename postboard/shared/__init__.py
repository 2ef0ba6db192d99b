"""
Postboard Shared Kernel
=======================

Non-UI logic used by the application layer.

Architecture:
- core: EventBus, events, configuration
- domain: Post / User records
- infrastructure: HTTP client factory, errors, repositories
"""

__all__ = []
