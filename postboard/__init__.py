"""Postboard package."""

import os

# Must be set before fletx is first imported, or FletX turns off logging
# for the whole process.
os.environ.setdefault("FLETX_ENABLE_LOGGING", "1")

__version__ = "0.1.0"

from .shared.core.event_bus import EventBus  # noqa: E402

__all__ = ["EventBus", "__version__"]
