"""Process-wide runtime state.

State lives in one object created by :func:`init_runtime`; everything
else reads and writes it through the accessors below.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class RuntimeState:
    """Mutable state shared by all commands in one process."""

    timer_enabled: bool = True


_state: RuntimeState | None = None


def init_runtime(settings: Settings | None = None) -> RuntimeState:
    """Create (or reset) the runtime state from settings."""
    global _state
    settings = settings or Settings()
    _state = RuntimeState(timer_enabled=settings.timer)
    logger.debug("Runtime initialized (timer=%s)", _state.timer_enabled)
    return _state


def get_runtime() -> RuntimeState:
    """Return the runtime state, initializing it with defaults if needed."""
    if _state is None:
        return init_runtime()
    return _state


def is_timer_enabled() -> bool:
    return get_runtime().timer_enabled


def set_timer_enabled(enabled: bool) -> None:
    get_runtime().timer_enabled = enabled
    logger.info("Timer %s", "enabled" if enabled else "disabled")


def toggle_timer() -> bool:
    """Flip the timer flag and return the new value."""
    set_timer_enabled(not is_timer_enabled())
    return is_timer_enabled()
