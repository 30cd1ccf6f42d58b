"""Configuration and runtime state."""

from .runtime import (
    RuntimeState,
    get_runtime,
    init_runtime,
    is_timer_enabled,
    set_timer_enabled,
    toggle_timer,
)
from .settings import Settings

__all__ = [
    "RuntimeState",
    "Settings",
    "get_runtime",
    "init_runtime",
    "is_timer_enabled",
    "set_timer_enabled",
    "toggle_timer",
]
