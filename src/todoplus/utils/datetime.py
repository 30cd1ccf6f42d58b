"""Utilities for timestamp handling."""

from datetime import datetime, timedelta

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

# Finest directive first; the first one present sets the resolution
_RESOLUTIONS: tuple[tuple[tuple[str, ...], timedelta], ...] = (
    (("%f",), timedelta(0)),
    (("%S", "%T", "%X", "%c", "%s"), timedelta(seconds=1)),
    (("%M", "%R"), timedelta(minutes=1)),
    (("%H", "%I"), timedelta(hours=1)),
)


def now_local() -> datetime:
    """Get the current local time, truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


def format_timestamp(dt: datetime, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Format a datetime for a tag payload."""
    return dt.strftime(fmt)


def timestamp_resolution(fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> timedelta:
    """Smallest time step a format can express (a day for date-only formats)."""
    for directives, step in _RESOLUTIONS:
        if any(d in fmt for d in directives):
            return step
    return timedelta(days=1)


def parse_timestamp(value: str | None, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> datetime | None:
    """Parse a tag payload into a datetime.

    Tries the configured format first and falls back to ISO-8601.
    Returns None when the value can't be parsed.
    """
    if not value:
        return None
    value = value.strip()
    try:
        return datetime.strptime(value, fmt)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
