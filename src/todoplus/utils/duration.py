"""Parsing and formatting of compact durations like ``1h30m``."""

import re
from datetime import timedelta

_UNITS: dict[str, int] = {
    "w": 7 * 24 * 3600,
    "d": 24 * 3600,
    "h": 3600,
    "m": 60,
    "s": 1,
}

_PART = re.compile(r"(\d+(?:\.\d+)?)\s*([wdhms])", re.IGNORECASE)
_FULL = re.compile(r"^\s*(?:\d+(?:\.\d+)?\s*[wdhms]\s*)+$", re.IGNORECASE)


def parse_duration(value: str | None) -> timedelta | None:
    """Parse a compact duration string.

    Accepts any combination of w/d/h/m/s units ("2h", "1h30m", "1.5h").
    Returns None if the string isn't a duration.
    """
    if not value or not _FULL.match(value):
        return None
    seconds = 0.0
    for amount, unit in _PART.findall(value):
        seconds += float(amount) * _UNITS[unit.lower()]
    return timedelta(seconds=round(seconds))


def format_duration(delta: timedelta) -> str:
    """Format a duration like ``2d3h15m``.

    Seconds are only written when the total isn't a whole number of
    minutes, so ``1h`` stays ``1h`` and ``2m30s`` isn't rounded away.
    Empty or negative durations format as ``0m``.
    """
    seconds = int(round(delta.total_seconds()))
    if seconds <= 0:
        return "0m"
    days, seconds = divmod(seconds, 24 * 3600)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds:
        parts.append(f"{seconds}s")
    return "".join(parts)
