"""Utility functions."""

from .datetime import (
    DEFAULT_TIMESTAMP_FORMAT,
    format_timestamp,
    now_local,
    parse_timestamp,
    timestamp_resolution,
)
from .duration import format_duration, parse_duration

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "format_duration",
    "format_timestamp",
    "now_local",
    "parse_duration",
    "parse_timestamp",
    "timestamp_resolution",
]
