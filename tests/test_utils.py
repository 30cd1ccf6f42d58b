"""Tests for duration and timestamp helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from todoplus.utils import (
    format_duration,
    format_timestamp,
    now_local,
    parse_duration,
    parse_timestamp,
    timestamp_resolution,
)


class TestParseDuration:
    """Tests for parse_duration()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2h", timedelta(hours=2)),
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("1.5h", timedelta(hours=1, minutes=30)),
            ("2d3h15m", timedelta(days=2, hours=3, minutes=15)),
            ("1w", timedelta(weeks=1)),
            ("45s", timedelta(seconds=45)),
            ("1H", timedelta(hours=1)),
        ],
    )
    def test_valid(self, value: str, expected: timedelta):
        """Unit combinations add up."""
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", [None, "", "soon", "2", "h2", "2h later"])
    def test_invalid(self, value):
        """Non-durations give None."""
        assert parse_duration(value) is None


class TestFormatDuration:
    """Tests for format_duration()."""

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(hours=1, minutes=30), "1h30m"),
            (timedelta(hours=2), "2h"),
            (timedelta(days=2, hours=3, minutes=15), "2d3h15m"),
            (timedelta(minutes=2, seconds=30), "2m30s"),
            (timedelta(hours=1, seconds=5), "1h5s"),
            (timedelta(seconds=30), "30s"),
            (timedelta(0), "0m"),
            (timedelta(seconds=-5), "0m"),
        ],
    )
    def test_format(self, delta: timedelta, expected: str):
        """Whole minutes drop the seconds part; leftover seconds are kept."""
        assert format_duration(delta) == expected


class TestTimestamps:
    """Tests for timestamp helpers."""

    def test_format(self):
        """The default format has minute resolution."""
        assert format_timestamp(datetime(2024, 1, 1, 9, 5)) == "2024-01-01 09:05"

    def test_parse_configured_format(self):
        """Timestamps in the configured format parse."""
        assert parse_timestamp("01/02/24 10:00", "%d/%m/%y %H:%M") == datetime(2024, 2, 1, 10, 0)

    def test_parse_iso_fallback(self):
        """ISO timestamps parse regardless of the configured format."""
        parsed = parse_timestamp("2024-01-01T10:00:00Z")
        assert parsed == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, "", "yesterday"])
    def test_parse_invalid(self, value):
        """Unparseable values give None."""
        assert parse_timestamp(value) is None

    def test_now_local_has_no_microseconds(self):
        """The clock is truncated to whole seconds."""
        assert now_local().microsecond == 0

    @pytest.mark.parametrize(
        ("fmt", "expected"),
        [
            ("%Y-%m-%d %H:%M", timedelta(minutes=1)),
            ("%Y-%m-%d %H:%M:%S", timedelta(seconds=1)),
            ("%d/%m/%y %Hh", timedelta(hours=1)),
            ("%d/%m/%y", timedelta(days=1)),
        ],
    )
    def test_resolution(self, fmt: str, expected: timedelta):
        """The finest directive in a format sets its resolution."""
        assert timestamp_resolution(fmt) == expected
