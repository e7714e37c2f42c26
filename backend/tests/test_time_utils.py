"""
PURPOSE: Tests for time utility functions.

Tests UTC clock access and ISO-8601 rendering used in alert timestamps.
"""

from datetime import datetime, timedelta, timezone

from app.utils.time_utils import get_utc_now, to_iso_z


class TestGetUtcNow:
    """Test UTC time retrieval."""

    def test_get_utc_now_is_timezone_aware(self):
        """Test that returned datetime is timezone-aware UTC."""
        now = get_utc_now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)


class TestToIsoZ:
    """Test ISO-8601 rendering."""

    def test_millisecond_precision_with_z(self):
        dt = datetime(2024, 3, 1, 14, 30, 5, 123456, tzinfo=timezone.utc)
        assert to_iso_z(dt) == "2024-03-01T14:30:05.123Z"

    def test_whole_seconds_keep_milliseconds(self):
        dt = datetime(2024, 3, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert to_iso_z(dt) == "2024-03-01T00:00:00.000Z"

    def test_converts_other_timezones_to_utc(self):
        eastern = timezone(timedelta(hours=-5))
        dt = datetime(2024, 3, 1, 9, 30, tzinfo=eastern)
        assert to_iso_z(dt) == "2024-03-01T14:30:00.000Z"

    def test_naive_is_treated_as_utc(self):
        assert to_iso_z(datetime(2024, 3, 1, 9, 30)) == "2024-03-01T09:30:00.000Z"
