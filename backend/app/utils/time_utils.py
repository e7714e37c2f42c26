"""
PURPOSE: Time utilities for alert timestamps.
All timestamps are UTC and rendered the way Discord and the upstream alert source expect.
"""

from datetime import datetime, timezone


def get_utc_now() -> datetime:
    """
    PURPOSE: Return the current UTC time as a timezone-aware datetime object.

    Returns:
        datetime: Current UTC time with timezone info.
    """
    return datetime.now(timezone.utc)


def to_iso_z(dt: datetime) -> str:
    """
    PURPOSE: Render a datetime as ISO-8601 UTC with millisecond precision and a "Z" suffix.

    Naive datetimes are assumed to already be UTC.

    Args:
        dt: Datetime to render.

    Returns:
        str: e.g. "2024-03-01T14:30:05.123Z".
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
