"""
Time-related utilities for the application.

All timestamps are serialized in UTC using ISO-8601 format
with timezone information.
"""

from datetime import datetime, timezone


def to_utc_iso(value: datetime | None) -> str | None:
    """Return ``value`` converted to UTC in ISO-8601 format.

    Naive datetimes are assumed to already be in UTC, which is how
    botocore reports ``LastModified`` when no tzinfo is attached.

    Example:
        2024-01-15T10:42:31+00:00
    """
    if value is None:
        return None

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    return value.astimezone(timezone.utc).isoformat()
