"""
UTC datetime utilities.

Every timestamp in the system (OTP expiries, created_at, JWT exp) is a
timezone-aware UTC datetime. Use these helpers instead of datetime.now()
or datetime.utcnow().
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Normalize a datetime read from persistence to UTC-aware.

    - None stays None
    - Naive values are assumed to be UTC (some drivers drop tzinfo)
    - Aware values are converted to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
