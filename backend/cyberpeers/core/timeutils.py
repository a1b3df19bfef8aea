"""
Timestamp helpers.

Timestamps are stored as ISO-8601 UTC strings, e.g. ``2024-05-01T10:20:30.123Z``.
"""
import math
from datetime import datetime, timezone
from typing import Optional, Union

SECONDS_PER_DAY = 60 * 60 * 24

Instant = Union[str, datetime, None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """Render a datetime as an ISO string with millisecond precision and ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return to_iso(utc_now())


def parse_instant(value: Instant) -> Optional[datetime]:
    """
    Parse a stored timestamp into an aware datetime.

    Naive values are treated as UTC. Returns None for missing or
    unparseable values.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def days_since(instant: Instant, now: Optional[datetime] = None) -> Optional[int]:
    """
    Whole days elapsed between ``instant`` and ``now``.

    Floors the difference, so 25 hours is 1 day and an instant in the future
    gives a negative number.

    Args:
        instant: Stored timestamp (ISO string or datetime)
        now: Reference time, defaults to the current UTC time

    Returns:
        Elapsed whole days, or None if ``instant`` is missing or malformed
    """
    start = parse_instant(instant)
    if start is None:
        return None
    if now is None:
        now = utc_now()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return math.floor((now - start).total_seconds() / SECONDS_PER_DAY)
