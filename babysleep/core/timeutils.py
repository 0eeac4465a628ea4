"""
Time helpers.

All timestamps are handled as timezone-aware UTC datetimes.  Some
database drivers (SQLite) hand back naive values; :func:`as_utc` is
applied wherever a stored timestamp leaves the repository layer.
"""

import datetime
from typing import Optional

from babysleep.core.rounding import round_half_up


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def as_utc(value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    """Normalise *value* to an aware UTC datetime.

    Naive datetimes are taken to already be in UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def minutes_between(start: datetime.datetime, end: datetime.datetime) -> float:
    """Elapsed minutes from *start* to *end* (fractional)."""
    return (as_utc(end) - as_utc(start)).total_seconds() / 60


def compute_duration_minutes(start: datetime.datetime, end: Optional[datetime.datetime]) -> Optional[int]:
    """Derived ``duration_minutes`` of a session.

    ``None`` while the session is open.
    """
    if end is None:
        return None
    return round_half_up(minutes_between(start, end))
