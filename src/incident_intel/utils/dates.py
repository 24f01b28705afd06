"""UTC helpers for bucketing incidents by calendar day."""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_day(value: datetime) -> date:
    """Calendar day of `value` in UTC."""
    return as_utc(value).date()


def window_start(days: int, now: Optional[datetime] = None) -> datetime:
    """
    Start of a trailing window of `days` whole days.

    The window begins at UTC midnight `days` days before the current UTC day,
    so `days=7` on a Friday afternoon starts at the previous Friday 00:00 UTC.

    Args:
        days: Window length in days
        now: Reference time (default: current time)

    Returns:
        Timezone-aware UTC datetime
    """
    today = utc_day(now or datetime.now(timezone.utc))
    return datetime.combine(today - timedelta(days=days), time.min, tzinfo=timezone.utc)
