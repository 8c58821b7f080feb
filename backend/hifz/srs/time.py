"""UTC time helpers for review scheduling.

Timestamps produced by this module are UTC ISO strings ending with 'Z', with
second precision: YYYY-MM-DDTHH:MM:SSZ. Due dates are calendar dates
(YYYY-MM-DD) taken in UTC.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Callable


# Supplies "now"; injected so scheduling never reads the wall clock itself.
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return timezone-aware UTC 'now'."""
    return datetime.now(timezone.utc)


def utc_datetime_to_iso_z(dt: datetime) -> str:
    """Format a datetime as UTC ISO string with second precision and trailing 'Z'."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    dt = dt.replace(microsecond=0)
    return dt.isoformat().replace("+00:00", "Z")


def parse_iso_z(s: str) -> datetime:
    """Parse an ISO-8601 string ending with 'Z' (or '+00:00') into UTC datetime.

    Accepts both second precision and fractional seconds.
    """
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_date(value: datetime | date) -> date:
    """Return the UTC calendar date of a datetime (naive means UTC), or a date unchanged."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def date_to_iso(day: date) -> str:
    return day.isoformat()


def parse_iso_date(s: str) -> date:
    """Parse YYYY-MM-DD. A full timestamp is accepted and reduced to its UTC date."""
    if len(s) > 10:
        return utc_date(parse_iso_z(s))
    return date.fromisoformat(s)


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)
