"""Wall-clock access. Time-dependent functions take an optional `now`."""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Return `now` in UTC, reading the clock once if it was not supplied."""
    if now is None:
        return utc_now()
    return as_utc(now)
