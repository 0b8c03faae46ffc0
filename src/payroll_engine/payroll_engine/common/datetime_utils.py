from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Iterator, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ConfigurationError, ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def get_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ConfigurationError(f"Unknown time zone: {name!r}")


def to_local(value: datetime, zone: tzinfo) -> datetime:
    """Express a timestamp as wall-clock time in ``zone``.

    Naive timestamps are already wall-clock values in the shift's zone.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def to_utc(value: datetime, zone: tzinfo) -> datetime:
    """Absolute instant in UTC; naive timestamps are read as wall-clock time in ``zone``."""
    return to_local(value, zone).astimezone(timezone.utc)


def now_local(zone: Optional[tzinfo] = None) -> datetime:
    """Current time in ``zone``.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(zone)


def weekday_index(day: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (day.weekday() + 1) % 7


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Every calendar date in the inclusive range."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start``'s month to ``end``'s month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def format_duration(value: timedelta) -> str:
    """Format as "Xh Ym", the way attendance history displays worked time."""
    minutes = int(value.total_seconds() // 60)
    return f"{minutes // 60}h {minutes % 60}m"
