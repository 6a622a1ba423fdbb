from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, "%Y-%m").date()


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def end_of_month(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def each_day(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def at_time(day: date, at: time, *, extra_minutes: int = 0) -> datetime:
    return datetime.combine(day, at) + timedelta(minutes=extra_minutes)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated toward zero."""
    return int((end - start).total_seconds() / 60)


def to_local_naive(instant: datetime, tz: Optional[ZoneInfo] = None) -> datetime:
    """Convert an aware instant into naive local wall time.

    Naive values are assumed to already be local wall time. Without a zone the
    process local timezone is used.
    """
    if instant.tzinfo is None:
        return instant
    local = instant.astimezone(tz) if tz else instant.astimezone()
    return local.replace(tzinfo=None)
