from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator

from ..core.constants import WEEKEND_WEEKDAYS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def count_working_days(start: date, end: date) -> int:
    """Number of dates in [start, end] that are not Saturday or Sunday."""
    return sum(1 for d in iter_dates(start, end) if d.weekday() not in WEEKEND_WEEKDAYS)


def day_bounds(work_date: date) -> tuple[datetime, datetime]:
    """Half-open [00:00, next day 00:00) window for one calendar date."""
    start = datetime.combine(work_date, time.min)
    return start, start + timedelta(days=1)


def format_duration(value: timedelta | None) -> str | None:
    """Render a duration as HH:MM:SS (negative durations keep a leading '-')."""
    if value is None:
        return None
    total = int(value.total_seconds())
    sign = "-" if total < 0 else ""
    total = abs(total)
    return f"{sign}{total // 3600:02d}:{(total % 3600) // 60:02d}:{total % 60:02d}"
