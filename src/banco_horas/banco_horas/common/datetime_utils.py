from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: str) -> time:
    """Parse "HH:MM" or "HH:MM:SS" into a time of day."""
    value = value.strip()
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def format_time_of_day(value: time | None) -> str | None:
    return value.strftime("%H:%M") if value else None


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def format_minutes(minutes: int | None, *, signed: bool = False) -> str:
    """Format minutes as "Xh Ymin" ("-" when there is nothing to show)."""
    if minutes is None:
        return "-"
    sign = ""
    if signed:
        sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(int(minutes)), 60)
    if hours == 0:
        return f"{sign}{mins}min"
    if mins == 0:
        return f"{sign}{hours}h"
    return f"{sign}{hours}h {mins}min"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
