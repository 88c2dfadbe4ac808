"""Holiday calendar lookups.

A calendar is an immutable snapshot of the company holidays plus, optionally,
the national/state holidays published by the ``holidays`` package. Sync
workers build one snapshot per job and share it freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Optional, Sequence

import holidays as holidays_lib

from ..core.enums import HolidayType
from .model import Holiday


@lru_cache(maxsize=64)
def _official_holidays(country: str, subdiv: Optional[str], year: int) -> tuple[tuple[date, str], ...]:
    published = holidays_lib.country_holidays(country, subdiv=subdiv, years=year)
    return tuple(sorted(published.items()))


@dataclass(frozen=True)
class HolidayCalendar:
    holidays: tuple[Holiday, ...] = ()
    country: Optional[str] = None
    subdiv: Optional[str] = None

    @classmethod
    def of(cls, holidays: Sequence[Holiday], *, country: Optional[str] = None, subdiv: Optional[str] = None) -> "HolidayCalendar":
        return cls(holidays=tuple(holidays), country=country, subdiv=subdiv)

    def official_for_year(self, year: int) -> list[Holiday]:
        if not self.country:
            return []
        return [
            Holiday(holiday_id=None, holiday_date=d, name=name, holiday_type=HolidayType.NATIONAL)
            for d, name in _official_holidays(self.country, self.subdiv, year)
        ]


def holiday_for_date(day: date, calendar: HolidayCalendar) -> Optional[Holiday]:
    """First holiday matching ``day``: company holidays win over official ones."""
    for holiday in calendar.holidays:
        if holiday.matches(day):
            return holiday
    for holiday in calendar.official_for_year(day.year):
        if holiday.matches(day):
            return holiday
    return None


def is_holiday(day: date, calendar: HolidayCalendar) -> bool:
    return holiday_for_date(day, calendar) is not None


def holidays_for_year(year: int, calendar: HolidayCalendar) -> list[Holiday]:
    """All holidays of a year, recurring ones projected onto it, sorted by date."""
    items = [h.in_year(year) for h in calendar.holidays if h.applies_to_year(year)]
    seen = {h.holiday_date for h in items}
    items.extend(h for h in calendar.official_for_year(year) if h.holiday_date not in seen)
    return sorted(items, key=lambda h: (h.holiday_date, h.name))
