from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..core.enums import HolidayType


@dataclass(frozen=True)
class Holiday:
    """Feriado: reference data, never derived.

    For a recurring holiday the year of ``holiday_date`` only records when it
    was created; matching uses month and day.
    """

    holiday_id: Optional[int]
    holiday_date: date
    name: str
    holiday_type: HolidayType
    recurring: bool = False

    def matches(self, day: date) -> bool:
        if self.recurring:
            return self.in_year(day.year).holiday_date == day
        return self.holiday_date == day

    def applies_to_year(self, year: int) -> bool:
        return self.recurring or self.holiday_date.year == year

    def in_year(self, year: int) -> "Holiday":
        """Project a recurring holiday onto ``year``."""
        if not self.recurring:
            return self
        # Feb 29 recurring holidays fall on Feb 28 in common years.
        try:
            projected = self.holiday_date.replace(year=year)
        except ValueError:
            projected = date(year, 2, 28)
        return replace(self, holiday_date=projected)

    def to_dict(self) -> dict:
        return {
            "id": self.holiday_id,
            "date": self.holiday_date.isoformat(),
            "name": self.name,
            "type": self.holiday_type.value,
            "recurring": self.recurring,
        }
