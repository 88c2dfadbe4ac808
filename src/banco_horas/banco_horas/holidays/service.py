from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..audit.repository import AuditRepository
from ..common.validators import require_iso_date, require_non_empty, require_year
from ..core.enums import HolidayType
from ..core.exceptions import NotFoundError, ValidationError
from .calendar import HolidayCalendar, holiday_for_date, holidays_for_year
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    """Use case: maintain the company holiday table and build calendars."""

    def __init__(
        self,
        holidays: HolidayRepository,
        audit: AuditRepository,
        *,
        country: Optional[str] = None,
        subdiv: Optional[str] = None,
    ):
        self._holidays = holidays
        self._audit = audit
        self._country = country
        self._subdiv = subdiv

    def calendar(self) -> HolidayCalendar:
        """Fresh snapshot of the holiday table."""
        return HolidayCalendar.of(self._holidays.list_all(), country=self._country, subdiv=self._subdiv)

    def list_all(self) -> Sequence[Holiday]:
        return self._holidays.list_all()

    def list_for_year(self, year: int) -> list[Holiday]:
        return holidays_for_year(require_year(year), self.calendar())

    def check(self, day: date) -> Optional[Holiday]:
        return holiday_for_date(day, self.calendar())

    @staticmethod
    def _parse_type(value: Optional[str]) -> HolidayType:
        try:
            return HolidayType(require_non_empty(value, "Tipo"))
        except ValueError:
            allowed = ", ".join(t.value for t in HolidayType)
            raise ValidationError(f"Tipo deve ser um de: {allowed}")

    def create(self, *, date_value: str, name: str, holiday_type: str, recurring: bool = False) -> int:
        holiday_date = require_iso_date(date_value, "Data")
        name = require_non_empty(name, "Nome")
        kind = self._parse_type(holiday_type)

        holiday_id = self._holidays.create(holiday_date=holiday_date, name=name, holiday_type=kind, recurring=bool(recurring))
        self._audit.log("HOLIDAY_CREATED", "holiday", holiday_id, f"{name} - {holiday_date.isoformat()}")
        return holiday_id

    def update(self, *, holiday_id: int, date_value: str, name: str, holiday_type: str, recurring: bool = False) -> None:
        holiday_date = require_iso_date(date_value, "Data")
        name = require_non_empty(name, "Nome")
        kind = self._parse_type(holiday_type)

        if not self._holidays.get_by_id(int(holiday_id)):
            raise NotFoundError("Feriado não encontrado")

        self._holidays.update(
            holiday_id=int(holiday_id),
            holiday_date=holiday_date,
            name=name,
            holiday_type=kind,
            recurring=bool(recurring),
        )
        self._audit.log("HOLIDAY_UPDATED", "holiday", holiday_id, f"{name} - {holiday_date.isoformat()}")

    def delete(self, *, holiday_id: int) -> None:
        holiday = self._holidays.get_by_id(int(holiday_id))
        if not holiday or not self._holidays.delete(holiday_id=int(holiday_id)):
            raise NotFoundError("Feriado não encontrado")
        self._audit.log("HOLIDAY_DELETED", "holiday", holiday_id, f"{holiday.name} - {holiday.holiday_date.isoformat()}")
