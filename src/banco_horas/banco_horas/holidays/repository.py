from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import HolidayType
from .model import Holiday


class HolidayRepository(Protocol):
    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def get_by_id(self, holiday_id: int) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, *, holiday_date: date, name: str, holiday_type: HolidayType, recurring: bool) -> int:
        """Returns holiday_id."""

        raise NotImplementedError

    def update(self, *, holiday_id: int, holiday_date: date, name: str, holiday_type: HolidayType, recurring: bool) -> bool:
        raise NotImplementedError

    def delete(self, *, holiday_id: int) -> bool:
        raise NotImplementedError
