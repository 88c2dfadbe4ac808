from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import ClassificationResult, DailyRecord
from .punches import PunchSlots


class DailyRecordRepository(Protocol):
    def get_by_id(self, record_id: int) -> Optional[DailyRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DailyRecord]:
        raise NotImplementedError

    def upsert(self, *, employee_id: int, work_date: date, punches: PunchSlots, result: ClassificationResult) -> int:
        """Create or overwrite the (employee, date) row in a single statement.

        Returns record_id.
        """

        raise NotImplementedError

    def update_punches(
        self,
        *,
        record_id: int,
        punches: PunchSlots,
        result: ClassificationResult,
        edit_reason: str,
        edited_at: datetime,
    ) -> bool:
        """Manual correction; keeps the reason for audit."""

        raise NotImplementedError

    def list_by_date(self, work_date: date) -> Sequence[DailyRecord]:
        raise NotImplementedError

    def list_for_employee_range(self, *, employee_id: int, start: date, end: date) -> Sequence[DailyRecord]:
        raise NotImplementedError

    def list_for_leader_range(self, *, leader_id: int, start: date, end: date) -> Sequence[DailyRecord]:
        raise NotImplementedError

    def list_all_range(self, *, start: date, end: date) -> Sequence[DailyRecord]:
        raise NotImplementedError
