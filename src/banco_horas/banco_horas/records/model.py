from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import format_time_of_day
from ..core.enums import Classification


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one employee-day."""

    classification: Classification
    worked_minutes: Optional[int]
    difference_minutes: Optional[int]

    @property
    def counts_toward_balance(self) -> bool:
        return self.difference_minutes is not None


@dataclass(frozen=True)
class DailyRecord:
    """Registro diário: one row per (employee, date) in daily_records."""

    record_id: int
    employee_id: int
    work_date: date
    punch_1: Optional[time]
    punch_2: Optional[time]
    punch_3: Optional[time]
    punch_4: Optional[time]
    total_worked_minutes: Optional[int]
    difference_minutes: Optional[int]
    classification: Classification
    edit_reason: Optional[str] = None
    edited_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def punches(self) -> tuple[Optional[time], Optional[time], Optional[time], Optional[time]]:
        return (self.punch_1, self.punch_2, self.punch_3, self.punch_4)

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "punch_1": format_time_of_day(self.punch_1),
            "punch_2": format_time_of_day(self.punch_2),
            "punch_3": format_time_of_day(self.punch_3),
            "punch_4": format_time_of_day(self.punch_4),
            "total_worked_minutes": self.total_worked_minutes,
            "difference_minutes": self.difference_minutes,
            "classification": self.classification.value,
            "edit_reason": self.edit_reason,
            "edited_at": self.edited_at.isoformat(timespec="seconds") if self.edited_at else None,
        }
