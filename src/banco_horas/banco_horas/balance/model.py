from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import format_minutes

MONTH_NAMES = (
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
)


@dataclass(frozen=True)
class MonthlyBalance:
    """Read-model: one month of an employee's hour bank.

    ``difference`` and ``running_balance`` are None for months without any
    counted day, so an empty month is never shown as a computed zero.
    """

    employee_id: int
    year: int
    month: int
    days: int
    late_count: int
    overtime_count: int
    difference: Optional[int]
    running_balance: Optional[int]

    @property
    def is_empty(self) -> bool:
        return self.days == 0

    def to_dict(self) -> dict:
        return {
            "month_key": f"{self.year:04d}-{self.month:02d}",
            "month": MONTH_NAMES[self.month - 1],
            "days": self.days,
            "late_count": self.late_count,
            "overtime_count": self.overtime_count,
            "difference": self.difference,
            "running_balance": self.running_balance,
            "difference_label": format_minutes(self.difference, signed=True),
            "running_balance_label": format_minutes(self.running_balance, signed=True),
        }


@dataclass(frozen=True)
class EmployeeBalance:
    """Yearly overview row for the banco de horas screen."""

    employee_id: int
    name: str
    days: int
    late_count: int
    overtime_count: int
    total_difference: int

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "days": self.days,
            "late_count": self.late_count,
            "overtime_count": self.overtime_count,
            "total_difference": self.total_difference,
            "total_difference_label": format_minutes(self.total_difference, signed=True),
        }
