from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.validators import require_year
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..records.model import DailyRecord
from ..records.repository import DailyRecordRepository
from .calculator.base import BalanceCalculator
from .calculator.standard_calculator import StandardBalanceCalculator
from .model import EmployeeBalance, MonthlyBalance


class BalanceService:
    """Recomputes hour-bank rollups on demand from classified records."""

    def __init__(
        self,
        records: DailyRecordRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[BalanceCalculator] = None,
    ):
        self._records = records
        self._employees = employees
        self._calculator = calculator or StandardBalanceCalculator()

    def get_monthly_balance(self, employee_id: int, year: int) -> list[MonthlyBalance]:
        year = require_year(year)
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Colaborador não encontrado")

        records = self._records.list_for_employee_range(
            employee_id=int(employee_id),
            start=date(year, 1, 1),
            end=date(year, 12, 31),
        )
        return self._calculator.monthly(employee_id=int(employee_id), year=year, records=records)

    def year_overview(self, year: int, *, leader_id: Optional[int] = None) -> list[EmployeeBalance]:
        year = require_year(year)
        start, end = date(year, 1, 1), date(year, 12, 31)
        if leader_id is not None:
            records = self._records.list_for_leader_range(leader_id=int(leader_id), start=start, end=end)
        else:
            records = self._records.list_all_range(start=start, end=end)

        by_employee: dict[int, list[DailyRecord]] = {}
        for r in records:
            by_employee.setdefault(r.employee_id, []).append(r)

        out: list[EmployeeBalance] = []
        for employee in self._employees.list_active(leader_id=leader_id):
            months = self._calculator.monthly(
                employee_id=employee.employee_id,
                year=year,
                records=by_employee.get(employee.employee_id, []),
            )
            out.append(
                EmployeeBalance(
                    employee_id=employee.employee_id,
                    name=employee.name,
                    days=sum(m.days for m in months),
                    late_count=sum(m.late_count for m in months),
                    overtime_count=sum(m.overtime_count for m in months),
                    total_difference=sum(m.difference or 0 for m in months),
                )
            )

        out.sort(key=lambda b: b.total_difference)
        return out
