from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from ...core.enums import Classification
from ...records.model import DailyRecord
from ..model import MonthlyBalance
from .base import BalanceCalculator


class StandardBalanceCalculator(BalanceCalculator):
    """Standard rule: sum non-null differences per month, carry a running total.

    Device-failure and no-record days have a null difference and never reach
    the sums. Days off count toward nothing.
    """

    def monthly(self, *, employee_id: int, year: int, records: Sequence[DailyRecord]) -> list[MonthlyBalance]:
        by_month: dict[int, list[DailyRecord]] = defaultdict(list)
        for r in records:
            if r.work_date.year == year and r.difference_minutes is not None:
                by_month[r.work_date.month].append(r)

        out: list[MonthlyBalance] = []
        running = 0
        for month in range(1, 13):
            counted = by_month.get(month, [])
            days = sum(1 for r in counted if r.classification != Classification.FOLGA)
            late = sum(1 for r in counted if r.classification == Classification.LATE)
            overtime = sum(1 for r in counted if r.classification == Classification.OVERTIME)

            if days == 0:
                out.append(MonthlyBalance(employee_id, year, month, 0, late, overtime, None, None))
                continue

            difference = sum(int(r.difference_minutes) for r in counted)
            running += difference
            out.append(MonthlyBalance(employee_id, year, month, days, late, overtime, difference, running))

        return out
