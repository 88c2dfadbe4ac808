from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...records.model import DailyRecord
from ..model import MonthlyBalance


class BalanceCalculator(ABC):
    """Calculator interface (Strategy Pattern for hour-bank rollups)."""

    @abstractmethod
    def monthly(self, *, employee_id: int, year: int, records: Sequence[DailyRecord]) -> list[MonthlyBalance]:
        raise NotImplementedError
