from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ScheduleKind
from .strategies.apprentice_strategy import ApprenticeStrategy
from .strategies.base import ClassificationStrategy
from .strategies.full_day_strategy import FullDayStrategy
from .strategies.off_day_strategy import OffDayStrategy
from .strategies.saturday_strategy import SaturdayStrategy


@dataclass
class ClassificationStrategyFactory:
    """Factory Pattern: choose the rule set for a schedule kind."""

    def for_schedule(self, kind: ScheduleKind) -> ClassificationStrategy:
        if kind == ScheduleKind.OFF_DAY:
            return OffDayStrategy()
        if kind == ScheduleKind.HALF_DAY_SATURDAY:
            return SaturdayStrategy()
        if kind == ScheduleKind.APPRENTICE_DAY:
            return ApprenticeStrategy()
        return FullDayStrategy()
