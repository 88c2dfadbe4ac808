from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.constants import (
    APPRENTICE_DAILY_MINUTES,
    DEFAULT_TOLERANCE_MINUTES,
    EXPECTED_DAILY_MINUTES,
    EXPECTED_SATURDAY_MINUTES,
)
from ..core.enums import ScheduleKind


@dataclass(frozen=True)
class WorkSchedule:
    """Jornada: target minutes per schedule kind plus the classification tolerance."""

    full_day_minutes: int = EXPECTED_DAILY_MINUTES
    saturday_minutes: int = EXPECTED_SATURDAY_MINUTES
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES
    apprentice_minutes: int = APPRENTICE_DAILY_MINUTES

    def __post_init__(self):
        if self.tolerance_minutes < 0:
            raise ValueError("tolerance_minutes must be >= 0")

    def expected_minutes(self, kind: ScheduleKind) -> int:
        if kind == ScheduleKind.FULL_DAY:
            return self.full_day_minutes
        if kind == ScheduleKind.HALF_DAY_SATURDAY:
            return self.saturday_minutes
        if kind == ScheduleKind.APPRENTICE_DAY:
            return self.apprentice_minutes
        return 0

    def with_daily_target(self, minutes: Optional[int]) -> WorkSchedule:
        """Per-employee override of the weekday target (full or apprentice day)."""
        if minutes is None:
            return self
        return replace(self, full_day_minutes=minutes, apprentice_minutes=minutes)
