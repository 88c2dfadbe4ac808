from __future__ import annotations

from ...core.enums import ScheduleKind
from .saturday_strategy import SaturdayStrategy


class ApprenticeStrategy(SaturdayStrategy):
    """Apprentice weekday: one entry/exit pair against the apprentice target."""

    kind = ScheduleKind.APPRENTICE_DAY
