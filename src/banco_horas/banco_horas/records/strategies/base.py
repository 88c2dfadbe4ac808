from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time
from typing import Optional

from ...common.datetime_utils import minutes_of_day
from ...core.enums import Classification
from ...schedules.model import WorkSchedule
from ..model import ClassificationResult
from ..punches import ParsedPunches


def span_minutes(start: Optional[time], end: Optional[time]) -> Optional[int]:
    if start is None or end is None:
        return None
    return minutes_of_day(end) - minutes_of_day(start)


def classify_difference(difference_minutes: int, tolerance_minutes: int) -> Classification:
    """Pure function of the deviation: positive is owed to the employee."""
    if difference_minutes > tolerance_minutes:
        return Classification.OVERTIME
    if difference_minutes < -tolerance_minutes:
        return Classification.LATE
    return Classification.NORMAL


NO_USABLE_RECORD = ClassificationResult(
    classification=Classification.SEM_REGISTRO,
    worked_minutes=None,
    difference_minutes=None,
)


class ClassificationStrategy(ABC):
    """Strategy Pattern: one classification rule set per schedule kind.

    Strategies only see well-formed punches; device failures are handled
    before a strategy is chosen.
    """

    @abstractmethod
    def classify(self, punches: ParsedPunches, *, schedule: WorkSchedule) -> ClassificationResult:
        raise NotImplementedError
