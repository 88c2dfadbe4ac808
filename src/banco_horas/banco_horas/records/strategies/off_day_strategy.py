from __future__ import annotations

from ...core.enums import Classification, PunchOutcome, ScheduleKind
from ...schedules.model import WorkSchedule
from ..model import ClassificationResult
from ..punches import ParsedPunches
from .base import ClassificationStrategy, span_minutes


class OffDayStrategy(ClassificationStrategy):
    """Sunday or holiday: any worked time is unscheduled and credited in full.

    Only complete pairs count. A lone punch still marks the day as an
    adjustment (with nothing credited) so it shows up for review.
    """

    kind = ScheduleKind.OFF_DAY

    def classify(self, punches: ParsedPunches, *, schedule: WorkSchedule) -> ClassificationResult:
        if punches.outcome == PunchOutcome.ABSENT:
            return ClassificationResult(Classification.FOLGA, worked_minutes=None, difference_minutes=0)

        p1, p2, p3, p4 = punches.slots
        worked = 0
        for start, end in ((p1, p2), (p3, p4)):
            span = span_minutes(start, end)
            if span is not None:
                worked += span

        return ClassificationResult(Classification.AJUSTE, worked_minutes=worked, difference_minutes=worked)
