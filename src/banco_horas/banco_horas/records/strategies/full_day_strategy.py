from __future__ import annotations

from ...core.enums import Classification, PunchOutcome, ScheduleKind
from ...schedules.model import WorkSchedule
from ..model import ClassificationResult
from ..punches import ParsedPunches
from .base import NO_USABLE_RECORD, ClassificationStrategy, classify_difference, span_minutes


class FullDayStrategy(ClassificationStrategy):
    """Weekday: entry, lunch-out, lunch-in, exit."""

    kind = ScheduleKind.FULL_DAY

    def classify(self, punches: ParsedPunches, *, schedule: WorkSchedule) -> ClassificationResult:
        expected = schedule.expected_minutes(self.kind)
        if punches.outcome == PunchOutcome.ABSENT:
            return ClassificationResult(Classification.FALTA, worked_minutes=0, difference_minutes=-expected)

        p1, p2, p3, p4 = punches.slots
        morning = span_minutes(p1, p2)
        afternoon = span_minutes(p3, p4)
        if morning is None or afternoon is None:
            return NO_USABLE_RECORD

        worked = morning + afternoon
        difference = worked - expected
        return ClassificationResult(
            classify_difference(difference, schedule.tolerance_minutes),
            worked_minutes=worked,
            difference_minutes=difference,
        )
