from __future__ import annotations

from ...core.enums import Classification, PunchOutcome, ScheduleKind
from ...schedules.model import WorkSchedule
from ..model import ClassificationResult
from ..punches import ParsedPunches
from .base import NO_USABLE_RECORD, ClassificationStrategy, classify_difference, span_minutes


class SaturdayStrategy(ClassificationStrategy):
    """Saturday half day: punch_1 is the entry, punch_2 the exit (no lunch)."""

    kind = ScheduleKind.HALF_DAY_SATURDAY

    def classify(self, punches: ParsedPunches, *, schedule: WorkSchedule) -> ClassificationResult:
        expected = schedule.expected_minutes(self.kind)
        if punches.outcome == PunchOutcome.ABSENT:
            return ClassificationResult(Classification.FALTA, worked_minutes=0, difference_minutes=-expected)

        worked = span_minutes(punches.slots[0], punches.slots[1])
        if worked is None:
            return NO_USABLE_RECORD

        difference = worked - expected
        return ClassificationResult(
            classify_difference(difference, schedule.tolerance_minutes),
            worked_minutes=worked,
            difference_minutes=difference,
        )
