from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Classification, PunchOutcome, ScheduleKind
from ..schedules.model import WorkSchedule
from .factory import ClassificationStrategyFactory
from .model import ClassificationResult
from .punches import ParsedPunches, RawPunch, parse_punches

DEVICE_FAILURE = ClassificationResult(
    classification=Classification.APARELHO_DANIFICADO,
    worked_minutes=None,
    difference_minutes=None,
)


class ClassificationEngine:
    """Turns one employee-day of punches into a classification.

    Stateless apart from its configuration, so one instance is shared by the
    HTTP layer and every sync worker.
    """

    def __init__(
        self,
        schedule: Optional[WorkSchedule] = None,
        *,
        strategy_factory: Optional[ClassificationStrategyFactory] = None,
    ):
        self._schedule = schedule or WorkSchedule()
        self._factory = strategy_factory or ClassificationStrategyFactory()

    @property
    def schedule(self) -> WorkSchedule:
        return self._schedule

    def classify_parsed(
        self,
        punches: ParsedPunches,
        kind: ScheduleKind,
        *,
        schedule: Optional[WorkSchedule] = None,
    ) -> ClassificationResult:
        """``schedule`` overrides the engine default for one call (per-employee targets)."""
        if punches.outcome == PunchOutcome.MALFORMED:
            return DEVICE_FAILURE
        strategy = self._factory.for_schedule(kind)
        return strategy.classify(punches, schedule=schedule or self._schedule)

    def classify(
        self,
        raw: Sequence[RawPunch],
        kind: ScheduleKind,
        *,
        schedule: Optional[WorkSchedule] = None,
    ) -> ClassificationResult:
        return self.classify_parsed(parse_punches(raw), kind, schedule=schedule)


def classify(
    raw: Sequence[RawPunch],
    kind: ScheduleKind,
    schedule: Optional[WorkSchedule] = None,
) -> ClassificationResult:
    return ClassificationEngine(schedule).classify(raw, kind)
