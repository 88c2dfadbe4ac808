from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..audit.repository import AuditRepository
from ..common.datetime_utils import now_local
from ..common.validators import require_date_range, require_non_empty
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..holidays.calendar import HolidayCalendar
from ..holidays.service import HolidayService
from ..schedules.resolver import expected_schedule
from .classifier import ClassificationEngine
from .model import ClassificationResult, DailyRecord
from .punches import ParsedPunches, RawPunch, parse_punches, require_valid_punches
from .repository import DailyRecordRepository

logger = logging.getLogger(__name__)


class RecordService:
    """Use cases around daily records: classify, persist, correct, query."""

    def __init__(
        self,
        records: DailyRecordRepository,
        employees: EmployeeRepository,
        holidays: HolidayService,
        audit: AuditRepository,
        *,
        engine: Optional[ClassificationEngine] = None,
    ):
        self._records = records
        self._employees = employees
        self._holidays = holidays
        self._audit = audit
        self._engine = engine or ClassificationEngine()

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Colaborador não encontrado")
        return employee

    def _classify_for(
        self,
        employee: Employee,
        work_date: date,
        parsed: ParsedPunches,
        calendar: HolidayCalendar,
    ) -> ClassificationResult:
        kind = expected_schedule(
            work_date,
            calendar,
            works_saturday=employee.works_saturday,
            is_apprentice=employee.is_apprentice,
        )
        schedule = self._engine.schedule.with_daily_target(employee.expected_daily_minutes)
        return self._engine.classify_parsed(parsed, kind, schedule=schedule)

    def classify_and_persist(
        self,
        employee_id: int,
        work_date: date,
        punches: Sequence[RawPunch],
        *,
        strict: bool = True,
        employee: Optional[Employee] = None,
        calendar: Optional[HolidayCalendar] = None,
    ) -> DailyRecord:
        """Classify one employee-day and upsert it.

        ``strict`` rejects malformed caller input; the sync worker passes
        ``strict=False`` so unreadable provider data is kept as a device
        failure instead.
        """
        employee = employee or self._get_employee(employee_id)
        calendar = calendar or self._holidays.calendar()
        parsed = require_valid_punches(punches) if strict else parse_punches(punches)

        result = self._classify_for(employee, work_date, parsed, calendar)

        self._records.upsert(employee_id=employee.employee_id, work_date=work_date, punches=parsed.slots, result=result)
        record = self._records.get_for_employee_and_date(employee.employee_id, work_date)
        if not record:
            raise NotFoundError("Registro não encontrado após gravação")
        return record

    def edit_record(self, record_id: int, punches: Sequence[RawPunch], reason: str) -> DailyRecord:
        """Manual correction: re-classifies the corrected punches and keeps the reason."""
        reason = require_non_empty(reason, "Justificativa")
        parsed = require_valid_punches(punches)

        record = self._records.get_by_id(int(record_id))
        if not record:
            raise NotFoundError("Registro não encontrado")

        employee = self._get_employee(record.employee_id)
        result = self._classify_for(employee, record.work_date, parsed, self._holidays.calendar())

        self._records.update_punches(
            record_id=record.record_id,
            punches=parsed.slots,
            result=result,
            edit_reason=reason,
            edited_at=now_local(),
        )
        self._audit.log(
            "RECORD_EDITED",
            "daily_record",
            record.record_id,
            f"{record.classification.value} -> {result.classification.value}: {reason}",
        )
        logger.info("Record %s edited: %s -> %s", record.record_id, record.classification.value, result.classification.value)

        updated = self._records.get_by_id(record.record_id)
        if not updated:
            raise NotFoundError("Registro não encontrado")
        return updated

    def get_record(self, record_id: int) -> DailyRecord:
        record = self._records.get_by_id(int(record_id))
        if not record:
            raise NotFoundError("Registro não encontrado")
        return record

    def list_by_date(self, work_date: date) -> Sequence[DailyRecord]:
        return self._records.list_by_date(work_date)

    def list_for_employee(self, employee_id: int, start: date, end: date) -> Sequence[DailyRecord]:
        require_date_range(start, end)
        return self._records.list_for_employee_range(employee_id=int(employee_id), start=start, end=end)

    def list_for_leader(self, leader_id: int, start: date, end: date) -> Sequence[DailyRecord]:
        require_date_range(start, end)
        return self._records.list_for_leader_range(leader_id=int(leader_id), start=start, end=end)

    def list_all(self, start: date, end: date) -> Sequence[DailyRecord]:
        require_date_range(start, end)
        return self._records.list_all_range(start=start, end=end)
