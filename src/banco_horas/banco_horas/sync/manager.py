"""Background punch synchronization jobs.

A job walks a date range day by day, pulls each active employee's punches from
the punch source and pushes them through the record service. Progress lives in
memory; callers poll ``status`` for a frozen snapshot.
"""

from __future__ import annotations

import logging
import secrets
import threading
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Sequence

from ..audit.repository import AuditRepository
from ..common.datetime_utils import iter_dates, now_local
from ..common.validators import require_date_range
from ..core.constants import SYNC_JOB_RETENTION_SECONDS, SYNC_MAX_DAYS
from ..core.enums import SyncStatus
from ..core.exceptions import JobNotFoundError, PunchSourceUnavailableError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..holidays.calendar import HolidayCalendar
from ..holidays.service import HolidayService
from ..records.service import RecordService
from .model import SyncDayError, SyncJob
from .source import PunchSource

logger = logging.getLogger(__name__)


@dataclass
class _JobState:
    # Mutable; only touched while holding SyncJobManager._lock.
    job_id: str
    start_date: date
    end_date: date
    total_days: int
    started_at: datetime
    leader_id: Optional[int] = None
    status: SyncStatus = SyncStatus.RUNNING
    synced: int = 0
    errors: int = 0
    current_date: Optional[date] = None
    completed_at: Optional[datetime] = None
    error_message: Optional[str] = None
    day_errors: list[SyncDayError] = field(default_factory=list)
    done: threading.Event = field(default_factory=threading.Event)

    def snapshot(self) -> SyncJob:
        return SyncJob(
            job_id=self.job_id,
            start_date=self.start_date,
            end_date=self.end_date,
            status=self.status,
            total_days=self.total_days,
            synced=self.synced,
            errors=self.errors,
            started_at=self.started_at,
            current_date=self.current_date if self.status == SyncStatus.RUNNING else None,
            completed_at=self.completed_at,
            error_message=self.error_message,
            leader_id=self.leader_id,
            day_errors=tuple(self.day_errors),
        )


class SyncJobManager:
    def __init__(
        self,
        records: RecordService,
        employees: EmployeeRepository,
        holidays: HolidayService,
        source: PunchSource,
        audit: AuditRepository,
        *,
        max_days: int = SYNC_MAX_DAYS,
        retention_seconds: int = SYNC_JOB_RETENTION_SECONDS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._records = records
        self._employees = employees
        self._holidays = holidays
        self._source = source
        self._audit = audit
        self._max_days = max_days
        self._retention = timedelta(seconds=retention_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._jobs: dict[str, _JobState] = {}

    def submit(self, start_date: date, end_date: date, leader_id: Optional[int] = None) -> str:
        """Register a running job and start its worker thread."""
        total_days = require_date_range(start_date, end_date, max_days=self._max_days)
        job_id = secrets.token_urlsafe(16)
        state = _JobState(
            job_id=job_id,
            start_date=start_date,
            end_date=end_date,
            total_days=total_days,
            started_at=self._clock(),
            leader_id=leader_id,
        )
        with self._lock:
            self._prune_finished()
            self._jobs[job_id] = state

        worker = threading.Thread(target=self._run, args=(job_id,), name=f"sync-{job_id[:8]}", daemon=True)
        worker.start()
        logger.info("Sync job %s started: %s..%s (%d days)", job_id, start_date, end_date, total_days)
        return job_id

    def status(self, job_id: str) -> SyncJob:
        with self._lock:
            state = self._jobs.get(job_id)
            if state is None:
                raise JobNotFoundError("Sincronização não encontrada")
            return state.snapshot()

    def wait(self, job_id: str, timeout: Optional[float] = None) -> SyncJob:
        """Block until the job is terminal (or the timeout expires)."""
        with self._lock:
            state = self._jobs.get(job_id)
            if state is None:
                raise JobNotFoundError("Sincronização não encontrada")
            done = state.done
        done.wait(timeout)
        return self.status(job_id)

    def list_jobs(self) -> list[SyncJob]:
        with self._lock:
            snapshots = [s.snapshot() for s in self._jobs.values()]
        return sorted(snapshots, key=lambda j: j.started_at, reverse=True)

    def _prune_finished(self) -> None:
        # Caller holds self._lock. Running jobs are never evicted.
        cutoff = self._clock() - self._retention
        expired = [
            job_id
            for job_id, state in self._jobs.items()
            if state.completed_at is not None and state.completed_at <= cutoff
        ]
        for job_id in expired:
            del self._jobs[job_id]
        if expired:
            logger.debug("Evicted %d finished sync job(s)", len(expired))

    # ---- worker ----

    def _run(self, job_id: str) -> None:
        with self._lock:
            state = self._jobs[job_id]
            start, end, leader_id = state.start_date, state.end_date, state.leader_id

        try:
            self._source.check_available()
            calendar = self._holidays.calendar()
            employees = [
                e
                for e in self._employees.list_active(leader_id=leader_id)
                if e.external_id and not e.no_punch_required
            ]

            for day in iter_dates(start, end):
                with self._lock:
                    state.current_date = day
                try:
                    self._sync_day(day, employees, calendar)
                except Exception as exc:
                    logger.warning("Sync job %s failed on %s: %s", job_id, day, exc)
                    with self._lock:
                        state.errors += 1
                        state.day_errors.append(SyncDayError(day, str(exc)))
                    if isinstance(exc, PunchSourceUnavailableError):
                        # A transient outage costs one day; a dead source ends the job.
                        self._source.check_available()
                else:
                    with self._lock:
                        state.synced += 1
        except PunchSourceUnavailableError as exc:
            logger.error("Sync job %s aborted: %s", job_id, exc)
            self._finish(state, SyncStatus.ERROR, str(exc))
        except Exception as exc:
            logger.exception("Sync job %s crashed", job_id)
            self._finish(state, SyncStatus.ERROR, str(exc) or exc.__class__.__name__)
        else:
            self._finish(state, SyncStatus.COMPLETED)

    def _sync_day(self, day: date, employees: Sequence[Employee], calendar: HolidayCalendar) -> None:
        failures = []
        for employee in employees:
            try:
                punches = self._source.fetch_punches(employee.external_id, day)
                self._records.classify_and_persist(
                    employee.employee_id,
                    day,
                    punches,
                    strict=False,
                    employee=employee,
                    calendar=calendar,
                )
            except PunchSourceUnavailableError:
                # The rest of the day would fail the same way.
                raise
            except Exception as exc:
                failures.append(f"{employee.name}: {exc}")

        if failures:
            raise RuntimeError(f"{len(failures)} colaborador(es) com falha - " + "; ".join(failures[:3]))

    def _finish(self, state: _JobState, status: SyncStatus, error_message: Optional[str] = None) -> None:
        with self._lock:
            state.status = status
            state.completed_at = self._clock()
            state.error_message = error_message
            state.current_date = None
            snapshot = state.snapshot()

        if status == SyncStatus.COMPLETED:
            action = "SYNC_COMPLETED"
            details = f"{snapshot.start_date}..{snapshot.end_date}: {snapshot.synced} ok, {snapshot.errors} erros"
        else:
            action = "SYNC_ERROR"
            details = f"{snapshot.start_date}..{snapshot.end_date}: {error_message}"

        try:
            self._audit.log(action, "sync", None, details)
        except Exception:
            logger.exception("Could not audit sync job %s", state.job_id)
        finally:
            state.done.set()
        logger.info("Sync job %s finished: %s", state.job_id, status.value)
