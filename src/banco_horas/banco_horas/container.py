from __future__ import annotations

from dataclasses import dataclass

from .audit.mysql_audit_repository import MySQLAuditRepository
from .balance.calculator.standard_calculator import StandardBalanceCalculator
from .balance.service import BalanceService
from .core.constants import (
    DEFAULT_TOLERANCE_MINUTES,
    EXPECTED_DAILY_MINUTES,
    EXPECTED_SATURDAY_MINUTES,
    SYNC_JOB_RETENTION_SECONDS,
    SYNC_MAX_DAYS,
)
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.service import HolidayService
from .records.classifier import ClassificationEngine
from .records.factory import ClassificationStrategyFactory
from .records.mysql_record_repository import MySQLDailyRecordRepository
from .records.service import RecordService
from .schedules.model import WorkSchedule
from .sync.manager import SyncJobManager
from .sync.solides_source import SolidesPunchSource


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    holidays_repo: MySQLHolidayRepository
    records_repo: MySQLDailyRecordRepository
    audit_repo: MySQLAuditRepository

    holiday_service: HolidayService
    record_service: RecordService
    balance_service: BalanceService
    sync_manager: SyncJobManager


def build_container(*, settings) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))

    employees_repo = MySQLEmployeeRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    records_repo = MySQLDailyRecordRepository(conn)
    audit_repo = MySQLAuditRepository(conn)

    schedule = WorkSchedule(
        full_day_minutes=int(getattr(settings, "EXPECTED_DAILY_MINUTES", EXPECTED_DAILY_MINUTES)),
        saturday_minutes=int(getattr(settings, "EXPECTED_SATURDAY_MINUTES", EXPECTED_SATURDAY_MINUTES)),
        tolerance_minutes=int(getattr(settings, "TOLERANCE_MINUTES", DEFAULT_TOLERANCE_MINUTES)),
    )

    holiday_service = HolidayService(
        holidays_repo,
        audit_repo,
        country="BR" if getattr(settings, "INCLUDE_NATIONAL_HOLIDAYS", False) else None,
        subdiv=getattr(settings, "HOLIDAY_SUBDIV", None),
    )
    record_service = RecordService(
        records_repo,
        employees_repo,
        holiday_service,
        audit_repo,
        engine=ClassificationEngine(schedule, strategy_factory=ClassificationStrategyFactory()),
    )
    balance_service = BalanceService(records_repo, employees_repo, calculator=StandardBalanceCalculator())

    punch_source = SolidesPunchSource(
        base_url=getattr(settings, "SOLIDES_API_URL"),
        token=getattr(settings, "SOLIDES_API_TOKEN", ""),
        company_id=getattr(settings, "SOLIDES_COMPANY_ID", ""),
        timeout_seconds=float(getattr(settings, "SOLIDES_TIMEOUT_SECONDS", 15)),
    )
    sync_manager = SyncJobManager(
        record_service,
        employees_repo,
        holiday_service,
        punch_source,
        audit_repo,
        max_days=int(getattr(settings, "SYNC_MAX_DAYS", SYNC_MAX_DAYS)),
        retention_seconds=int(getattr(settings, "SYNC_JOB_RETENTION_SECONDS", SYNC_JOB_RETENTION_SECONDS)),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        holidays_repo=holidays_repo,
        records_repo=records_repo,
        audit_repo=audit_repo,
        holiday_service=holiday_service,
        record_service=record_service,
        balance_service=balance_service,
        sync_manager=sync_manager,
    )
