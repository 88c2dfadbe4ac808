from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import Classification
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import ClassificationResult, DailyRecord
from .punches import PunchSlots
from .repository import DailyRecordRepository

_COLUMNS = """
    dr.record_id, dr.employee_id, dr.work_date,
    dr.punch_1, dr.punch_2, dr.punch_3, dr.punch_4,
    dr.total_worked_minutes, dr.difference_minutes, dr.classification,
    dr.edit_reason, dr.edited_at, dr.updated_at
"""


def _opt_int(value) -> Optional[int]:
    return int(value) if value is not None else None


def _to_record(r: dict) -> DailyRecord:
    return DailyRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        punch_1=normalize_mysql_time(r.get("punch_1")),
        punch_2=normalize_mysql_time(r.get("punch_2")),
        punch_3=normalize_mysql_time(r.get("punch_3")),
        punch_4=normalize_mysql_time(r.get("punch_4")),
        total_worked_minutes=_opt_int(r.get("total_worked_minutes")),
        difference_minutes=_opt_int(r.get("difference_minutes")),
        classification=Classification(r["classification"]),
        edit_reason=r.get("edit_reason"),
        edited_at=r.get("edited_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLDailyRecordRepository(DailyRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, where: str, params: tuple) -> list[DailyRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM daily_records dr
                JOIN employees e ON e.employee_id = dr.employee_id
                WHERE {where}
                ORDER BY dr.work_date ASC, e.name ASC
                """,
                params,
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: int) -> Optional[DailyRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM daily_records dr WHERE dr.record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DailyRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM daily_records dr WHERE dr.employee_id=%s AND dr.work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, *, employee_id: int, work_date: date, punches: PunchSlots, result: ClassificationResult) -> int:
        now = now_local()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_records(
                    employee_id, work_date, punch_1, punch_2, punch_3, punch_4,
                    total_worked_minutes, difference_minutes, classification, created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    record_id=LAST_INSERT_ID(record_id),
                    punch_1=VALUES(punch_1), punch_2=VALUES(punch_2),
                    punch_3=VALUES(punch_3), punch_4=VALUES(punch_4),
                    total_worked_minutes=VALUES(total_worked_minutes),
                    difference_minutes=VALUES(difference_minutes),
                    classification=VALUES(classification),
                    edit_reason=NULL, edited_at=NULL,
                    updated_at=VALUES(updated_at)
                """,
                (
                    int(employee_id),
                    work_date,
                    *punches,
                    result.worked_minutes,
                    result.difference_minutes,
                    result.classification.value,
                    now,
                    now,
                ),
            )

            # LAST_INSERT_ID(record_id) covers the update path; re-select as a fallback.
            if cur.lastrowid:
                return int(cur.lastrowid)

            cur.execute(
                "SELECT record_id FROM daily_records WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return int(r["record_id"]) if r else 0

    def update_punches(
        self,
        *,
        record_id: int,
        punches: PunchSlots,
        result: ClassificationResult,
        edit_reason: str,
        edited_at: datetime,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE daily_records
                SET punch_1=%s, punch_2=%s, punch_3=%s, punch_4=%s,
                    total_worked_minutes=%s, difference_minutes=%s, classification=%s,
                    edit_reason=%s, edited_at=%s, updated_at=%s
                WHERE record_id=%s
                """,
                (
                    *punches,
                    result.worked_minutes,
                    result.difference_minutes,
                    result.classification.value,
                    edit_reason,
                    edited_at,
                    edited_at,
                    int(record_id),
                ),
            )
            return cur.rowcount > 0

    def list_by_date(self, work_date: date) -> Sequence[DailyRecord]:
        return self._select("dr.work_date=%s", (work_date,))

    def list_for_employee_range(self, *, employee_id: int, start: date, end: date) -> Sequence[DailyRecord]:
        return self._select("dr.employee_id=%s AND dr.work_date BETWEEN %s AND %s", (int(employee_id), start, end))

    def list_for_leader_range(self, *, leader_id: int, start: date, end: date) -> Sequence[DailyRecord]:
        return self._select("e.leader_id=%s AND dr.work_date BETWEEN %s AND %s", (int(leader_id), start, end))

    def list_all_range(self, *, start: date, end: date) -> Sequence[DailyRecord]:
        return self._select("dr.work_date BETWEEN %s AND %s", (start, end))
