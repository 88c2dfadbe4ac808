from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import HolidayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Holiday
from .repository import HolidayRepository


def _to_holiday(r: dict) -> Holiday:
    return Holiday(
        holiday_id=int(r["holiday_id"]),
        holiday_date=r["holiday_date"],
        name=r["name"],
        holiday_type=HolidayType(r["holiday_type"]),
        recurring=bool(r["recurring"]),
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, holiday_date, name, holiday_type, recurring
                FROM holidays
                ORDER BY holiday_date DESC
                """
            )
            return [_to_holiday(r) for r in fetchall(cur)]

    def get_by_id(self, holiday_id: int) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, holiday_date, name, holiday_type, recurring
                FROM holidays
                WHERE holiday_id=%s
                """,
                (int(holiday_id),),
            )
            r = fetchone(cur)
            return _to_holiday(r) if r else None

    def create(self, *, holiday_date: date, name: str, holiday_type: HolidayType, recurring: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO holidays(holiday_date, name, holiday_type, recurring, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (holiday_date, name, holiday_type.value, int(recurring), now_local()),
            )
            return int(cur.lastrowid)

    def update(self, *, holiday_id: int, holiday_date: date, name: str, holiday_type: HolidayType, recurring: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE holidays
                SET holiday_date=%s, name=%s, holiday_type=%s, recurring=%s
                WHERE holiday_id=%s
                """,
                (holiday_date, name, holiday_type.value, int(recurring), int(holiday_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE holiday_id=%s", (int(holiday_id),))
            return cur.rowcount > 0
