from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        leader_id=int(r["leader_id"]) if r.get("leader_id") is not None else None,
        external_id=r.get("external_id") or None,
        works_saturday=bool(r.get("works_saturday", 1)),
        is_active=bool(r.get("is_active", 1)),
        is_apprentice=bool(r.get("is_apprentice", 0)),
        expected_daily_minutes=int(r["expected_daily_minutes"]) if r.get("expected_daily_minutes") is not None else None,
        no_punch_required=bool(r.get("no_punch_required", 0)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, leader_id, external_id, works_saturday, is_active,
                       is_apprentice, expected_daily_minutes, no_punch_required
                FROM employees
                WHERE employee_id=%s
                """,
                (int(employee_id),),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self, *, leader_id: Optional[int] = None) -> Sequence[Employee]:
        clauses = ["is_active=1"]
        params: list[object] = []
        if leader_id is not None:
            clauses.append("leader_id=%s")
            params.append(int(leader_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, name, leader_id, external_id, works_saturday, is_active,
                       is_apprentice, expected_daily_minutes, no_punch_required
                FROM employees
                WHERE {where}
                ORDER BY name ASC
                """,
                tuple(params),
            )
            return [_to_employee(r) for r in fetchall(cur)]
