from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AuditEntry
from .repository import AuditRepository


class MySQLAuditRepository(AuditRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def log(self, action: str, entity_type: str, entity_id: Optional[object] = None, details: Optional[str] = None) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO audit_log(action, entity_type, entity_id, details, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (action, entity_type, str(entity_id) if entity_id is not None else None, details, now_local()),
            )

    def list_recent(self, *, limit: int, offset: int = 0) -> Sequence[AuditEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT action, entity_type, entity_id, details, created_at
                FROM audit_log
                ORDER BY created_at DESC, audit_id DESC
                LIMIT %s OFFSET %s
                """,
                (int(limit), int(offset)),
            )
            return [
                AuditEntry(
                    action=r["action"],
                    entity_type=r["entity_type"],
                    entity_id=r.get("entity_id"),
                    details=r.get("details"),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]
