from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AuditEntry:
    """Trilha de auditoria: who/what changed hour-bank data."""

    action: str
    entity_type: str
    entity_id: Optional[str]
    details: Optional[str]
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "details": self.details,
            "created_at": self.created_at.isoformat(timespec="seconds"),
        }
