from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AuditEntry


class AuditRepository(Protocol):
    def log(self, action: str, entity_type: str, entity_id: Optional[object] = None, details: Optional[str] = None) -> None:
        raise NotImplementedError

    def list_recent(self, *, limit: int, offset: int = 0) -> Sequence[AuditEntry]:
        raise NotImplementedError
