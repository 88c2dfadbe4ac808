from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import SyncStatus


@dataclass(frozen=True)
class SyncDayError:
    work_date: date
    message: str

    def to_dict(self) -> dict:
        return {"date": self.work_date.isoformat(), "message": self.message}


@dataclass(frozen=True)
class SyncJob:
    """Point-in-time snapshot of a sync job, safe to hand to any caller."""

    job_id: str
    start_date: date
    end_date: date
    status: SyncStatus
    total_days: int
    synced: int
    errors: int
    started_at: datetime
    current_date: Optional[date] = None
    completed_at: Optional[datetime] = None
    error_message: Optional[str] = None
    leader_id: Optional[int] = None
    day_errors: tuple[SyncDayError, ...] = ()

    def to_dict(self) -> dict:
        data = {
            "id": self.job_id,
            "status": self.status.value,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "totalDays": self.total_days,
            "synced": self.synced,
            "errors": self.errors,
            "startedAt": self.started_at.isoformat(timespec="seconds"),
            "dayErrors": [e.to_dict() for e in self.day_errors],
        }
        if self.current_date is not None:
            data["currentDate"] = self.current_date.isoformat()
        if self.completed_at is not None:
            data["completedAt"] = self.completed_at.isoformat(timespec="seconds")
        if self.error_message:
            data["errorMessage"] = self.error_message
        if self.leader_id is not None:
            data["leaderId"] = self.leader_id
        return data
