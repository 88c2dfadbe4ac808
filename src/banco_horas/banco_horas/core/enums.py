from __future__ import annotations

from enum import Enum


class Classification(str, Enum):
    """Day outcome stored in daily_records.classification."""

    NORMAL = "normal"
    LATE = "late"
    OVERTIME = "overtime"
    AJUSTE = "ajuste"
    FOLGA = "folga"
    FALTA = "falta"
    SEM_REGISTRO = "sem_registro"
    APARELHO_DANIFICADO = "aparelho_danificado"


class ScheduleKind(str, Enum):
    """Expected punch pattern for a date."""

    FULL_DAY = "full_day"
    HALF_DAY_SATURDAY = "half_day_saturday"
    APPRENTICE_DAY = "apprentice_day"
    OFF_DAY = "off_day"


class PunchOutcome(str, Enum):
    """Result of parsing the raw punches of a day."""

    PRESENT = "present"
    ABSENT = "absent"
    MALFORMED = "malformed"


class HolidayType(str, Enum):
    NATIONAL = "national"
    STATE = "state"
    MUNICIPAL = "municipal"
    COMPANY = "company"


class SyncStatus(str, Enum):
    """Sync job lifecycle. There is no queued state."""

    RUNNING = "running"
    COMPLETED = "completed"
    ERROR = "error"
