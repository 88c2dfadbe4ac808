from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Colaborador. ``external_id`` is the id used by the punch clock provider.

    ``expected_daily_minutes`` overrides the company weekday target when set.
    Apprentices punch one entry/exit pair per day. Employees flagged
    ``no_punch_required`` are left out of the punch sync.
    """

    employee_id: int
    name: str
    leader_id: Optional[int] = None
    external_id: Optional[str] = None
    works_saturday: bool = True
    is_active: bool = True
    is_apprentice: bool = False
    expected_daily_minutes: Optional[int] = None
    no_punch_required: bool = False
