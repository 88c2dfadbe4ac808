from __future__ import annotations

from datetime import date

from ..core.enums import ScheduleKind
from ..holidays.calendar import HolidayCalendar, is_holiday
from .model import WorkSchedule

SATURDAY = 5
SUNDAY = 6


def expected_schedule(
    day: date,
    calendar: HolidayCalendar,
    *,
    works_saturday: bool = True,
    is_apprentice: bool = False,
) -> ScheduleKind:
    """Expected punch pattern for ``day``.

    Holidays and Sundays are off days; Saturdays are half days (two punches)
    unless the employee does not work Saturdays. Apprentices punch a single
    entry/exit pair on weekdays too.
    """
    if is_holiday(day, calendar):
        return ScheduleKind.OFF_DAY
    weekday = day.weekday()
    if weekday == SUNDAY:
        return ScheduleKind.OFF_DAY
    if weekday == SATURDAY:
        return ScheduleKind.HALF_DAY_SATURDAY if works_saturday else ScheduleKind.OFF_DAY
    return ScheduleKind.APPRENTICE_DAY if is_apprentice else ScheduleKind.FULL_DAY


def expected_minutes(kind: ScheduleKind, schedule: WorkSchedule | None = None) -> int:
    return (schedule or WorkSchedule()).expected_minutes(kind)
