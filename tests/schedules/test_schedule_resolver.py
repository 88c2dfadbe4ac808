from __future__ import annotations

from datetime import date

import pytest

from src.banco_horas.banco_horas.core.enums import HolidayType, ScheduleKind
from src.banco_horas.banco_horas.holidays.calendar import HolidayCalendar
from src.banco_horas.banco_horas.holidays.model import Holiday
from src.banco_horas.banco_horas.schedules.model import WorkSchedule
from src.banco_horas.banco_horas.schedules.resolver import expected_minutes, expected_schedule

EMPTY = HolidayCalendar()


@pytest.mark.parametrize(
    "day,kind",
    [
        (date(2025, 3, 3), ScheduleKind.FULL_DAY),  # Monday
        (date(2025, 3, 7), ScheduleKind.FULL_DAY),  # Friday
        (date(2025, 3, 8), ScheduleKind.HALF_DAY_SATURDAY),
        (date(2025, 3, 9), ScheduleKind.OFF_DAY),  # Sunday
    ],
)
def test_weekday_rules(day, kind):
    assert expected_schedule(day, EMPTY) == kind


def test_holiday_is_off_day_even_on_weekday():
    cal = HolidayCalendar.of([Holiday(1, date(2025, 3, 4), "Carnaval", HolidayType.COMPANY)])

    assert expected_schedule(date(2025, 3, 4), cal) == ScheduleKind.OFF_DAY
    assert expected_schedule(date(2025, 3, 5), cal) == ScheduleKind.FULL_DAY


def test_saturday_is_off_for_employees_who_do_not_work_it():
    assert expected_schedule(date(2025, 3, 8), EMPTY, works_saturday=False) == ScheduleKind.OFF_DAY


def test_expected_minutes_per_kind():
    assert expected_minutes(ScheduleKind.FULL_DAY) == 480
    assert expected_minutes(ScheduleKind.HALF_DAY_SATURDAY) == 240
    assert expected_minutes(ScheduleKind.OFF_DAY) == 0

    custom = WorkSchedule(full_day_minutes=528, saturday_minutes=0)
    assert expected_minutes(ScheduleKind.FULL_DAY, custom) == 528


def test_negative_tolerance_is_rejected():
    with pytest.raises(ValueError):
        WorkSchedule(tolerance_minutes=-1)


def test_apprentice_weekday_is_single_pair_day():
    assert expected_schedule(date(2025, 3, 3), EMPTY, is_apprentice=True) == ScheduleKind.APPRENTICE_DAY
    assert expected_schedule(date(2025, 3, 8), EMPTY, is_apprentice=True) == ScheduleKind.HALF_DAY_SATURDAY
    assert expected_schedule(date(2025, 3, 9), EMPTY, is_apprentice=True) == ScheduleKind.OFF_DAY
    assert expected_minutes(ScheduleKind.APPRENTICE_DAY) == 240


def test_daily_target_override():
    base = WorkSchedule(tolerance_minutes=5)

    assert base.with_daily_target(None) is base
    custom = base.with_daily_target(528)
    assert custom.expected_minutes(ScheduleKind.FULL_DAY) == 528
    assert custom.expected_minutes(ScheduleKind.APPRENTICE_DAY) == 528
    assert custom.expected_minutes(ScheduleKind.HALF_DAY_SATURDAY) == 240
    assert custom.tolerance_minutes == 5
