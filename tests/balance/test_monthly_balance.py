from __future__ import annotations

from datetime import date

import pytest

from src.banco_horas.banco_horas.balance.calculator.standard_calculator import StandardBalanceCalculator
from src.banco_horas.banco_horas.balance.service import BalanceService
from src.banco_horas.banco_horas.core.enums import Classification as C
from src.banco_horas.banco_horas.core.exceptions import NotFoundError, ValidationError


def _monthly(records):
    return StandardBalanceCalculator().monthly(employee_id=2, year=2025, records=records)


def test_always_twelve_months(make_record):
    months = _monthly([])
    assert [m.month for m in months] == list(range(1, 13))
    assert all(m.is_empty and m.difference is None and m.running_balance is None for m in months)


def test_running_balance_is_cumulative(make_record):
    records = [
        make_record(date(2025, 1, 6), -20, C.LATE),
        make_record(date(2025, 1, 7), 30, C.OVERTIME),
        make_record(date(2025, 2, 3), -480, C.FALTA),
        make_record(date(2025, 3, 3), 0, C.NORMAL),
        make_record(date(2025, 3, 9), 240, C.AJUSTE),
    ]

    months = _monthly(records)

    assert months[0].difference == 10
    assert months[0].running_balance == months[0].difference
    assert (months[1].difference, months[1].running_balance) == (-480, -470)
    assert (months[2].difference, months[2].running_balance) == (240, -230)
    assert (months[0].late_count, months[0].overtime_count, months[0].days) == (1, 1, 2)

    running = 0
    for m in months:
        if m.difference is not None:
            running += m.difference
            assert m.running_balance == running


def test_null_differences_are_excluded(make_record):
    records = [
        make_record(date(2025, 4, 1), None, C.APARELHO_DANIFICADO),
        make_record(date(2025, 4, 2), None, C.SEM_REGISTRO),
        make_record(date(2025, 4, 3), -15, C.LATE),
    ]

    april = _monthly(records)[3]

    assert april.days == 1
    assert april.difference == -15


def test_folga_does_not_count_as_a_day(make_record):
    months = _monthly([make_record(date(2025, 5, 4), 0, C.FOLGA)])
    assert months[4].is_empty
    assert months[4].difference is None


def test_empty_month_does_not_break_the_carry(make_record):
    records = [
        make_record(date(2025, 1, 6), -20, C.LATE),
        make_record(date(2025, 3, 3), 50, C.OVERTIME),
    ]

    months = _monthly(records)

    assert months[1].running_balance is None
    assert months[2].running_balance == 30


def test_records_from_other_years_are_ignored(make_record):
    months = _monthly([make_record(date(2024, 12, 31), -60, C.LATE)])
    assert all(m.is_empty for m in months)


def test_month_dict_labels(make_record):
    row = _monthly([make_record(date(2025, 1, 6), -80, C.LATE)])[0].to_dict()

    assert row["month_key"] == "2025-01"
    assert row["month"] == "Janeiro"
    assert row["difference_label"] == "-1h 20min"
    assert _monthly([])[0].to_dict()["difference_label"] == "-"


def test_service_monthly_balance(record_service, records_repo, employees_repo):
    record_service.classify_and_persist(2, date(2025, 3, 3), ["08:20", "12:00", "13:00", "17:00"])
    record_service.classify_and_persist(2, date(2025, 3, 4), ["08:00", "12:00", "13:00", "17:30"])

    months = BalanceService(records_repo, employees_repo).get_monthly_balance(2, 2025)

    assert months[2].difference == 10
    assert months[2].late_count == 1
    assert months[2].overtime_count == 1


def test_service_validation(records_repo, employees_repo):
    service = BalanceService(records_repo, employees_repo)
    with pytest.raises(NotFoundError):
        service.get_monthly_balance(42, 2025)
    with pytest.raises(ValidationError):
        service.get_monthly_balance(2, 1990)


def test_year_overview_sorted_by_balance(record_service, records_repo, employees_repo):
    record_service.classify_and_persist(2, date(2025, 3, 3), ["08:00", "12:00", "13:00", "18:00"])
    record_service.classify_and_persist(3, date(2025, 3, 3), ["09:00", "12:00", "13:00", "17:00"])

    rows = BalanceService(records_repo, employees_repo).year_overview(2025, leader_id=1)

    assert [r.employee_id for r in rows] == [3, 2]
    assert [r.total_difference for r in rows] == [-60, 60]
