from __future__ import annotations

from datetime import date, time

import pytest

from src.banco_horas.banco_horas.core.enums import Classification
from src.banco_horas.banco_horas.core.exceptions import NotFoundError, ValidationError
from src.banco_horas.banco_horas.employees.model import Employee
from src.banco_horas.banco_horas.records.service import RecordService
from src.banco_horas.banco_horas.records.classifier import ClassificationEngine
from src.banco_horas.banco_horas.schedules.model import WorkSchedule

MONDAY = date(2025, 3, 3)
SATURDAY = date(2025, 3, 8)
SUNDAY = date(2025, 3, 9)


def test_classify_and_persist_weekday(record_service, records_repo):
    record = record_service.classify_and_persist(2, MONDAY, ["08:00", "12:00", "13:00", "17:00"])

    assert record.classification == Classification.NORMAL
    assert record.total_worked_minutes == 480
    assert record.difference_minutes == 0
    assert record.punches == (time(8, 0), time(12, 0), time(13, 0), time(17, 0))
    assert records_repo.get_by_id(record.record_id) == record


def test_reclassifying_same_day_overwrites_single_row(record_service, records_repo):
    first = record_service.classify_and_persist(2, MONDAY, ["08:00", "12:00", "13:00", "17:00"])
    second = record_service.classify_and_persist(2, MONDAY, ["08:30", "12:00", "13:00", "17:00"])

    assert second.record_id == first.record_id
    assert second.classification == Classification.LATE
    assert len(records_repo.list_by_date(MONDAY)) == 1


def test_saturday_depends_on_employee(record_service):
    # Bruno works Saturdays, Carla does not.
    bruno = record_service.classify_and_persist(2, SATURDAY, [])
    carla = record_service.classify_and_persist(3, SATURDAY, [])

    assert bruno.classification == Classification.FALTA
    assert bruno.difference_minutes == -240
    assert carla.classification == Classification.FOLGA
    assert carla.difference_minutes == 0


def test_holiday_work_is_ajuste(record_service, holiday_service):
    holiday_service.create(date_value="2025-03-04", name="Carnaval", holiday_type="company")

    record = record_service.classify_and_persist(2, date(2025, 3, 4), ["09:00", "13:00"])

    assert record.classification == Classification.AJUSTE
    assert record.difference_minutes == 240


def test_sunday_without_punches_is_folga(record_service):
    assert record_service.classify_and_persist(2, SUNDAY, []).classification == Classification.FOLGA


def test_strict_mode_rejects_malformed_input(record_service, records_repo):
    with pytest.raises(ValidationError):
        record_service.classify_and_persist(2, MONDAY, ["17:00", "08:00"])
    assert records_repo.upserts == 0


def test_lenient_mode_keeps_device_failure(record_service):
    record = record_service.classify_and_persist(2, MONDAY, ["08:00", "99:99", "13:00", "17:00"], strict=False)

    assert record.classification == Classification.APARELHO_DANIFICADO
    assert record.difference_minutes is None


def test_unknown_employee(record_service):
    with pytest.raises(NotFoundError):
        record_service.classify_and_persist(42, MONDAY, [])


def test_configured_tolerance_is_used(records_repo, employees_repo, holiday_service, audit_repo):
    service = RecordService(
        records_repo,
        employees_repo,
        holiday_service,
        audit_repo,
        engine=ClassificationEngine(WorkSchedule(tolerance_minutes=10)),
    )

    record = service.classify_and_persist(2, MONDAY, ["08:05", "12:00", "13:00", "17:00"])

    assert record.classification == Classification.NORMAL
    assert record.difference_minutes == -5


def test_edit_record_reclassifies_and_keeps_reason(record_service, audit_repo):
    original = record_service.classify_and_persist(2, MONDAY, ["08:00", "12:00"])
    assert original.classification == Classification.SEM_REGISTRO

    edited = record_service.edit_record(original.record_id, ["08:00", "12:00", "13:00", "17:30"], "Esqueceu de bater a saída")

    assert edited.record_id == original.record_id
    assert edited.classification == Classification.OVERTIME
    assert edited.difference_minutes == 30
    assert edited.edit_reason == "Esqueceu de bater a saída"
    assert edited.edited_at is not None
    assert audit_repo.actions() == ["RECORD_EDITED"]


def test_edit_twice_with_same_punches_is_idempotent(record_service):
    record = record_service.classify_and_persist(2, MONDAY, [])
    punches = ["08:10", "12:00", "13:00", "17:00"]

    first = record_service.edit_record(record.record_id, punches, "Ajuste manual")
    second = record_service.edit_record(record.record_id, punches, "Ajuste manual")

    assert (first.classification, first.total_worked_minutes, first.difference_minutes) == (
        second.classification,
        second.total_worked_minutes,
        second.difference_minutes,
    )
    assert second.punches == first.punches


@pytest.mark.parametrize("reason", [None, "", "   "])
def test_edit_requires_reason(record_service, reason):
    record = record_service.classify_and_persist(2, MONDAY, [])

    with pytest.raises(ValidationError):
        record_service.edit_record(record.record_id, ["08:00", "12:00", "13:00", "17:00"], reason)


def test_edit_rejects_malformed_punches(record_service):
    record = record_service.classify_and_persist(2, MONDAY, [])

    with pytest.raises(ValidationError):
        record_service.edit_record(record.record_id, ["13:00", "12:00"], "motivo")


def test_edit_unknown_record(record_service):
    with pytest.raises(NotFoundError):
        record_service.edit_record(999, ["08:00", "12:00", "13:00", "17:00"], "motivo")


def test_range_queries(record_service):
    record_service.classify_and_persist(2, MONDAY, ["08:00", "12:00", "13:00", "17:00"])
    record_service.classify_and_persist(3, MONDAY, ["08:00", "12:00", "13:00", "17:00"])
    record_service.classify_and_persist(4, MONDAY, ["08:00", "12:00", "13:00", "17:00"])
    record_service.classify_and_persist(2, date(2025, 3, 4), [])

    assert len(record_service.list_for_employee(2, MONDAY, date(2025, 3, 31))) == 2
    assert {r.employee_id for r in record_service.list_for_leader(1, MONDAY, MONDAY)} == {2, 3}
    assert len(record_service.list_all(MONDAY, date(2025, 3, 4))) == 4

    with pytest.raises(ValidationError):
        record_service.list_all(date(2025, 3, 4), MONDAY)


def test_apprentice_weekday_uses_single_pair(record_service, employees_repo):
    employees_repo.add(Employee(6, "Felipe", leader_id=1, external_id="1005", is_apprentice=True))

    exact = record_service.classify_and_persist(6, MONDAY, ["08:00", "12:00"])
    assert (exact.classification, exact.total_worked_minutes, exact.difference_minutes) == (
        Classification.NORMAL,
        240,
        0,
    )

    longer = record_service.classify_and_persist(6, date(2025, 3, 4), ["08:00", "13:00"])
    assert (longer.classification, longer.difference_minutes) == (Classification.OVERTIME, 60)

    absent = record_service.classify_and_persist(6, date(2025, 3, 5), [])
    assert (absent.classification, absent.difference_minutes) == (Classification.FALTA, -240)


def test_employee_daily_target_overrides_default(record_service, employees_repo):
    employees_repo.add(Employee(7, "Gabriela", leader_id=1, expected_daily_minutes=528))
    employees_repo.add(Employee(8, "Heitor", leader_id=1, is_apprentice=True, expected_daily_minutes=300))

    full = record_service.classify_and_persist(7, MONDAY, ["08:00", "12:00", "13:00", "17:00"])
    assert (full.classification, full.difference_minutes) == (Classification.LATE, -48)

    apprentice = record_service.classify_and_persist(8, MONDAY, ["08:00", "12:00"])
    assert (apprentice.classification, apprentice.difference_minutes) == (Classification.LATE, -60)

    # Saturday keeps the company half-day target.
    saturday = record_service.classify_and_persist(7, SATURDAY, ["08:00", "12:00"])
    assert saturday.difference_minutes == 0


def test_edit_uses_employee_schedule(record_service, employees_repo):
    employees_repo.add(Employee(6, "Felipe", leader_id=1, is_apprentice=True))
    record = record_service.classify_and_persist(6, MONDAY, [])

    edited = record_service.edit_record(record.record_id, ["09:00", "13:00"], "esqueceu de bater")

    assert (edited.classification, edited.total_worked_minutes, edited.difference_minutes) == (
        Classification.NORMAL,
        240,
        0,
    )
