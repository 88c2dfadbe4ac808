from __future__ import annotations

from datetime import datetime

import pytest

from src.banco_horas.banco_horas.audit.model import AuditEntry
from src.banco_horas.banco_horas.employees.model import Employee
from src.banco_horas.banco_horas.holidays.model import Holiday
from src.banco_horas.banco_horas.holidays.service import HolidayService
from src.banco_horas.banco_horas.records.model import DailyRecord
from src.banco_horas.banco_horas.records.service import RecordService


class FakeEmployeesRepo:
    def __init__(self, employees=()):
        self._by_id = {e.employee_id: e for e in employees}

    def add(self, employee: Employee) -> None:
        self._by_id[employee.employee_id] = employee

    def get_by_id(self, employee_id):
        return self._by_id.get(int(employee_id))

    def list_active(self, *, leader_id=None):
        out = [e for e in self._by_id.values() if e.is_active]
        if leader_id is not None:
            out = [e for e in out if e.leader_id == int(leader_id)]
        return sorted(out, key=lambda e: e.name)


class FakeHolidaysRepo:
    def __init__(self):
        self._next_id = 1
        self._items: dict[int, Holiday] = {}

    def list_all(self):
        return sorted(self._items.values(), key=lambda h: h.holiday_date, reverse=True)

    def get_by_id(self, holiday_id):
        return self._items.get(int(holiday_id))

    def create(self, *, holiday_date, name, holiday_type, recurring):
        hid = self._next_id
        self._next_id += 1
        self._items[hid] = Holiday(hid, holiday_date, name, holiday_type, recurring)
        return hid

    def update(self, *, holiday_id, holiday_date, name, holiday_type, recurring):
        if int(holiday_id) not in self._items:
            return False
        self._items[int(holiday_id)] = Holiday(int(holiday_id), holiday_date, name, holiday_type, recurring)
        return True

    def delete(self, *, holiday_id):
        return self._items.pop(int(holiday_id), None) is not None


class FakeRecordsRepo:
    def __init__(self, employees: FakeEmployeesRepo):
        self._employees = employees
        self._next_id = 1
        self._by_key: dict[tuple, DailyRecord] = {}
        self.upserts = 0

    def _build(self, record_id, employee_id, work_date, punches, result, **extra):
        p1, p2, p3, p4 = punches
        return DailyRecord(
            record_id=record_id,
            employee_id=employee_id,
            work_date=work_date,
            punch_1=p1,
            punch_2=p2,
            punch_3=p3,
            punch_4=p4,
            total_worked_minutes=result.worked_minutes,
            difference_minutes=result.difference_minutes,
            classification=result.classification,
            **extra,
        )

    def get_by_id(self, record_id):
        return next((r for r in self._by_key.values() if r.record_id == int(record_id)), None)

    def get_for_employee_and_date(self, employee_id, work_date):
        return self._by_key.get((int(employee_id), work_date))

    def upsert(self, *, employee_id, work_date, punches, result):
        self.upserts += 1
        key = (int(employee_id), work_date)
        existing = self._by_key.get(key)
        if existing:
            record_id = existing.record_id
        else:
            record_id = self._next_id
            self._next_id += 1
        self._by_key[key] = self._build(record_id, int(employee_id), work_date, punches, result)
        return record_id

    def update_punches(self, *, record_id, punches, result, edit_reason, edited_at):
        record = self.get_by_id(record_id)
        if not record:
            return False
        self._by_key[(record.employee_id, record.work_date)] = self._build(
            record.record_id,
            record.employee_id,
            record.work_date,
            punches,
            result,
            edit_reason=edit_reason,
            edited_at=edited_at,
        )
        return True

    def all(self):
        return sorted(self._by_key.values(), key=lambda r: (r.work_date, r.employee_id))

    def list_by_date(self, work_date):
        return [r for r in self.all() if r.work_date == work_date]

    def list_for_employee_range(self, *, employee_id, start, end):
        return [r for r in self.all() if r.employee_id == int(employee_id) and start <= r.work_date <= end]

    def list_for_leader_range(self, *, leader_id, start, end):
        team = {e.employee_id for e in self._employees.list_active(leader_id=leader_id)}
        return [r for r in self.all() if r.employee_id in team and start <= r.work_date <= end]

    def list_all_range(self, *, start, end):
        return [r for r in self.all() if start <= r.work_date <= end]


class FakeAuditRepo:
    def __init__(self):
        self.entries: list[AuditEntry] = []

    def log(self, action, entity_type, entity_id=None, details=None):
        self.entries.append(
            AuditEntry(
                action=action,
                entity_type=entity_type,
                entity_id=str(entity_id) if entity_id is not None else None,
                details=details,
                created_at=datetime(2025, 3, 10, 12, 0, 0),
            )
        )

    def list_recent(self, *, limit, offset=0):
        return list(reversed(self.entries))[offset:offset + limit]

    def actions(self):
        return [e.action for e in self.entries]


@pytest.fixture
def employees_repo():
    return FakeEmployeesRepo(
        [
            Employee(1, "Ana Souza", leader_id=None, external_id=None, works_saturday=False),
            Employee(2, "Bruno Lima", leader_id=1, external_id="1001"),
            Employee(3, "Carla Mendes", leader_id=1, external_id="1002", works_saturday=False),
            Employee(4, "Diego Alves", leader_id=9, external_id="1003"),
        ]
    )


@pytest.fixture
def holidays_repo():
    return FakeHolidaysRepo()


@pytest.fixture
def records_repo(employees_repo):
    return FakeRecordsRepo(employees_repo)


@pytest.fixture
def audit_repo():
    return FakeAuditRepo()


@pytest.fixture
def holiday_service(holidays_repo, audit_repo):
    return HolidayService(holidays_repo, audit_repo)


@pytest.fixture
def record_service(records_repo, employees_repo, holiday_service, audit_repo):
    return RecordService(records_repo, employees_repo, holiday_service, audit_repo)


@pytest.fixture
def make_record():
    """Builds DailyRecord rows for balance tests."""

    def _make(work_date, difference, classification, *, employee_id=2, record_id=0, worked=None):
        return DailyRecord(
            record_id=record_id,
            employee_id=employee_id,
            work_date=work_date,
            punch_1=None,
            punch_2=None,
            punch_3=None,
            punch_4=None,
            total_worked_minutes=worked,
            difference_minutes=difference,
            classification=classification,
        )

    return _make


