from __future__ import annotations

import copy
from datetime import datetime
from typing import Optional

import pytest

from src.clinic_payroll.clinic_payroll.attendance.store import AttendanceStore
from src.clinic_payroll.clinic_payroll.container import build_services
from src.clinic_payroll.clinic_payroll.core.enums import SalaryStatus
from src.clinic_payroll.clinic_payroll.core.exceptions import StorageError
from src.clinic_payroll.clinic_payroll.payroll.service import PayrollService
from src.clinic_payroll.clinic_payroll.salaries.model import SalaryRecord
from src.clinic_payroll.clinic_payroll.schedules.calendar import ScheduleCalendar
from src.clinic_payroll.clinic_payroll.settings.service import SettingsService

# Monday 2025-01-06 .. Friday 2025-01-10 are working days; weekends are off.
WEEKDAY_SCHEDULE = {
    "workingDays": {
        "monday": True,
        "tuesday": True,
        "wednesday": True,
        "thursday": True,
        "friday": True,
        "saturday": False,
        "sunday": False,
    },
    "checkInTime": "09:00",
    "checkOutTime": "17:00",
}

SALARY_SETTINGS = {
    "lateArrivalThreshold": 3,
    "lateArrivalDeductionDays": 1,
    "absentDeductionAmount": 1000,
    "leaveDeductionAmount": 500,
    "overtimeRate": 200,
    "minOvertimeHours": 1,
}


class InMemoryDocuments:
    """Whole-document store; copies on the way in and out like a real backend."""

    def __init__(self, initial: Optional[dict] = None):
        self.docs: dict[str, dict] = copy.deepcopy(initial or {})
        self.fail_writes = False
        self.saves = 0

    def load(self, key: str) -> Optional[dict]:
        doc = self.docs.get(key)
        return copy.deepcopy(doc) if doc is not None else None

    def save(self, key: str, value: dict) -> None:
        if self.fail_writes:
            raise StorageError("quota exceeded")
        self.docs[key] = copy.deepcopy(value)
        self.saves += 1


class InMemorySalaries:
    def __init__(self):
        self.records: dict[str, SalaryRecord] = {}

    def list_all(self):
        return list(self.records.values())

    def get_by_id(self, record_id: str) -> Optional[SalaryRecord]:
        return self.records.get(record_id)

    def find_by_period(self, *, staff_id, month, year):
        return [r for r in self.records.values() if r.period_key == (staff_id, month, year)]

    def list_by_staff(self, staff_id):
        return [r for r in self.records.values() if r.data.staff_id == staff_id]

    def list_by_period(self, *, month, year):
        return [r for r in self.records.values() if r.data.month == month and r.data.year == year]

    def list_by_status(self, status: SalaryStatus):
        return [r for r in self.records.values() if r.data.status == status]

    def insert(self, record: SalaryRecord) -> None:
        self.records[record.id] = record

    def update(self, record: SalaryRecord) -> bool:
        if record.id not in self.records:
            return False
        self.records[record.id] = record
        return True

    def delete(self, record_id: str) -> bool:
        return self.records.pop(record_id, None) is not None


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FixedClock(datetime(2025, 1, 6, 10, 15))


@pytest.fixture
def documents():
    return InMemoryDocuments()


@pytest.fixture
def salaries_repo():
    return InMemorySalaries()


@pytest.fixture
def settings_service(documents):
    svc = SettingsService(documents, default_schedule=WEEKDAY_SCHEDULE, default_salary_settings=SALARY_SETTINGS)
    svc.load()
    return svc


@pytest.fixture
def calendar(settings_service, clock):
    return ScheduleCalendar(settings_service, clock=clock)


@pytest.fixture
def store(documents, calendar, clock):
    s = AttendanceStore(documents, calendar, clock=clock)
    s.load()
    return s


@pytest.fixture
def payroll(store, calendar, settings_service):
    return PayrollService(store, calendar, settings_service)


@pytest.fixture
def container(documents, salaries_repo):
    return build_services(
        documents=documents,
        salaries_repo=salaries_repo,
        default_schedule=WEEKDAY_SCHEDULE,
        default_salary_settings=SALARY_SETTINGS,
    )
