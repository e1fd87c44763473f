from __future__ import annotations

from datetime import time

import pytest

from src.clinic_payroll.clinic_payroll.core.exceptions import ConfigurationError
from src.clinic_payroll.clinic_payroll.settings.model import SalaryPolicy
from src.clinic_payroll.clinic_payroll.settings.service import SettingsService


def test_defaults_apply_when_nothing_is_persisted(settings_service):
    assert settings_service.schedule.check_in_time == time(9, 0)
    assert settings_service.salary_policy.late_arrival_threshold == 3
    assert settings_service.salary_policy.absent_deduction_amount == 1000


def test_persisted_settings_win_over_defaults(documents, settings_service):
    documents.docs["salarySettings"] = dict(settings_service.salary_policy.to_document(), absentDeductionAmount=750)
    schedule = settings_service.schedule.to_document()
    schedule["checkInTime"] = "08:30"
    documents.docs["workingSchedule"] = schedule

    settings_service.load()

    assert settings_service.salary_policy.absent_deduction_amount == 750
    assert settings_service.schedule.check_in_time == time(8, 30)


def test_save_persists_and_replaces(documents, settings_service):
    before = settings_service.salary_policy
    doc = dict(before.to_document(), lateArrivalThreshold=4)

    saved = settings_service.save_salary_policy(doc)

    assert settings_service.salary_policy is saved
    assert saved.late_arrival_threshold == 4
    assert before.late_arrival_threshold == 3
    assert documents.docs["salarySettings"]["lateArrivalThreshold"] == 4


@pytest.mark.parametrize(
    "key, value",
    [
        ("lateArrivalThreshold", 0),
        ("lateArrivalThreshold", 2.5),
        ("absentDeductionAmount", -100),
        ("leaveDeductionAmount", -1),
        ("overtimeRate", "fast"),
    ],
)
def test_invalid_salary_settings(settings_service, key, value):
    doc = dict(settings_service.salary_policy.to_document(), **{key: value})

    with pytest.raises(ConfigurationError):
        settings_service.save_salary_policy(doc)
    assert settings_service.salary_policy.late_arrival_threshold == 3


def test_invalid_schedules(settings_service):
    inverted = dict(settings_service.schedule.to_document(), checkInTime="18:00")
    with pytest.raises(ConfigurationError):
        settings_service.save_schedule(inverted)

    missing = settings_service.schedule.to_document()
    del missing["workingDays"]["friday"]
    with pytest.raises(ConfigurationError):
        settings_service.save_schedule(missing)

    with pytest.raises(ConfigurationError):
        settings_service.save_schedule(dict(settings_service.schedule.to_document(), checkOutTime="5pm"))


def test_save_failure_is_reported_but_applied(documents, settings_service):
    documents.fail_writes = True

    saved = settings_service.save_salary_policy(dict(settings_service.salary_policy.to_document(), overtimeRate=300))

    assert settings_service.sync_error is True
    assert settings_service.salary_policy is saved
    assert "salarySettings" not in documents.docs


def test_salary_policy_object_validation():
    with pytest.raises(ConfigurationError):
        SalaryPolicy(
            late_arrival_threshold=3,
            late_arrival_deduction_days=-1,
            absent_deduction_amount=0,
            leave_deduction_amount=0,
            overtime_rate=0,
            min_overtime_hours=0,
        )


def test_corrupt_persisted_settings_fail_loudly(documents):
    documents.docs["workingSchedule"] = {"workingDays": {}, "checkInTime": "09:00", "checkOutTime": "17:00"}
    svc = SettingsService(documents, default_schedule={}, default_salary_settings={})

    with pytest.raises(ConfigurationError):
        svc.load()
