from datetime import date, datetime

import pytest

from src.clinic_payroll.clinic_payroll.core.exceptions import ValidationError


def test_weekend_is_holiday_and_weekday_is_not(calendar):
    assert calendar.is_holiday(date(2025, 1, 5)) is True  # Sunday
    assert calendar.is_holiday(date(2025, 1, 11)) is True  # Saturday
    assert calendar.is_holiday(date(2025, 1, 6)) is False  # Monday


def test_is_today_holiday_uses_clock(calendar, clock):
    assert calendar.is_today_holiday() is False

    clock.now = datetime(2025, 1, 12, 9, 0)
    assert calendar.is_today_holiday() is True


def test_working_days_between_skips_weekends(calendar):
    # January 2025: 23 weekdays
    assert calendar.working_days_between(date(2025, 1, 1), date(2025, 1, 31)) == 23
    assert calendar.working_days_between(date(2025, 1, 11), date(2025, 1, 12)) == 0


def test_working_days_between_rejects_inverted_range(calendar):
    with pytest.raises(ValidationError):
        calendar.working_days_between(date(2025, 1, 10), date(2025, 1, 6))


def test_saved_schedule_takes_effect_immediately(calendar, settings_service):
    doc = settings_service.schedule.to_document()
    doc["workingDays"]["saturday"] = True
    settings_service.save_schedule(doc)

    assert calendar.is_holiday(date(2025, 1, 11)) is False
