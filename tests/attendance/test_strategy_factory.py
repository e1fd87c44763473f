from datetime import datetime, time

import pytest

from src.clinic_payroll.clinic_payroll.attendance.classifier import StatusClassifier
from src.clinic_payroll.clinic_payroll.attendance.factory import AttendanceStrategyFactory
from src.clinic_payroll.clinic_payroll.attendance.strategies.half_day_strategy import HalfDayStrategy
from src.clinic_payroll.clinic_payroll.attendance.strategies.late_strategy import LateStrategy
from src.clinic_payroll.clinic_payroll.attendance.strategies.present_strategy import PresentStrategy
from src.clinic_payroll.clinic_payroll.core.enums import AttendanceStatus


def _at(hour: int, minute: int) -> datetime:
    # 2025-01-06 is a Monday
    return datetime(2025, 1, 6, hour, minute)


@pytest.mark.parametrize(
    "hour, minute, expected",
    [
        (8, 59, AttendanceStatus.PRESENT),
        (9, 0, AttendanceStatus.LATE),
        (9, 1, AttendanceStatus.LATE),
        (16, 29, AttendanceStatus.LATE),
        (16, 30, AttendanceStatus.HALF_DAY),
        (16, 31, AttendanceStatus.HALF_DAY),
        (17, 0, AttendanceStatus.PRESENT),
        (17, 1, AttendanceStatus.PRESENT),
    ],
)
def test_classifier_windows(calendar, settings_service, hour, minute, expected):
    classifier = StatusClassifier(calendar)

    suggestion = classifier.classify_now(settings_service.schedule, now=_at(hour, minute))

    assert suggestion.status == expected
    assert suggestion.time == f"{hour:02d}:{minute:02d}"
    assert suggestion.is_holiday is False


def test_classifier_on_holiday_suggests_no_status(calendar, settings_service):
    classifier = StatusClassifier(calendar)

    suggestion = classifier.classify_now(settings_service.schedule, now=datetime(2025, 1, 5, 10, 0))

    assert suggestion.is_holiday is True
    assert suggestion.status is None


def test_classifier_uses_clock_when_now_missing(calendar, settings_service, clock):
    classifier = StatusClassifier(calendar, clock=clock)

    suggestion = classifier.classify_now(settings_service.schedule)

    assert suggestion.status == AttendanceStatus.LATE
    assert suggestion.time == "10:15"


def test_factory_picks_strategy_per_window(settings_service):
    factory = AttendanceStrategyFactory()
    schedule = settings_service.schedule

    assert isinstance(factory.for_checkin(now=_at(8, 0), schedule=schedule), PresentStrategy)
    assert isinstance(factory.for_checkin(now=_at(12, 0), schedule=schedule), LateStrategy)
    assert isinstance(factory.for_checkin(now=_at(16, 45), schedule=schedule), HalfDayStrategy)
    assert schedule.check_out_time == time(17, 0)
