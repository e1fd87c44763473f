from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import format_hhmm, now_local
from ..core.enums import AttendanceStatus
from ..schedules.calendar import ScheduleCalendar
from ..schedules.model import WorkingSchedule
from .factory import AttendanceStrategyFactory


@dataclass(frozen=True)
class StatusSuggestion:
    """Default status offered to the operator; it may be overridden when marking."""

    status: Optional[AttendanceStatus]
    time: str
    is_holiday: bool = False


class StatusClassifier:
    def __init__(
        self,
        calendar: ScheduleCalendar,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._calendar = calendar
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._clock = clock or now_local

    def classify_now(self, schedule: WorkingSchedule, *, now: datetime | None = None) -> StatusSuggestion:
        now = now or self._clock()
        is_holiday = self._calendar.is_holiday(now.date())

        strategy = self._factory.for_checkin(now=now, schedule=schedule, is_holiday=is_holiday)
        decision = strategy.decide_checkin(now=now, schedule=schedule)
        return StatusSuggestion(status=decision.status, time=format_hhmm(now), is_holiday=is_holiday)
