from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import minutes_since_midnight
from ..core.constants import HALF_DAY_WINDOW_MINUTES
from ..schedules.model import WorkingSchedule
from .strategies.base import AttendanceStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.holiday_strategy import HolidayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    half_day_window_minutes: int = HALF_DAY_WINDOW_MINUTES

    def for_checkin(self, *, now: datetime, schedule: WorkingSchedule, is_holiday: bool = False) -> AttendanceStrategy:
        if is_holiday:
            return HolidayStrategy()

        now_min = minutes_since_midnight(now)
        in_min = minutes_since_midnight(schedule.check_in_time)
        out_min = minutes_since_midnight(schedule.check_out_time)

        # Half-open windows, first match wins.
        if now_min < in_min:
            return PresentStrategy()
        if now_min < out_min - self.half_day_window_minutes:
            return LateStrategy()
        if now_min < out_min:
            return HalfDayStrategy()
        # Past closing falls back to present; kept as observed.
        return PresentStrategy()
