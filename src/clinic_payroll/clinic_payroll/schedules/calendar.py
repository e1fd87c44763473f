from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional, Protocol

from ..common.datetime_utils import iter_dates, now_local, weekday_of
from ..core.exceptions import ValidationError
from .model import WorkingSchedule


class ScheduleSource(Protocol):
    @property
    def schedule(self) -> WorkingSchedule:
        raise NotImplementedError


class ScheduleCalendar:
    """Answers "is this date a working day?" from the current working schedule.

    The schedule is read from ``source`` on every call so a saved schedule takes
    effect without rebuilding the calendar.
    """

    def __init__(self, source: ScheduleSource, *, clock: Optional[Callable[[], datetime]] = None):
        self._source = source
        self._clock = clock or now_local

    def is_holiday(self, day: date) -> bool:
        return not self._source.schedule.is_working_day(weekday_of(day))

    def is_today_holiday(self) -> bool:
        return self.is_holiday(self._clock().date())

    def working_days_between(self, start: date, end: date) -> int:
        if start > end:
            raise ValidationError("Start date must not be after end date")
        return sum(1 for d in iter_dates(start, end) if not self.is_holiday(d))
