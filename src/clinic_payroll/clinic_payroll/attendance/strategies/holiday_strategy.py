from __future__ import annotations

from datetime import datetime

from ...schedules.model import WorkingSchedule
from .base import AttendanceStrategy, StatusDecision


class HolidayStrategy(AttendanceStrategy):
    """Non-working day: no status is required."""

    def decide_checkin(self, *, now: datetime, schedule: WorkingSchedule) -> StatusDecision:
        return StatusDecision(status=None, note="holiday")
