from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...schedules.model import WorkingSchedule
from .base import AttendanceStrategy, StatusDecision


class HalfDayStrategy(AttendanceStrategy):
    """Check-in inside the closing window: too short for a full day."""

    def decide_checkin(self, *, now: datetime, schedule: WorkingSchedule) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY)
