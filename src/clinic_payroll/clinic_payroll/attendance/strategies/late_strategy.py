from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...schedules.model import WorkingSchedule
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, now: datetime, schedule: WorkingSchedule) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)
