from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...schedules.model import WorkingSchedule
from .base import AttendanceStrategy, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """Before opening, or once the working window has elapsed."""

    def decide_checkin(self, *, now: datetime, schedule: WorkingSchedule) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
