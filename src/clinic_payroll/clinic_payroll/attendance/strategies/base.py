from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...schedules.model import WorkingSchedule


@dataclass(frozen=True)
class StatusDecision:
    status: Optional[AttendanceStatus]
    note: Optional[str] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a default attendance status."""

    @abstractmethod
    def decide_checkin(self, *, now: datetime, schedule: WorkingSchedule) -> StatusDecision:
        raise NotImplementedError
