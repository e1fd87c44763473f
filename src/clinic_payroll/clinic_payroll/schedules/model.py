from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any, Mapping

from ..common.datetime_utils import format_hhmm, parse_hhmm
from ..core.enums import Weekday
from ..core.exceptions import ConfigurationError, ValidationError


@dataclass(frozen=True)
class WorkingSchedule:
    """Weekly working days plus the daily check-in/check-out window."""

    working_days: Mapping[Weekday, bool]
    check_in_time: time
    check_out_time: time

    def __post_init__(self):
        missing = [d.value for d in Weekday if d not in self.working_days]
        if missing:
            raise ConfigurationError(f"Working schedule is missing weekdays: {', '.join(missing)}")
        if self.check_in_time >= self.check_out_time:
            raise ConfigurationError("Check-in time must be before check-out time")

    def is_working_day(self, weekday: Weekday) -> bool:
        return bool(self.working_days[weekday])

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "WorkingSchedule":
        raw_days = doc.get("workingDays") or {}
        days: dict[Weekday, bool] = {}
        for weekday in Weekday:
            if weekday.value in raw_days:
                value = raw_days[weekday.value]
                if not isinstance(value, bool):
                    raise ConfigurationError(f"workingDays.{weekday.value} must be true or false")
                days[weekday] = value

        try:
            check_in = parse_hhmm(doc.get("checkInTime"))
            check_out = parse_hhmm(doc.get("checkOutTime"))
        except ValidationError as e:
            raise ConfigurationError(str(e)) from None

        return cls(working_days=days, check_in_time=check_in, check_out_time=check_out)

    def to_document(self) -> dict:
        return {
            "workingDays": {d.value: bool(self.working_days[d]) for d in Weekday},
            "checkInTime": format_hhmm(self.check_in_time),
            "checkOutTime": format_hhmm(self.check_out_time),
        }
