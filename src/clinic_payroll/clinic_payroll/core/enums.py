from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Stored attendance status. Holidays are derived, never stored."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    LEAVE = "leave"
    HALF_DAY = "half-day"


class StaffStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on_leave"


class SalaryStatus(str, Enum):
    """Payment state of a monthly salary record."""

    PENDING = "pending"
    PAID = "paid"


class Weekday(str, Enum):
    """Weekday keys used by the working schedule, in ``date.weekday()`` order."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
