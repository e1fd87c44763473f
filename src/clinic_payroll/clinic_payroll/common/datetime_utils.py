from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional
from zoneinfo import ZoneInfo

from ..core.constants import MONTH_NAMES
from ..core.enums import Weekday
from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def parse_hhmm(value: str) -> time:
    """Parse an HH:MM clock value."""
    m = _HHMM.match(value.strip()) if isinstance(value, str) else None
    if not m:
        raise ValidationError(f"Invalid time: {value!r} (expected HH:MM)")
    return time(hour=int(m.group(1)), minute=int(m.group(2)))


def format_hhmm(value: time | datetime) -> str:
    return value.strftime("%H:%M")


def minutes_since_midnight(value: time | datetime) -> int:
    return value.hour * 60 + value.minute


def weekday_of(value: date) -> Weekday:
    return list(Weekday)[value.weekday()]


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Every calendar date from start to end inclusive, ascending."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def now_local(tz_name: Optional[str] = None) -> datetime:
    """Current local time (naive), optionally in a named timezone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)
    return datetime.now()


def month_index(month: str) -> int:
    """1-based month number for an English month name (case-insensitive)."""
    names = [m.lower() for m in MONTH_NAMES]
    try:
        return names.index(str(month or "").strip().lower()) + 1
    except ValueError:
        raise ValidationError(f"Unknown month: {month!r}") from None
