from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError

_KEY = re.compile(r"^(?P<staff_id>.+)-(?P<date>\d{4}-\d{2}-\d{2})$")

RecordKey = tuple[str, date]


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one staff member's attendance on one day."""

    staff_id: str
    work_date: date
    status: AttendanceStatus
    time: str
    notes: Optional[str] = None
    is_checked_out: bool = False
    checkout_time: Optional[str] = None

    @property
    def key(self) -> RecordKey:
        return (self.staff_id, self.work_date)

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "status": self.status.value,
            "time": self.time,
            "date": format_iso_date(self.work_date),
            "isCheckedOut": self.is_checked_out,
        }
        if self.notes:
            doc["notes"] = self.notes
        if self.checkout_time:
            doc["checkoutTime"] = self.checkout_time
        return doc

    @classmethod
    def from_document(cls, key: str, doc: Mapping[str, Any]) -> "AttendanceRecord":
        staff_id, work_date = parse_record_key(key)
        try:
            status = AttendanceStatus(doc.get("status"))
        except ValueError:
            raise ValidationError(f"Unknown attendance status {doc.get('status')!r} for {key}") from None
        if not doc.get("time"):
            raise ValidationError(f"Attendance record {key} has no time")

        return cls(
            staff_id=staff_id,
            work_date=work_date,
            status=status,
            time=str(doc["time"]),
            notes=doc.get("notes") or None,
            is_checked_out=bool(doc.get("isCheckedOut", False)),
            checkout_time=doc.get("checkoutTime") or None,
        )


def record_key(staff_id: str, work_date: date) -> str:
    """Flat persisted key: ``{staffId}-{YYYY-MM-DD}``."""
    return f"{staff_id}-{format_iso_date(work_date)}"


def parse_record_key(key: str) -> RecordKey:
    m = _KEY.match(key or "")
    if not m:
        raise ValidationError(f"Malformed attendance key: {key!r}")
    return m.group("staff_id"), parse_iso_date(m.group("date"))
