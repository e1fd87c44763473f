from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import StaffStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class StaffMember:
    """Staff member as read from the staff directory (read-only here)."""

    id: str
    name: str
    salary: float
    role: str = ""
    status: StaffStatus = StaffStatus.ACTIVE

    def __post_init__(self):
        if self.salary < 0:
            raise ValidationError("Salary must be non-negative")

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "StaffMember":
        try:
            status = StaffStatus(data.get("status") or StaffStatus.ACTIVE.value)
        except ValueError:
            raise ValidationError(f"Unknown staff status: {data.get('status')!r}") from None
        return cls(
            id=require_non_empty(data.get("id"), "staff.id"),
            name=str(data.get("name") or ""),
            role=str(data.get("role") or ""),
            status=status,
            salary=require_non_negative(data.get("salary", 0), "staff.salary"),
        )
