from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_iso_date, month_index, parse_iso_date
from ..common.validators import require_non_empty, require_non_negative
from ..core.constants import MIN_SALARY_YEAR, MONTH_NAMES
from ..core.enums import SalaryStatus
from ..core.exceptions import ValidationError

PeriodKey = tuple[str, str, int]

# snake_case field -> camelCase payload key
_PAYLOAD_KEYS = {
    "staff_id": "staffId",
    "staff_name": "staffName",
    "month": "month",
    "year": "year",
    "base_salary": "baseSalary",
    "allowances": "allowances",
    "overtime": "overtime",
    "bonus": "bonus",
    "deductions": "deductions",
    "present_days": "presentDays",
    "absent_days": "absentDays",
    "leave_days": "leaveDays",
    "late_days": "lateDays",
    "half_days": "halfDays",
    "working_days": "workingDays",
    "status": "status",
    "payment_date": "paymentDate",
    "department": "department",
    "notes": "notes",
}

_MONEY_FIELDS = ("base_salary", "allowances", "overtime", "bonus", "deductions")
_DAY_FIELDS = ("present_days", "absent_days", "leave_days", "late_days", "half_days", "working_days")


def camel_payload(data: Mapping[str, Any]) -> dict[str, Any]:
    """Rename snake_case field keys to their camelCase payload keys."""
    out = {}
    for key, value in data.items():
        out[_PAYLOAD_KEYS.get(key, key)] = value
    return out


@dataclass(frozen=True)
class SalaryRecordData:
    """Editable salary inputs for one staff member and month (the form draft)."""

    staff_id: str
    month: str
    year: int
    base_salary: float
    staff_name: str = ""
    allowances: float = 0.0
    overtime: float = 0.0
    bonus: float = 0.0
    deductions: float = 0.0
    present_days: int = 0
    absent_days: int = 0
    leave_days: int = 0
    late_days: int = 0
    half_days: int = 0
    working_days: int = 0
    status: SalaryStatus = SalaryStatus.PENDING
    payment_date: Optional[date] = None
    department: Optional[str] = None
    notes: Optional[str] = None

    @property
    def period_key(self) -> PeriodKey:
        return (self.staff_id, self.month, self.year)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "SalaryRecordData":
        def get(field_name: str, default: Any = None) -> Any:
            key = _PAYLOAD_KEYS[field_name]
            if key in data:
                return data[key]
            return data.get(field_name, default)

        staff_id = require_non_empty(get("staff_id"), "staffId")
        month = MONTH_NAMES[month_index(require_non_empty(get("month"), "month")) - 1]

        try:
            year = int(get("year"))
        except (TypeError, ValueError):
            raise ValidationError("year must be a whole number") from None
        if year < MIN_SALARY_YEAR:
            raise ValidationError(f"year must be {MIN_SALARY_YEAR} or later")

        values: dict[str, Any] = {}
        for name in _MONEY_FIELDS:
            values[name] = require_non_negative(get(name, 0) or 0, _PAYLOAD_KEYS[name])
        for name in _DAY_FIELDS:
            days = require_non_negative(get(name, 0) or 0, _PAYLOAD_KEYS[name])
            if days != int(days):
                raise ValidationError(f"{_PAYLOAD_KEYS[name]} must be a whole number")
            values[name] = int(days)

        try:
            status = SalaryStatus(get("status") or SalaryStatus.PENDING.value)
        except ValueError:
            raise ValidationError(f"Unknown salary status: {get('status')!r}") from None

        payment_date = get("payment_date")
        if payment_date and not isinstance(payment_date, date):
            payment_date = parse_iso_date(str(payment_date))

        return cls(
            staff_id=staff_id,
            staff_name=str(get("staff_name") or ""),
            month=month,
            year=year,
            status=status,
            payment_date=payment_date or None,
            department=get("department") or None,
            notes=get("notes") or None,
            **values,
        )

    def to_payload(self) -> dict[str, Any]:
        out = {}
        for name, key in _PAYLOAD_KEYS.items():
            value = getattr(self, name)
            if isinstance(value, SalaryStatus):
                value = value.value
            elif isinstance(value, date):
                value = format_iso_date(value)
            out[key] = value
        return out


@dataclass(frozen=True)
class SalaryRecord:
    """Persisted monthly salary record with computed totals."""

    id: str
    data: SalaryRecordData
    gross_salary: float
    net_salary: float

    @property
    def total_salary(self) -> float:
        return self.net_salary

    @property
    def period_key(self) -> PeriodKey:
        return self.data.period_key

    def to_dict(self) -> dict[str, Any]:
        out = {"id": self.id}
        out.update(self.data.to_payload())
        out.update(
            {
                "grossSalary": self.gross_salary,
                "netSalary": self.net_salary,
                "totalSalary": self.total_salary,
            }
        )
        return out
