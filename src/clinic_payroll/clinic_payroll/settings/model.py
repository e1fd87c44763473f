from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SalaryPolicy:
    """Monetary rules applied to attendance when computing payroll."""

    late_arrival_threshold: int
    late_arrival_deduction_days: float
    absent_deduction_amount: float
    leave_deduction_amount: float
    overtime_rate: float
    min_overtime_hours: float

    def __post_init__(self):
        if self.late_arrival_threshold < 1:
            raise ConfigurationError("lateArrivalThreshold must be at least 1")
        for name in (
            "late_arrival_deduction_days",
            "absent_deduction_amount",
            "leave_deduction_amount",
            "overtime_rate",
            "min_overtime_hours",
        ):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{_CAMEL[name]} must be non-negative")

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "SalaryPolicy":
        values: dict[str, Any] = {}
        for field_name, key in _CAMEL.items():
            if key not in doc:
                raise ConfigurationError(f"Salary settings are missing {key}")
            try:
                values[field_name] = float(doc[key])
            except (TypeError, ValueError):
                raise ConfigurationError(f"{key} must be a number") from None

        threshold = values["late_arrival_threshold"]
        if threshold != int(threshold):
            raise ConfigurationError("lateArrivalThreshold must be a whole number")
        values["late_arrival_threshold"] = int(threshold)
        return cls(**values)

    def to_document(self) -> dict:
        return {key: getattr(self, field_name) for field_name, key in _CAMEL.items()}


_CAMEL = {
    "late_arrival_threshold": "lateArrivalThreshold",
    "late_arrival_deduction_days": "lateArrivalDeductionDays",
    "absent_deduction_amount": "absentDeductionAmount",
    "leave_deduction_amount": "leaveDeductionAmount",
    "overtime_rate": "overtimeRate",
    "min_overtime_hours": "minOvertimeHours",
}
