from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeductionSummary:
    total_deductions: float
    absent_days: int
    late_days: int
    leave_days: int
    late_deduction_units: float


@dataclass(frozen=True)
class AttendanceBreakdown:
    """Per-status day counts over the working days of a range."""

    present_days: int
    absent_days: int
    late_days: int
    leave_days: int
    half_days: int
    working_days: int


@dataclass(frozen=True)
class SalaryInputs:
    base_salary: float
    allowances: float = 0.0
    overtime: float = 0.0
    bonus: float = 0.0


@dataclass(frozen=True)
class SalaryBreakdown:
    gross_salary: float
    net_salary: float


@dataclass(frozen=True)
class PayrollDraft:
    """Pre-filled monthly salary figures offered before a record is saved."""

    staff_id: str
    staff_name: str
    month: str
    year: int
    base_salary: float
    overtime: float
    overtime_hours: float
    deductions: float
    gross_salary: float
    net_salary: float
    attendance: AttendanceBreakdown
