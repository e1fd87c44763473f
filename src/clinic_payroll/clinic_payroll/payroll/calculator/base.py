from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceRecord
from ...settings.model import SalaryPolicy
from ..model import SalaryBreakdown, SalaryInputs


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def late_deduction_units(self, late_days: int, policy: SalaryPolicy) -> float:
        raise NotImplementedError

    @abstractmethod
    def total_deductions(
        self,
        *,
        salary: float,
        absent_days: int,
        late_days: int,
        leave_days: int,
        policy: SalaryPolicy,
    ) -> float:
        raise NotImplementedError

    @abstractmethod
    def overtime(self, *, salary: float, present_days: int, working_days: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def hourly_overtime(self, hours: float, policy: SalaryPolicy) -> float:
        raise NotImplementedError

    @abstractmethod
    def salary(self, inputs: SalaryInputs, attendance_deductions: float) -> SalaryBreakdown:
        raise NotImplementedError

    @abstractmethod
    def worked_minutes(self, record: AttendanceRecord) -> int:
        raise NotImplementedError
