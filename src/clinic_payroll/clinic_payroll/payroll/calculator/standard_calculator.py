from __future__ import annotations

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import minutes_since_midnight, parse_hhmm
from ...core.constants import DAILY_RATE_DIVISOR, OVERTIME_MULTIPLIER
from ...core.exceptions import ValidationError
from ...settings.model import SalaryPolicy
from ..model import SalaryBreakdown, SalaryInputs
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard clinic rules.

    - late arrivals are charged in whole threshold multiples, each worth
      ``lateArrivalDeductionDays`` days of salary (salary / 30 per day);
    - absent and leave days are charged fixed amounts;
    - day overtime pays 1.5x the daily rate for days beyond the working days.
    """

    def late_deduction_units(self, late_days: int, policy: SalaryPolicy) -> float:
        return (late_days // policy.late_arrival_threshold) * policy.late_arrival_deduction_days

    def total_deductions(
        self,
        *,
        salary: float,
        absent_days: int,
        late_days: int,
        leave_days: int,
        policy: SalaryPolicy,
    ) -> float:
        units = self.late_deduction_units(late_days, policy)
        return (
            units * (salary / DAILY_RATE_DIVISOR)
            + absent_days * policy.absent_deduction_amount
            + leave_days * policy.leave_deduction_amount
        )

    def overtime(self, *, salary: float, present_days: int, working_days: int) -> float:
        if working_days <= 0:
            raise ValidationError("Working days must be greater than zero")
        daily_rate = salary / working_days
        extra_days = max(0, present_days - working_days)
        return daily_rate * extra_days * OVERTIME_MULTIPLIER

    def hourly_overtime(self, hours: float, policy: SalaryPolicy) -> float:
        if hours < 0:
            raise ValidationError("Overtime hours must be non-negative")
        if hours < policy.min_overtime_hours:
            return 0.0
        return hours * policy.overtime_rate

    def salary(self, inputs: SalaryInputs, attendance_deductions: float) -> SalaryBreakdown:
        gross = inputs.base_salary + inputs.allowances + inputs.overtime + inputs.bonus
        # Not clamped: a negative net signals a policy misconfiguration.
        return SalaryBreakdown(gross_salary=gross, net_salary=gross - attendance_deductions)

    def worked_minutes(self, record: AttendanceRecord) -> int:
        if not record.is_checked_out or not record.checkout_time:
            return 0
        minutes = minutes_since_midnight(parse_hhmm(record.checkout_time)) - minutes_since_midnight(parse_hhmm(record.time))
        return max(minutes, 0)
