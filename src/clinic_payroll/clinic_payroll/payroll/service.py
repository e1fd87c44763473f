from __future__ import annotations

import calendar as _calendar
from datetime import date
from typing import Iterator, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.store import AttendanceStore, coerce_date
from ..common.datetime_utils import iter_dates, minutes_since_midnight, month_index
from ..core.constants import MONTH_NAMES
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..schedules.calendar import ScheduleCalendar
from ..settings.service import SettingsService
from ..staff.model import StaffMember
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import AttendanceBreakdown, DeductionSummary, PayrollDraft, SalaryBreakdown, SalaryInputs


class PayrollService:
    """Turns attendance over a date range plus the salary policy into money.

    Holidays are skipped entirely. A working day without a record counts as
    an absence here, and only here.
    """

    def __init__(
        self,
        attendance: AttendanceStore,
        calendar: ScheduleCalendar,
        settings: SettingsService,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._calendar = calendar
        self._settings = settings
        self._calculator = calculator or StandardPayrollCalculator()

    def compute_deductions(self, staff: StaffMember, start: date | str, end: date | str) -> DeductionSummary:
        absent = late = leave = 0
        for _, record in self._working_days(staff, start, end):
            if record is None or record.status == AttendanceStatus.ABSENT:
                absent += 1
            elif record.status == AttendanceStatus.LATE:
                late += 1
            elif record.status == AttendanceStatus.LEAVE:
                leave += 1

        policy = self._settings.salary_policy
        return DeductionSummary(
            total_deductions=self._calculator.total_deductions(
                salary=staff.salary,
                absent_days=absent,
                late_days=late,
                leave_days=leave,
                policy=policy,
            ),
            absent_days=absent,
            late_days=late,
            leave_days=leave,
            late_deduction_units=self._calculator.late_deduction_units(late, policy),
        )

    def summarize_attendance(self, staff: StaffMember, start: date | str, end: date | str) -> AttendanceBreakdown:
        counts = {status: 0 for status in AttendanceStatus}
        working_days = 0
        for _, record in self._working_days(staff, start, end):
            working_days += 1
            counts[record.status if record else AttendanceStatus.ABSENT] += 1

        return AttendanceBreakdown(
            present_days=counts[AttendanceStatus.PRESENT],
            absent_days=counts[AttendanceStatus.ABSENT],
            late_days=counts[AttendanceStatus.LATE],
            leave_days=counts[AttendanceStatus.LEAVE],
            half_days=counts[AttendanceStatus.HALF_DAY],
            working_days=working_days,
        )

    def compute_overtime(self, staff: StaffMember, present_days: int, working_days: int) -> float:
        return self._calculator.overtime(salary=staff.salary, present_days=int(present_days), working_days=int(working_days))

    def compute_hourly_overtime(self, hours: float) -> float:
        return self._calculator.hourly_overtime(float(hours), self._settings.salary_policy)

    def compute_salary(self, inputs: SalaryInputs, attendance_deductions: float = 0.0) -> SalaryBreakdown:
        return self._calculator.salary(inputs, float(attendance_deductions))

    def overtime_hours(self, staff: StaffMember, start: date | str, end: date | str) -> float:
        """Hours worked beyond the scheduled day, from checked-out records."""
        schedule = self._settings.schedule
        scheduled = minutes_since_midnight(schedule.check_out_time) - minutes_since_midnight(schedule.check_in_time)
        extra = 0
        for _, record in self._working_days(staff, start, end):
            if record is not None:
                extra += max(0, self._calculator.worked_minutes(record) - scheduled)
        return extra / 60

    def build_monthly_draft(self, staff: StaffMember, month: str, year: int) -> PayrollDraft:
        month_number = month_index(month)
        start = date(int(year), month_number, 1)
        end = date(int(year), month_number, _calendar.monthrange(int(year), month_number)[1])

        breakdown = self.summarize_attendance(staff, start, end)
        deductions = self.compute_deductions(staff, start, end)
        hours = self.overtime_hours(staff, start, end)
        overtime = self.compute_hourly_overtime(hours)
        totals = self.compute_salary(SalaryInputs(base_salary=staff.salary, overtime=overtime), deductions.total_deductions)

        return PayrollDraft(
            staff_id=staff.id,
            staff_name=staff.name,
            month=MONTH_NAMES[month_number - 1],
            year=int(year),
            base_salary=staff.salary,
            overtime=overtime,
            overtime_hours=hours,
            deductions=deductions.total_deductions,
            gross_salary=totals.gross_salary,
            net_salary=totals.net_salary,
            attendance=breakdown,
        )

    def _working_days(
        self, staff: StaffMember, start: date | str, end: date | str
    ) -> Iterator[tuple[date, Optional[AttendanceRecord]]]:
        start = coerce_date(start, "start")
        end = coerce_date(end, "end")
        if start > end:
            raise ValidationError("Start date must not be after end date")

        for day in iter_dates(start, end):
            if self._calendar.is_holiday(day):
                continue
            yield day, self._attendance.get(staff.id, day)
