from datetime import date

import pytest

from src.clinic_payroll.clinic_payroll.attendance.model import AttendanceRecord
from src.clinic_payroll.clinic_payroll.core.enums import AttendanceStatus
from src.clinic_payroll.clinic_payroll.core.exceptions import ValidationError
from src.clinic_payroll.clinic_payroll.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.clinic_payroll.clinic_payroll.payroll.model import SalaryInputs
from src.clinic_payroll.clinic_payroll.settings.model import SalaryPolicy

POLICY = SalaryPolicy(
    late_arrival_threshold=3,
    late_arrival_deduction_days=1,
    absent_deduction_amount=1000,
    leave_deduction_amount=500,
    overtime_rate=200,
    min_overtime_hours=1,
)


@pytest.mark.parametrize("late_days, units", [(0, 0), (2, 0), (3, 1), (5, 1), (6, 2)])
def test_late_days_are_grouped_by_threshold(late_days, units):
    assert StandardPayrollCalculator().late_deduction_units(late_days, POLICY) == units


def test_total_deductions_sums_all_three_charges():
    calc = StandardPayrollCalculator()

    total = calc.total_deductions(salary=30000, absent_days=2, late_days=4, leave_days=1, policy=POLICY)

    # 1 unit * 1000/day + 2 * 1000 + 1 * 500
    assert total == 3500


def test_overtime_for_extra_days():
    assert StandardPayrollCalculator().overtime(salary=30000, present_days=32, working_days=30) == 3000


@pytest.mark.parametrize("present_days", [0, 29, 30])
def test_no_overtime_without_extra_days(present_days):
    assert StandardPayrollCalculator().overtime(salary=30000, present_days=present_days, working_days=30) == 0


def test_overtime_rejects_zero_working_days():
    with pytest.raises(ValidationError):
        StandardPayrollCalculator().overtime(salary=30000, present_days=5, working_days=0)


def test_gross_and_net_salary():
    result = StandardPayrollCalculator().salary(
        SalaryInputs(base_salary=30000, allowances=2000, overtime=3000, bonus=1000), 1500
    )

    assert result.gross_salary == 36000
    assert result.net_salary == 34500


def test_net_salary_is_not_clamped():
    result = StandardPayrollCalculator().salary(SalaryInputs(base_salary=1000), 2500)

    assert result.net_salary == -1500


def test_hourly_overtime_respects_minimum_hours():
    calc = StandardPayrollCalculator()

    assert calc.hourly_overtime(0.5, POLICY) == 0
    assert calc.hourly_overtime(2.5, POLICY) == 500


def test_worked_minutes():
    calc = StandardPayrollCalculator()
    rec = AttendanceRecord(staff_id="s1", work_date=date(2025, 1, 6), status=AttendanceStatus.PRESENT, time="09:00")

    assert calc.worked_minutes(rec) == 0
    done = AttendanceRecord(
        staff_id="s1",
        work_date=date(2025, 1, 6),
        status=AttendanceStatus.PRESENT,
        time="09:00",
        is_checked_out=True,
        checkout_time="18:30",
    )
    assert calc.worked_minutes(done) == 9 * 60 + 30
