"""Compute a monthly salary draft through the service layer, without Flask."""

import importlib
import sys

from config import get_settings_module

from src.clinic_payroll.clinic_payroll.container import build_container
from src.clinic_payroll.clinic_payroll.staff.model import StaffMember


def main(month: str = "January", year: int = 2025):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    staff = StaffMember(id="dr-ali", name="Dr. Ali", salary=60000, role="dentist")
    draft = container.payroll_service.build_monthly_draft(staff, month, year)
    print(f"{draft.staff_name} {draft.month} {draft.year}")
    print(f"  attendance: {draft.attendance}")
    print(f"  overtime:   {draft.overtime:.2f} ({draft.overtime_hours:.1f}h)")
    print(f"  deductions: {draft.deductions:.2f}")
    print(f"  net:        {draft.net_salary:.2f}")


if __name__ == "__main__":
    main(*sys.argv[1:2], *[int(a) for a in sys.argv[2:3]])
