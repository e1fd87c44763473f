"""Clinic Payroll package.

Staff attendance tracking and payroll computation for the clinic dashboard,
organized by feature modules (schedules, attendance, payroll, salaries, ...)
with a thin Flask controller layer over service/repository layers.
"""
