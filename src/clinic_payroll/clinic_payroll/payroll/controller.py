from __future__ import annotations

from flask import Flask

from ..common.http import json_endpoint, request_json
from ..common.validators import require_non_negative
from ..container import Container
from ..core.exceptions import ValidationError
from ..staff.model import StaffMember
from .model import SalaryInputs


def _staff(data: dict) -> StaffMember:
    payload = data.get("staff")
    if not isinstance(payload, dict):
        raise ValidationError("staff is required")
    return StaffMember.from_payload(payload)


def _whole(data: dict, key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value != int(value):
        raise ValidationError(f"{key} must be a whole number")
    return int(value)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/deductions", methods=["POST"], endpoint="payroll_deductions")
    @json_endpoint
    def payroll_deductions():
        data = request_json()
        return container.payroll_service.compute_deductions(_staff(data), data.get("start"), data.get("end"))

    @app.route("/api/payroll/overtime", methods=["POST"], endpoint="payroll_overtime")
    @json_endpoint
    def payroll_overtime():
        data = request_json()
        amount = container.payroll_service.compute_overtime(
            _staff(data), _whole(data, "present_days"), _whole(data, "working_days")
        )
        return {"overtime": amount}

    @app.route("/api/payroll/salary", methods=["POST"], endpoint="payroll_salary")
    @json_endpoint
    def payroll_salary():
        data = request_json()
        inputs = SalaryInputs(
            base_salary=require_non_negative(data.get("base_salary", 0), "base_salary"),
            allowances=require_non_negative(data.get("allowances", 0), "allowances"),
            overtime=require_non_negative(data.get("overtime", 0), "overtime"),
            bonus=require_non_negative(data.get("bonus", 0), "bonus"),
        )
        deductions = require_non_negative(data.get("attendance_deductions", 0), "attendance_deductions")
        return container.payroll_service.compute_salary(inputs, deductions)

    @app.route("/api/payroll/draft", methods=["POST"], endpoint="payroll_draft")
    @json_endpoint
    def payroll_draft():
        data = request_json()
        return container.payroll_service.build_monthly_draft(_staff(data), data.get("month"), _whole(data, "year"))
