from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_endpoint, request_json
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    manager = container.salary_manager

    @app.route("/api/salaries", methods=["GET"], endpoint="salaries_list")
    @json_endpoint
    def salaries_list():
        args = request.args
        if args.get("staff_id"):
            rows = manager.list_by_staff(args["staff_id"])
        elif args.get("month") and args.get("year"):
            if not args["year"].isdigit():
                raise ValidationError("year must be a whole number")
            rows = manager.list_by_period(args["month"], int(args["year"]))
        elif args.get("status"):
            rows = manager.list_by_status(args["status"])
        else:
            rows = manager.list_all()
        return {"records": [r.to_dict() for r in rows], "total_paid": manager.total_paid()}

    @app.route("/api/salaries", methods=["POST"], endpoint="salaries_create")
    @json_endpoint
    def salaries_create():
        return manager.create(request_json()).to_dict(), 201

    @app.route("/api/salaries/<record_id>", methods=["GET"], endpoint="salaries_get")
    @json_endpoint
    def salaries_get(record_id: str):
        record = manager.get(record_id)
        if not record:
            raise ValidationError(f"Salary record {record_id} not found")
        return record.to_dict()

    @app.route("/api/salaries/<record_id>", methods=["PUT"], endpoint="salaries_update")
    @json_endpoint
    def salaries_update(record_id: str):
        return manager.update(record_id, request_json()).to_dict()

    @app.route("/api/salaries/<record_id>", methods=["DELETE"], endpoint="salaries_delete")
    @json_endpoint
    def salaries_delete(record_id: str):
        manager.delete(record_id)
        return {"id": record_id}

    @app.route("/api/salaries/<record_id>/pay", methods=["POST"], endpoint="salaries_pay")
    @json_endpoint
    def salaries_pay(record_id: str):
        data = request.get_json(silent=True) or {}
        payment_date = parse_iso_date(data["paymentDate"]) if data.get("paymentDate") else None
        return manager.mark_paid(record_id, payment_date).to_dict()
