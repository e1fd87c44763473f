from __future__ import annotations

from flask import Flask, request

from ..common.http import json_endpoint, request_json
from ..container import Container
from .model import AttendanceRecord


def _record_json(record: AttendanceRecord | None) -> dict | None:
    if record is None:
        return None
    out = {"staffId": record.staff_id}
    out.update(record.to_document())
    return out


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/classify", methods=["GET"], endpoint="attendance_classify")
    @json_endpoint
    def attendance_classify():
        return container.classifier.classify_now(container.settings_service.schedule)

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @json_endpoint
    def attendance_mark():
        data = request_json()
        record = container.attendance_store.mark(
            data.get("staffId") or data.get("staff_id"),
            data.get("date"),
            data.get("status"),
            data.get("time"),
            data.get("notes"),
        )
        return {"record": _record_json(record), "synced": not container.attendance_store.sync_error}

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="attendance_checkout")
    @json_endpoint
    def attendance_checkout():
        data = request_json()
        record = container.attendance_store.checkout(data.get("staffId") or data.get("staff_id"), data.get("date"))
        return {
            "record": _record_json(record),
            "holiday": record is None,
            "synced": not container.attendance_store.sync_error,
        }

    @app.route("/api/attendance/<staff_id>/<work_date>", methods=["GET"], endpoint="attendance_get")
    @json_endpoint
    def attendance_get(staff_id: str, work_date: str):
        return _record_json(container.attendance_store.get(staff_id, work_date))

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @json_endpoint
    def attendance_list():
        store = container.attendance_store
        staff_id = request.args.get("staff_id") or None
        start = request.args.get("start")
        end = request.args.get("end")

        if start or end:
            rows = store.list_for_range(start, end, staff_id=staff_id)
        elif request.args.get("date"):
            rows = store.list_for_date(request.args["date"])
            if staff_id:
                rows = [r for r in rows if r.staff_id == staff_id]
        elif staff_id:
            rows = store.list_for_staff(staff_id)
        else:
            rows = []
        return [_record_json(r) for r in rows]
