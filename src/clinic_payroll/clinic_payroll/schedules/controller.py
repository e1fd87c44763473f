from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.http import json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar/holiday", methods=["GET"], endpoint="calendar_holiday")
    @json_endpoint
    def calendar_holiday():
        value = request.args.get("date")
        if not value:
            return {"date": None, "is_holiday": container.calendar.is_today_holiday()}

        day = parse_iso_date(value)
        return {"date": format_iso_date(day), "is_holiday": container.calendar.is_holiday(day)}

    @app.route("/api/calendar/working-days", methods=["GET"], endpoint="calendar_working_days")
    @json_endpoint
    def calendar_working_days():
        start = parse_iso_date(request.args.get("start", ""))
        end = parse_iso_date(request.args.get("end", ""))
        return {
            "start": format_iso_date(start),
            "end": format_iso_date(end),
            "working_days": container.calendar.working_days_between(start, end),
        }
