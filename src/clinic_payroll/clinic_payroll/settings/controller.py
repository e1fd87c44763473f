from __future__ import annotations

from flask import Flask

from ..common.http import json_endpoint, request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    settings = container.settings_service

    @app.route("/api/settings/schedule", methods=["GET"], endpoint="settings_schedule")
    @json_endpoint
    def settings_schedule():
        return settings.schedule.to_document()

    @app.route("/api/settings/schedule", methods=["PUT"], endpoint="settings_schedule_save")
    @json_endpoint
    def settings_schedule_save():
        saved = settings.save_schedule(request_json())
        return {"schedule": saved.to_document(), "synced": not settings.sync_error}

    @app.route("/api/settings/salary", methods=["GET"], endpoint="settings_salary")
    @json_endpoint
    def settings_salary():
        return settings.salary_policy.to_document()

    @app.route("/api/settings/salary", methods=["PUT"], endpoint="settings_salary_save")
    @json_endpoint
    def settings_salary_save():
        saved = settings.save_salary_policy(request_json())
        return {"salarySettings": saved.to_document(), "synced": not settings.sync_error}
