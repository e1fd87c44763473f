from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, list_tables

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .payroll.controller import register as register_payroll
from .salaries.controller import register as register_salaries
from .schedules.controller import register as register_schedules
from .settings.controller import register as register_settings


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")

        if app.config["DEBUG"]:
            print(
                "[clinic-payroll] settings=", settings_module,
                " db=", f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            if app.config["DEBUG"]:
                print(f"[clinic-payroll] schema ready (tables={len(list_tables(db_config))})")

        container = build_container(db_config=db_config, settings=settings)

    app.extensions["clinic_payroll"] = container

    register_schedules(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_salaries(app, container)
    register_settings(app, container)

    return app
