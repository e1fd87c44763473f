from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Mapping, Optional

from .attendance.classifier import StatusClassifier
from .attendance.factory import AttendanceStrategyFactory
from .attendance.store import AttendanceStore
from .common.datetime_utils import now_local
from .database.connection import DBConfig, DatabaseConnection
from .documents.mysql_document_store import MySQLDocumentStore
from .documents.repository import DocumentStore
from .payroll.service import PayrollService
from .salaries.mysql_salary_repository import MySQLSalaryRepository
from .salaries.repository import SalaryRepository
from .salaries.service import SalaryRecordManager
from .schedules.calendar import ScheduleCalendar
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    documents: DocumentStore
    salaries_repo: SalaryRepository

    settings_service: SettingsService
    calendar: ScheduleCalendar
    classifier: StatusClassifier
    attendance_store: AttendanceStore
    payroll_service: PayrollService
    salary_manager: SalaryRecordManager


def build_services(
    *,
    documents: DocumentStore,
    salaries_repo: SalaryRepository,
    default_schedule: Mapping[str, Any],
    default_salary_settings: Mapping[str, Any],
    timezone: Optional[str] = None,
) -> Container:
    """Wire services over the given backends and load persisted state once."""
    clock = partial(now_local, timezone)

    settings_service = SettingsService(
        documents,
        default_schedule=default_schedule,
        default_salary_settings=default_salary_settings,
    )
    settings_service.load()

    calendar = ScheduleCalendar(settings_service, clock=clock)
    classifier = StatusClassifier(calendar, strategy_factory=AttendanceStrategyFactory(), clock=clock)
    attendance_store = AttendanceStore(documents, calendar, clock=clock)
    attendance_store.load()
    payroll_service = PayrollService(attendance_store, calendar, settings_service)
    salary_manager = SalaryRecordManager(salaries_repo, payroll_service, clock=clock)

    return Container(
        documents=documents,
        salaries_repo=salaries_repo,
        settings_service=settings_service,
        calendar=calendar,
        classifier=classifier,
        attendance_store=attendance_store,
        payroll_service=payroll_service,
        salary_manager=salary_manager,
    )


def build_container(*, db_config: dict, settings: Any) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        documents=MySQLDocumentStore(conn),
        salaries_repo=MySQLSalaryRepository(conn),
        default_schedule=getattr(settings, "DEFAULT_WORKING_SCHEDULE"),
        default_salary_settings=getattr(settings, "DEFAULT_SALARY_SETTINGS"),
        timezone=getattr(settings, "TIMEZONE", None),
    )
