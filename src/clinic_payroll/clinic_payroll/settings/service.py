from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..core.constants import SALARY_SETTINGS_DOCUMENT, WORKING_SCHEDULE_DOCUMENT
from ..core.exceptions import StorageError
from ..documents.repository import DocumentStore
from ..schedules.model import WorkingSchedule
from .model import SalaryPolicy

logger = logging.getLogger(__name__)


class SettingsService:
    """Owns the working schedule and salary policy singletons.

    Both are loaded once by ``load()`` and replaced only through the explicit
    ``save_*`` calls; components read them through the properties.
    """

    def __init__(
        self,
        documents: DocumentStore,
        *,
        default_schedule: Mapping[str, Any],
        default_salary_settings: Mapping[str, Any],
    ):
        self._documents = documents
        self._default_schedule = dict(default_schedule)
        self._default_salary_settings = dict(default_salary_settings)
        self._schedule: Optional[WorkingSchedule] = None
        self._policy: Optional[SalaryPolicy] = None
        self.sync_error = False

    @property
    def schedule(self) -> WorkingSchedule:
        if self._schedule is None:
            self.load()
        return self._schedule

    @property
    def salary_policy(self) -> SalaryPolicy:
        if self._policy is None:
            self.load()
        return self._policy

    def load(self) -> None:
        schedule_doc = self._documents.load(WORKING_SCHEDULE_DOCUMENT) or self._default_schedule
        policy_doc = self._documents.load(SALARY_SETTINGS_DOCUMENT) or self._default_salary_settings
        self._schedule = WorkingSchedule.from_document(schedule_doc)
        self._policy = SalaryPolicy.from_document(policy_doc)

    def save_schedule(self, schedule: WorkingSchedule | Mapping[str, Any]) -> WorkingSchedule:
        if not isinstance(schedule, WorkingSchedule):
            schedule = WorkingSchedule.from_document(schedule)
        self._persist(WORKING_SCHEDULE_DOCUMENT, schedule.to_document())
        self._schedule = schedule
        logger.info("Working schedule saved")
        return schedule

    def save_salary_policy(self, policy: SalaryPolicy | Mapping[str, Any]) -> SalaryPolicy:
        if not isinstance(policy, SalaryPolicy):
            policy = SalaryPolicy.from_document(policy)
        self._persist(SALARY_SETTINGS_DOCUMENT, policy.to_document())
        self._policy = policy
        logger.info("Salary settings saved")
        return policy

    def _persist(self, key: str, doc: dict) -> None:
        try:
            self._documents.save(key, doc)
            self.sync_error = False
        except StorageError:
            # In-memory settings stay authoritative for this session.
            logger.exception("Could not persist %s", key)
            self.sync_error = True
