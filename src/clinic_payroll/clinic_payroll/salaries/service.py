from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import month_index, now_local
from ..core.constants import MONTH_NAMES
from ..core.enums import SalaryStatus
from ..core.exceptions import DuplicateRecordError, ValidationError
from ..payroll.model import SalaryInputs
from ..payroll.service import PayrollService
from .model import SalaryRecord, SalaryRecordData, camel_payload
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


class SalaryRecordManager:
    """CRUD over monthly salary records, unique per (staff, month, year).

    Totals are always recomputed through the payroll service from the
    submitted inputs; callers never supply gross/net themselves.
    """

    def __init__(
        self,
        salaries: SalaryRepository,
        payroll: PayrollService,
        *,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._salaries = salaries
        self._payroll = payroll
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)
        self._clock = clock or now_local

    def create(self, data: SalaryRecordData | Mapping[str, Any]) -> SalaryRecord:
        data = self._as_data(data)
        self._ensure_unique(data, exclude_id=None)

        record = self._build(self._new_id(), data)
        self._salaries.insert(record)
        logger.info("Created salary record %s for %s %s %s", record.id, data.staff_id, data.month, data.year)
        return record

    def update(self, record_id: str, data: SalaryRecordData | Mapping[str, Any]) -> SalaryRecord:
        existing = self._require(record_id)
        if not isinstance(data, SalaryRecordData):
            # Partial updates merge over the stored inputs.
            merged = existing.data.to_payload()
            merged.update(camel_payload(data))
            data = merged
        data = self._as_data(data)
        self._ensure_unique(data, exclude_id=existing.id)

        record = self._build(existing.id, data)
        self._salaries.update(record)
        return record

    def delete(self, record_id: str) -> None:
        if not self._salaries.delete(str(record_id)):
            logger.info("Salary record %s was already absent", record_id)

    def mark_paid(self, record_id: str, payment_date: date | None = None) -> SalaryRecord:
        existing = self._require(record_id)
        data = replace(existing.data, status=SalaryStatus.PAID, payment_date=payment_date or self._clock().date())
        record = replace(existing, data=data)
        self._salaries.update(record)
        return record

    def get(self, record_id: str) -> Optional[SalaryRecord]:
        return self._salaries.get_by_id(str(record_id))

    def list_all(self) -> Sequence[SalaryRecord]:
        return self._salaries.list_all()

    def list_by_staff(self, staff_id: str) -> Sequence[SalaryRecord]:
        return self._salaries.list_by_staff(staff_id)

    def list_by_period(self, month: str, year: int) -> Sequence[SalaryRecord]:
        return self._salaries.list_by_period(month=MONTH_NAMES[month_index(month) - 1], year=int(year))

    def list_by_status(self, status: SalaryStatus | str) -> Sequence[SalaryRecord]:
        try:
            status = SalaryStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown salary status: {status!r}") from None
        return self._salaries.list_by_status(status)

    def total_paid(self) -> float:
        return sum(r.total_salary for r in self._salaries.list_by_status(SalaryStatus.PAID))

    def _as_data(self, data: SalaryRecordData | Mapping[str, Any]) -> SalaryRecordData:
        if isinstance(data, SalaryRecordData):
            return data
        return SalaryRecordData.from_payload(data)

    def _require(self, record_id: str) -> SalaryRecord:
        record = self._salaries.get_by_id(str(record_id))
        if not record:
            raise ValidationError(f"Salary record {record_id} not found")
        return record

    def _ensure_unique(self, data: SalaryRecordData, *, exclude_id: Optional[str]) -> None:
        clashes = [
            r
            for r in self._salaries.find_by_period(staff_id=data.staff_id, month=data.month, year=data.year)
            if r.id != exclude_id
        ]
        if clashes:
            raise DuplicateRecordError(
                f"A salary record for {data.staff_name or data.staff_id} in {data.month} {data.year} already exists"
            )

    def _build(self, record_id: str, data: SalaryRecordData) -> SalaryRecord:
        totals = self._payroll.compute_salary(
            SalaryInputs(
                base_salary=data.base_salary,
                allowances=data.allowances,
                overtime=data.overtime,
                bonus=data.bonus,
            ),
            data.deductions,
        )
        return SalaryRecord(id=record_id, data=data, gross_salary=totals.gross_salary, net_salary=totals.net_salary)
