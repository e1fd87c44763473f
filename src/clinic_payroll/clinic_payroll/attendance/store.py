from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Optional

from ..common.datetime_utils import format_hhmm, now_local, parse_hhmm, parse_iso_date
from ..common.validators import require_non_empty
from ..core.constants import ATTENDANCE_DOCUMENT, IMPLICIT_CHECK_IN_TIME
from ..core.enums import AttendanceStatus
from ..core.exceptions import StorageError, ValidationError
from ..documents.repository import DocumentStore
from ..schedules.calendar import ScheduleCalendar
from .model import AttendanceRecord, RecordKey, record_key

logger = logging.getLogger(__name__)

RecordTable = dict[RecordKey, AttendanceRecord]


def coerce_date(value: date | str | None, field_name: str = "date") -> date:
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value))


class AttendanceStore:
    """One attendance record per (staff, date), persisted as a single document.

    Every mutation reads the latest persisted table, applies the change and
    writes the whole table back in one uninterrupted step (see ``_mutate``).
    When a write fails the in-memory table stays authoritative and
    ``sync_error`` is set until a later write succeeds.
    """

    def __init__(
        self,
        documents: DocumentStore,
        calendar: ScheduleCalendar,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._documents = documents
        self._calendar = calendar
        self._clock = clock or now_local
        self._records: RecordTable = {}
        self._loaded = False
        self.sync_error = False

    def load(self) -> None:
        self._records = self._read_persisted()
        self._loaded = True

    def mark(
        self,
        staff_id: str,
        work_date: date | str,
        status: AttendanceStatus | str,
        time: str,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        staff_id = require_non_empty(staff_id, "staffId")
        work_date = coerce_date(work_date)
        if not status:
            raise ValidationError("status is required")
        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {status!r}") from None
        time = format_hhmm(parse_hhmm(require_non_empty(time, "time")))
        if notes is not None and not isinstance(notes, str):
            raise ValidationError("notes must be text")

        if self._calendar.is_holiday(work_date):
            raise ValidationError(f"{work_date.isoformat()} is a holiday; attendance is not recorded")

        record = AttendanceRecord(
            staff_id=staff_id,
            work_date=work_date,
            status=status,
            time=time,
            notes=notes.strip() if notes and notes.strip() else None,
        )

        def apply(records: RecordTable) -> AttendanceRecord:
            # Re-marking replaces the record, including any checkout.
            records[record.key] = record
            return record

        return self._mutate(apply)

    def checkout(
        self,
        staff_id: str,
        work_date: date | str | None = None,
        *,
        now: datetime | None = None,
    ) -> Optional[AttendanceRecord]:
        staff_id = require_non_empty(staff_id, "staffId")
        now = now or self._clock()
        work_date = coerce_date(work_date) if work_date else now.date()

        if self._calendar.is_holiday(work_date):
            logger.info("Ignoring checkout for %s on holiday %s", staff_id, work_date.isoformat())
            return None

        def apply(records: RecordTable) -> AttendanceRecord:
            existing = records.get((staff_id, work_date)) or AttendanceRecord(
                staff_id=staff_id,
                work_date=work_date,
                status=AttendanceStatus.PRESENT,
                time=IMPLICIT_CHECK_IN_TIME,
            )
            updated = replace(existing, is_checked_out=True, checkout_time=format_hhmm(now))
            records[updated.key] = updated
            return updated

        return self._mutate(apply)

    def get(self, staff_id: str, work_date: date | str) -> Optional[AttendanceRecord]:
        """Record for the key, or None when the day has not been marked yet."""
        self._ensure_loaded()
        return self._records.get((staff_id, coerce_date(work_date)))

    def list_for_staff(self, staff_id: str) -> list[AttendanceRecord]:
        self._ensure_loaded()
        return sorted((r for r in self._records.values() if r.staff_id == staff_id), key=lambda r: r.work_date)

    def list_for_date(self, work_date: date | str) -> list[AttendanceRecord]:
        self._ensure_loaded()
        work_date = coerce_date(work_date)
        return sorted((r for r in self._records.values() if r.work_date == work_date), key=lambda r: r.staff_id)

    def list_for_range(
        self,
        start: date | str,
        end: date | str,
        *,
        staff_id: Optional[str] = None,
    ) -> list[AttendanceRecord]:
        self._ensure_loaded()
        start = coerce_date(start, "start")
        end = coerce_date(end, "end")
        if start > end:
            raise ValidationError("Start date must not be after end date")

        rows = [
            r
            for r in self._records.values()
            if start <= r.work_date <= end and (staff_id is None or r.staff_id == staff_id)
        ]
        rows.sort(key=lambda r: (r.work_date, r.staff_id))
        return rows

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def _read_persisted(self) -> RecordTable:
        doc = self._documents.load(ATTENDANCE_DOCUMENT) or {}
        records: RecordTable = {}
        for key, value in doc.items():
            record = AttendanceRecord.from_document(key, value)
            records[record.key] = record
        return records

    def _read_latest(self) -> RecordTable:
        if self.sync_error:
            # Unsynced local changes are newer than the persisted copy.
            return dict(self._records)
        try:
            return self._read_persisted()
        except StorageError:
            logger.exception("Could not read attendance records; using in-memory copy")
            return dict(self._records)

    def _mutate(self, apply: Callable[[RecordTable], AttendanceRecord]) -> AttendanceRecord:
        # Read, apply and write without yielding in between.
        records = self._read_latest()
        result = apply(records)
        self._records = records
        self._loaded = True
        self._write(records)
        return result

    def _write(self, records: RecordTable) -> None:
        doc = {record_key(*key): r.to_document() for key, r in sorted(records.items())}
        try:
            self._documents.save(ATTENDANCE_DOCUMENT, doc)
            self.sync_error = False
        except StorageError:
            logger.exception("Could not persist attendance records; keeping in-memory state")
            self.sync_error = True
