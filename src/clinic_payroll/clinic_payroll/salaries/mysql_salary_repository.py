from __future__ import annotations

from typing import Any, Optional, Sequence

import mysql.connector

from ..core.constants import MONTH_NAMES
from ..core.enums import SalaryStatus
from ..core.exceptions import DuplicateRecordError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SalaryRecord, SalaryRecordData
from .repository import SalaryRepository

_MONTH_ORDER = "FIELD(month, " + ", ".join(f"'{m}'" for m in MONTH_NAMES) + ")"

_COLUMNS = """
    salary_id, staff_id, staff_name, month, year,
    base_salary, allowances, overtime, bonus, deductions,
    present_days, absent_days, leave_days, late_days, half_days, working_days,
    gross_salary, net_salary, status, payment_date, department, notes
"""


def _row_to_record(r: dict[str, Any]) -> SalaryRecord:
    data = SalaryRecordData(
        staff_id=str(r["staff_id"]),
        staff_name=r.get("staff_name") or "",
        month=r["month"],
        year=int(r["year"]),
        base_salary=float(r["base_salary"]),
        allowances=float(r.get("allowances") or 0),
        overtime=float(r.get("overtime") or 0),
        bonus=float(r.get("bonus") or 0),
        deductions=float(r.get("deductions") or 0),
        present_days=int(r.get("present_days") or 0),
        absent_days=int(r.get("absent_days") or 0),
        leave_days=int(r.get("leave_days") or 0),
        late_days=int(r.get("late_days") or 0),
        half_days=int(r.get("half_days") or 0),
        working_days=int(r.get("working_days") or 0),
        status=SalaryStatus(r["status"]),
        payment_date=r.get("payment_date"),
        department=r.get("department"),
        notes=r.get("notes"),
    )
    return SalaryRecord(
        id=str(r["salary_id"]),
        data=data,
        gross_salary=float(r["gross_salary"]),
        net_salary=float(r["net_salary"]),
    )


def _record_params(record: SalaryRecord) -> tuple:
    d = record.data
    return (
        d.staff_id, d.staff_name, d.month, d.year,
        d.base_salary, d.allowances, d.overtime, d.bonus, d.deductions,
        d.present_days, d.absent_days, d.leave_days, d.late_days, d.half_days, d.working_days,
        record.gross_salary, record.net_salary, d.status.value, d.payment_date, d.department, d.notes,
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, where: str = "", params: tuple = ()) -> Sequence[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM salary_records
                {where}
                ORDER BY year DESC, {_MONTH_ORDER} ASC, staff_name ASC
                """,
                params,
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[SalaryRecord]:
        return self._select()

    def get_by_id(self, record_id: str) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_records WHERE salary_id=%s", (str(record_id),))
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def find_by_period(self, *, staff_id: str, month: str, year: int) -> Sequence[SalaryRecord]:
        return self._select("WHERE staff_id=%s AND month=%s AND year=%s", (str(staff_id), month, int(year)))

    def list_by_staff(self, staff_id: str) -> Sequence[SalaryRecord]:
        return self._select("WHERE staff_id=%s", (str(staff_id),))

    def list_by_period(self, *, month: str, year: int) -> Sequence[SalaryRecord]:
        return self._select("WHERE month=%s AND year=%s", (month, int(year)))

    def list_by_status(self, status: SalaryStatus) -> Sequence[SalaryRecord]:
        return self._select("WHERE status=%s", (status.value,))

    def insert(self, record: SalaryRecord) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO salary_records({_COLUMNS})
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (record.id,) + _record_params(record),
                )
        except mysql.connector.IntegrityError as e:
            # uq_salary_period backs up the service-level check.
            raise DuplicateRecordError("A salary record already exists for this staff member and month") from e

    def update(self, record: SalaryRecord) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE salary_records
                    SET staff_id=%s, staff_name=%s, month=%s, year=%s,
                        base_salary=%s, allowances=%s, overtime=%s, bonus=%s, deductions=%s,
                        present_days=%s, absent_days=%s, leave_days=%s, late_days=%s, half_days=%s, working_days=%s,
                        gross_salary=%s, net_salary=%s, status=%s, payment_date=%s, department=%s, notes=%s
                    WHERE salary_id=%s
                    """,
                    _record_params(record) + (record.id,),
                )
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as e:
            raise DuplicateRecordError("A salary record already exists for this staff member and month") from e

    def delete(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_records WHERE salary_id=%s", (str(record_id),))
            return cur.rowcount > 0
