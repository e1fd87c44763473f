from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import SalaryStatus
from .model import SalaryRecord


class SalaryRepository(Protocol):
    def list_all(self) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def find_by_period(self, *, staff_id: str, month: str, year: int) -> Sequence[SalaryRecord]:
        """Records sharing the (staff, month, year) key; at most one when consistent."""

        raise NotImplementedError

    def list_by_staff(self, staff_id: str) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def list_by_period(self, *, month: str, year: int) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def list_by_status(self, status: SalaryStatus) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def insert(self, record: SalaryRecord) -> None:
        raise NotImplementedError

    def update(self, record: SalaryRecord) -> bool:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError
