from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Salary, SalaryLine


class SalaryRepository(Protocol):
    def get_by_id(self, salary_id: int) -> Optional[Salary]:
        raise NotImplementedError

    def get_line(self, salary_id: int) -> Optional[SalaryLine]:
        raise NotImplementedError

    def list_lines(self) -> Sequence[SalaryLine]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Salary]:
        raise NotImplementedError

    def find_overlapping(
        self,
        *,
        employee_id: int,
        period_start: date,
        period_end: date,
        exclude_salary_id: Optional[int] = None,
    ) -> Optional[Salary]:
        """First salary of the employee matching ``period_overlaps`` (locking read)."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        period_start: date,
        period_end: date,
        bonus: Decimal,
        deduction: Decimal,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        salary_id: int,
        period_start: date,
        period_end: date,
        bonus: Decimal,
        deduction: Decimal,
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, salary_id: int) -> bool:
        raise NotImplementedError
