from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..common.money import quantize_money


@dataclass(frozen=True)
class Salary:
    """Domain entity: one pay period of an employee.

    The total is never stored; see ``total_pay``.
    """

    salary_id: int
    employee_id: int
    period_start: date
    period_end: date
    bonus: Decimal
    deduction: Decimal


@dataclass(frozen=True)
class SalaryLine:
    """Read-model: salary joined with employee name and position pay."""

    salary: Salary
    employee_first_name: str
    employee_last_name: str
    position_title: str
    base_salary: Decimal

    @property
    def employee_name(self) -> str:
        return f"{self.employee_first_name} {self.employee_last_name}"

    @property
    def total(self) -> Decimal:
        return total_pay(self.base_salary, self.salary.bonus, self.salary.deduction)


def total_pay(base_salary: Decimal, bonus: Decimal, deduction: Decimal) -> Decimal:
    """base + bonus - deduction at 2-decimal precision."""
    return quantize_money(Decimal(base_salary) + Decimal(bonus) - Decimal(deduction))


def period_overlaps(existing_start: date, existing_end: date, start: date, end: date) -> bool:
    """True when either boundary of [start, end] falls inside the existing closed period.

    A new period strictly containing the existing one is not reported; stored
    data and the SQL in MySQLSalaryRepository.find_overlapping follow this rule.
    """
    return (existing_start <= start <= existing_end) or (existing_start <= end <= existing_end)
