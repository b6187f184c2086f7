from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_money
from ..core.enums import ValidationReason
from ..core.exceptions import NotFoundError, ValidationError
from ..database.unit_of_work import UnitOfWorkFactory
from .export import salaries_to_xlsx
from .model import SalaryLine
from .statement import SalaryStatement, build_statement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SalaryInput:
    period_start: date
    period_end: date
    bonus: Decimal = Decimal("0.00")
    deduction: Decimal = Decimal("0.00")


def _reject(reason: ValidationReason, message: str, *, field: Optional[str] = None) -> ValidationError:
    logger.warning("Salary rejected (%s): %s", reason.value, message)
    return ValidationError(reason, message, field=field)


class SalaryService:
    """Use case: assign pay periods to employees.

    Rules on create: employee exists and is not terminated, start <= end,
    no date in the future, no overlap with the employee's other periods.
    Update re-checks only start <= end and overlap.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        *,
        clock: Callable[[], datetime] = now_local,
        currency_symbol: str = "$",
    ):
        self._uow = uow_factory
        self._clock = clock
        self._currency_symbol = currency_symbol

    @staticmethod
    def _amounts(data: SalaryInput) -> tuple[Decimal, Decimal]:
        return require_money(data.bonus, "bonus"), require_money(data.deduction, "deduction")

    @staticmethod
    def _check_order(data: SalaryInput) -> None:
        if data.period_start > data.period_end:
            raise _reject(
                ValidationReason.START_AFTER_END,
                "Period start date cannot be after period end date",
                field="period_start",
            )

    def list_lines(self) -> Sequence[SalaryLine]:
        with self._uow() as uow:
            return list(uow.salaries.list_lines())

    def get_line(self, salary_id: int) -> SalaryLine:
        with self._uow() as uow:
            line = uow.salaries.get_line(int(salary_id))
        if not line:
            raise NotFoundError("Salary", salary_id)
        return line

    def create(self, employee_id: int, data: SalaryInput) -> int:
        bonus, deduction = self._amounts(data)

        with self._uow() as uow:
            # Row lock on the employee serializes concurrent salary writes for it.
            employee = uow.employees.get_for_update(int(employee_id))
            if not employee:
                raise NotFoundError("Employee", employee_id)

            if employee.is_terminated:
                raise _reject(
                    ValidationReason.TERMINATED_EMPLOYEE,
                    "Cannot create salary records for terminated employees",
                )

            self._check_order(data)

            today = self._clock().date()
            if data.period_start > today or data.period_end > today:
                raise _reject(
                    ValidationReason.FUTURE_PERIOD,
                    "Cannot create salary records for future dates",
                    field="period_start",
                )

            existing = uow.salaries.find_overlapping(
                employee_id=employee.employee_id,
                period_start=data.period_start,
                period_end=data.period_end,
            )
            if existing:
                raise _reject(
                    ValidationReason.OVERLAP,
                    f"A salary record already exists for this period (salary {existing.salary_id})",
                )

            salary_id = uow.salaries.create(
                employee_id=employee.employee_id,
                period_start=data.period_start,
                period_end=data.period_end,
                bonus=bonus,
                deduction=deduction,
            )

        logger.info("Salary %s created for employee %s", salary_id, employee_id)
        return salary_id

    def update(self, salary_id: int, data: SalaryInput) -> None:
        bonus, deduction = self._amounts(data)

        with self._uow() as uow:
            salary = uow.salaries.get_by_id(int(salary_id))
            if not salary:
                raise NotFoundError("Salary", salary_id)
            uow.employees.get_for_update(salary.employee_id)

            self._check_order(data)

            existing = uow.salaries.find_overlapping(
                employee_id=salary.employee_id,
                period_start=data.period_start,
                period_end=data.period_end,
                exclude_salary_id=salary.salary_id,
            )
            if existing:
                raise _reject(
                    ValidationReason.OVERLAP,
                    f"A salary record already exists for this period (salary {existing.salary_id})",
                )

            uow.salaries.update(
                salary_id=salary.salary_id,
                period_start=data.period_start,
                period_end=data.period_end,
                bonus=bonus,
                deduction=deduction,
            )

        logger.info("Salary %s updated", salary_id)

    def delete(self, salary_id: int) -> None:
        with self._uow() as uow:
            if not uow.salaries.delete_by_id(int(salary_id)):
                raise NotFoundError("Salary", salary_id)

        logger.info("Salary %s deleted", salary_id)

    def statement(self, salary_id: int) -> SalaryStatement:
        return build_statement(self.get_line(salary_id), currency_symbol=self._currency_symbol)

    def export_xlsx(self) -> bytes:
        return salaries_to_xlsx(self.list_lines())
