from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Callable, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_id, required_text
from ..core.constants import (
    FIRST_NAME_MAX,
    LAST_NAME_MAX,
    MIDDLE_NAME_MAX,
    NEIGHBORHOOD_MAX,
    POSTAL_CODE_MAX,
    STREET_NAME_MAX,
    STREET_NUMBER_MAX,
)
from ..core.exceptions import InvalidStateError, NotFoundError
from ..database.unit_of_work import UnitOfWorkFactory
from ..salaries.model import total_pay
from .model import (
    Active,
    AddressInput,
    EmployeeDetails,
    EmployeeDraft,
    EmployeeListItem,
    EmployeeUpdate,
    RelatedIds,
    SalarySummary,
    Terminated,
    state_from_columns,
)

logger = logging.getLogger(__name__)


def _clean_address(address: AddressInput) -> AddressInput:
    return AddressInput(
        street_name=required_text(address.street_name, "street_name", STREET_NAME_MAX),
        street_number=required_text(address.street_number, "street_number", STREET_NUMBER_MAX),
        neighborhood=optional_text(address.neighborhood, "neighborhood", NEIGHBORHOOD_MAX),
        postal_code=optional_text(address.postal_code, "postal_code", POSTAL_CODE_MAX),
        address_type=address.address_type,
    )


class EmployeeService:
    """Use case: hire, update, terminate and rehire employees.

    Every operation runs in a single unit of work, so a failure half way
    (e.g. after the address insert) leaves nothing behind.
    """

    def __init__(self, uow_factory: UnitOfWorkFactory, *, clock: Callable[[], datetime] = now_local):
        self._uow = uow_factory
        self._clock = clock

    def list_active(self) -> Sequence[EmployeeListItem]:
        with self._uow() as uow:
            return list(uow.employees.list_active())

    def get_details(self, employee_id: int) -> EmployeeDetails:
        with self._uow() as uow:
            details = uow.employees.get_details(int(employee_id))
            if not details:
                raise NotFoundError("Employee", employee_id)

            salaries = [
                SalarySummary(
                    salary_id=s.salary_id,
                    period_start=s.period_start,
                    period_end=s.period_end,
                    bonus=s.bonus,
                    deduction=s.deduction,
                    total=total_pay(details.base_salary, s.bonus, s.deduction),
                )
                for s in uow.salaries.list_for_employee(int(employee_id))
            ]
            return dataclasses.replace(details, salaries=salaries)

    def create(self, draft: EmployeeDraft, related: RelatedIds) -> int:
        first_name = required_text(draft.first_name, "first_name", FIRST_NAME_MAX)
        middle_name = optional_text(draft.middle_name, "middle_name", MIDDLE_NAME_MAX)
        last_name = required_text(draft.last_name, "last_name", LAST_NAME_MAX)
        address = _clean_address(draft.address)

        with self._uow() as uow:
            if not uow.reference.get_company(related.company_id):
                raise NotFoundError("Company", related.company_id)
            if not uow.reference.get_position(related.position_id):
                raise NotFoundError("Position", related.position_id)
            if not uow.reference.get_office(related.office_id):
                raise NotFoundError("Office", related.office_id)
            if not uow.reference.get_city(related.city_id):
                raise NotFoundError("City", related.city_id)

            address_id = uow.addresses.create(
                street_name=address.street_name,
                street_number=address.street_number,
                neighborhood=address.neighborhood,
                postal_code=address.postal_code,
                city_id=related.city_id,
                address_type=address.address_type,
            )
            employee_id = uow.employees.create(
                first_name=first_name,
                middle_name=middle_name,
                last_name=last_name,
                address_id=address_id,
                position_id=related.position_id,
                office_id=related.office_id,
                company_id=related.company_id,
                hire_date=draft.hire_date,
                state=Active(),
            )

        logger.info("Employee %s created (address %s)", employee_id, address_id)
        return employee_id

    def update(self, employee_id: int, fields: EmployeeUpdate) -> None:
        first_name = required_text(fields.first_name, "first_name", FIRST_NAME_MAX)
        middle_name = optional_text(fields.middle_name, "middle_name", MIDDLE_NAME_MAX)
        last_name = required_text(fields.last_name, "last_name", LAST_NAME_MAX)
        address = _clean_address(fields.address)
        company_id = require_id(fields.company_id, "company_id")
        position_id = require_id(fields.position_id, "position_id")
        office_id = require_id(fields.office_id, "office_id")
        city_id = require_id(fields.city_id, "city_id")
        state = state_from_columns(fields.is_terminated, fields.termination_date, fallback=self._clock())

        with self._uow() as uow:
            employee = uow.employees.get_for_update(int(employee_id))
            if not employee:
                raise NotFoundError("Employee", employee_id)

            uow.employees.update(
                employee_id=employee.employee_id,
                first_name=first_name,
                middle_name=middle_name,
                last_name=last_name,
                position_id=position_id,
                office_id=office_id,
                company_id=company_id,
                hire_date=fields.hire_date,
                state=state,
            )
            uow.addresses.update(
                address_id=employee.address_id,
                street_name=address.street_name,
                street_number=address.street_number,
                neighborhood=address.neighborhood,
                postal_code=address.postal_code,
                city_id=city_id,
                address_type=address.address_type,
            )

        logger.info("Employee %s updated", employee_id)

    def terminate(self, employee_id: int) -> None:
        """Soft-terminate. Terminating again just re-stamps the termination time."""
        with self._uow() as uow:
            employee = uow.employees.get_for_update(int(employee_id))
            if not employee:
                raise NotFoundError("Employee", employee_id)
            uow.employees.set_state(employee_id=employee.employee_id, state=Terminated(since=self._clock()))

        logger.info("Employee %s terminated", employee_id)

    def rehire(self, employee_id: int) -> None:
        """Back to active; the hire date restarts at now."""
        with self._uow() as uow:
            employee = uow.employees.get_for_update(int(employee_id))
            if not employee:
                raise NotFoundError("Employee", employee_id)
            if not employee.is_terminated:
                logger.warning("Rehire rejected: employee %s is not terminated", employee_id)
                raise InvalidStateError("Employee is not terminated and cannot be rehired")

            uow.employees.set_state(employee_id=employee.employee_id, state=Active(), hire_date=self._clock())

        logger.info("Employee %s rehired", employee_id)
