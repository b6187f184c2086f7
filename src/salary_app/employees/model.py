from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence, Union

from ..core.enums import AddressType


@dataclass(frozen=True)
class Active:
    """Employment state: currently employed."""


@dataclass(frozen=True)
class Terminated:
    """Employment state: soft-terminated at ``since``."""

    since: datetime


EmploymentState = Union[Active, Terminated]


def state_from_columns(is_terminated: bool, termination_date: Optional[datetime], *, fallback: datetime) -> EmploymentState:
    """Build the tagged state from the two stored columns.

    A terminated flag without a date gets ``fallback``; a cleared flag ignores any date.
    """
    if not is_terminated:
        return Active()
    return Terminated(since=termination_date or fallback)


def state_to_columns(state: EmploymentState) -> tuple[bool, Optional[datetime]]:
    if isinstance(state, Terminated):
        return True, state.since
    return False, None


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object; related entities are referenced by id only.
    """

    employee_id: int
    first_name: str
    middle_name: Optional[str]
    last_name: str
    address_id: int
    position_id: int
    office_id: int
    company_id: int
    hire_date: datetime
    state: EmploymentState = field(default_factory=Active)

    @property
    def is_terminated(self) -> bool:
        return isinstance(self.state, Terminated)

    @property
    def termination_date(self) -> Optional[datetime]:
        return self.state.since if isinstance(self.state, Terminated) else None

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)


@dataclass(frozen=True)
class AddressInput:
    street_name: str
    street_number: str
    neighborhood: Optional[str] = None
    postal_code: Optional[str] = None
    address_type: AddressType = AddressType.EMPLOYEE


@dataclass(frozen=True)
class EmployeeDraft:
    """Input for a new hire (names, hire date and the owned address)."""

    first_name: str
    last_name: str
    hire_date: datetime
    address: AddressInput
    middle_name: Optional[str] = None


@dataclass(frozen=True)
class RelatedIds:
    company_id: int
    position_id: int
    office_id: int
    city_id: int


@dataclass(frozen=True)
class EmployeeUpdate:
    """Full replacement of the mutable employee fields."""

    first_name: str
    last_name: str
    company_id: int
    position_id: int
    office_id: int
    city_id: int
    hire_date: datetime
    address: AddressInput
    middle_name: Optional[str] = None
    is_terminated: bool = False
    termination_date: Optional[datetime] = None


@dataclass(frozen=True)
class EmployeeListItem:
    """Read-model for the active employees list (joined display names)."""

    employee_id: int
    full_name: str
    company_name: str
    position_title: str
    office_name: str
    city_name: str
    street: str
    hire_date: datetime


@dataclass(frozen=True)
class SalarySummary:
    salary_id: int
    period_start: date
    period_end: date
    bonus: Decimal
    deduction: Decimal
    total: Decimal


@dataclass(frozen=True)
class EmployeeDetails:
    """Read-model: one employee with its address, employer, position, office and salaries."""

    employee: Employee
    street_name: str
    street_number: str
    neighborhood: Optional[str]
    postal_code: Optional[str]
    city_id: int
    city_name: str
    address_type: AddressType
    company_name: str
    position_title: str
    base_salary: Decimal
    office_name: str
    salaries: Sequence[SalarySummary] = field(default_factory=list)
