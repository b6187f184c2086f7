from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeDetails, EmployeeListItem, EmploymentState


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_for_update(self, employee_id: int) -> Optional[Employee]:
        """Like get_by_id but holds a row lock until the transaction ends."""

        raise NotImplementedError

    def list_active(self) -> Sequence[EmployeeListItem]:
        raise NotImplementedError

    def get_details(self, employee_id: int) -> Optional[EmployeeDetails]:
        """Joined read-model without salaries (the salary repository owns those)."""

        raise NotImplementedError

    def create(
        self,
        *,
        first_name: str,
        middle_name: Optional[str],
        last_name: str,
        address_id: int,
        position_id: int,
        office_id: int,
        company_id: int,
        hire_date: datetime,
        state: EmploymentState,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        employee_id: int,
        first_name: str,
        middle_name: Optional[str],
        last_name: str,
        position_id: int,
        office_id: int,
        company_id: int,
        hire_date: datetime,
        state: EmploymentState,
    ) -> bool:
        raise NotImplementedError

    def set_state(
        self,
        *,
        employee_id: int,
        state: EmploymentState,
        hire_date: Optional[datetime] = None,
    ) -> bool:
        """Write the employment state; also replaces hire_date when given."""

        raise NotImplementedError
