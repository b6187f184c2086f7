from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import AddressType
from ..database.mysql_base import fetchall, fetchone
from .model import (
    Employee,
    EmployeeDetails,
    EmployeeListItem,
    EmploymentState,
    state_from_columns,
    state_to_columns,
)
from .repository import EmployeeRepository

_EMPLOYEE_COLUMNS = """
    employee_id, first_name, middle_name, last_name, address_id,
    position_id, office_id, company_id, hire_date, termination_date, is_terminated
"""


def _employee(r: dict) -> Employee:
    hire_date = r["hire_date"]
    return Employee(
        employee_id=int(r["employee_id"]),
        first_name=r["first_name"],
        middle_name=r.get("middle_name"),
        last_name=r["last_name"],
        address_id=int(r["address_id"]),
        position_id=int(r["position_id"]),
        office_id=int(r["office_id"]),
        company_id=int(r["company_id"]),
        hire_date=hire_date,
        # Legacy rows may carry the flag without a date; fall back to the hire date.
        state=state_from_columns(bool(r["is_terminated"]), r.get("termination_date"), fallback=hire_date),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, cur):
        self._cur = cur

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        self._cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
        r = fetchone(self._cur)
        return _employee(r) if r else None

    def get_for_update(self, employee_id: int) -> Optional[Employee]:
        self._cur.execute(
            f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE employee_id=%s FOR UPDATE",
            (int(employee_id),),
        )
        r = fetchone(self._cur)
        return _employee(r) if r else None

    def list_active(self) -> Sequence[EmployeeListItem]:
        self._cur.execute(
            """
            SELECT e.employee_id, e.first_name, e.middle_name, e.last_name, e.hire_date,
                   c.name AS company_name, p.title AS position_title, o.name AS office_name,
                   ci.name AS city_name, a.street_name, a.street_number
            FROM employees e
            JOIN companies c ON c.company_id = e.company_id
            JOIN positions p ON p.position_id = e.position_id
            JOIN offices o ON o.office_id = e.office_id
            JOIN addresses a ON a.address_id = e.address_id
            JOIN cities ci ON ci.city_id = a.city_id
            WHERE e.is_terminated = 0
            ORDER BY e.last_name, e.first_name
            """
        )
        out: list[EmployeeListItem] = []
        for r in fetchall(self._cur):
            names = [r["first_name"], r.get("middle_name"), r["last_name"]]
            out.append(
                EmployeeListItem(
                    employee_id=int(r["employee_id"]),
                    full_name=" ".join(n for n in names if n),
                    company_name=r["company_name"],
                    position_title=r["position_title"],
                    office_name=r["office_name"],
                    city_name=r["city_name"],
                    street=f"{r['street_name']} {r['street_number']}",
                    hire_date=r["hire_date"],
                )
            )
        return out

    def get_details(self, employee_id: int) -> Optional[EmployeeDetails]:
        self._cur.execute(
            """
            SELECT e.employee_id, e.first_name, e.middle_name, e.last_name, e.address_id,
                   e.position_id, e.office_id, e.company_id, e.hire_date, e.termination_date, e.is_terminated,
                   a.street_name, a.street_number, a.neighborhood, a.postal_code, a.city_id, a.address_type,
                   ci.name AS city_name, c.name AS company_name,
                   p.title AS position_title, p.base_salary, o.name AS office_name
            FROM employees e
            JOIN addresses a ON a.address_id = e.address_id
            JOIN cities ci ON ci.city_id = a.city_id
            JOIN companies c ON c.company_id = e.company_id
            JOIN positions p ON p.position_id = e.position_id
            JOIN offices o ON o.office_id = e.office_id
            WHERE e.employee_id=%s
            """,
            (int(employee_id),),
        )
        r = fetchone(self._cur)
        if not r:
            return None
        return EmployeeDetails(
            employee=_employee(r),
            street_name=r["street_name"],
            street_number=r["street_number"],
            neighborhood=r.get("neighborhood"),
            postal_code=r.get("postal_code"),
            city_id=int(r["city_id"]),
            city_name=r["city_name"],
            address_type=AddressType(r["address_type"]),
            company_name=r["company_name"],
            position_title=r["position_title"],
            base_salary=Decimal(r["base_salary"]),
            office_name=r["office_name"],
        )

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
        is_terminated, termination_date = state_to_columns(state)
        self._cur.execute(
            """
            INSERT INTO employees(
                first_name, middle_name, last_name, address_id, position_id, office_id, company_id,
                hire_date, termination_date, is_terminated
            )
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                first_name,
                middle_name,
                last_name,
                int(address_id),
                int(position_id),
                int(office_id),
                int(company_id),
                hire_date,
                termination_date,
                int(is_terminated),
            ),
        )
        return int(self._cur.lastrowid)

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
        is_terminated, termination_date = state_to_columns(state)
        self._cur.execute(
            """
            UPDATE employees
            SET first_name=%s, middle_name=%s, last_name=%s,
                position_id=%s, office_id=%s, company_id=%s,
                hire_date=%s, termination_date=%s, is_terminated=%s
            WHERE employee_id=%s
            """,
            (
                first_name,
                middle_name,
                last_name,
                int(position_id),
                int(office_id),
                int(company_id),
                hire_date,
                termination_date,
                int(is_terminated),
                int(employee_id),
            ),
        )
        return self._cur.rowcount > 0

    def set_state(
        self,
        *,
        employee_id: int,
        state: EmploymentState,
        hire_date: Optional[datetime] = None,
    ) -> bool:
        is_terminated, termination_date = state_to_columns(state)
        if hire_date is None:
            self._cur.execute(
                "UPDATE employees SET is_terminated=%s, termination_date=%s WHERE employee_id=%s",
                (int(is_terminated), termination_date, int(employee_id)),
            )
        else:
            self._cur.execute(
                "UPDATE employees SET is_terminated=%s, termination_date=%s, hire_date=%s WHERE employee_id=%s",
                (int(is_terminated), termination_date, hire_date, int(employee_id)),
            )
        return self._cur.rowcount > 0
