from __future__ import annotations

import copy
import dataclasses
from contextlib import contextmanager
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

import pytest

from salary_app.container import build_services
from salary_app.core.enums import AddressType
from salary_app.core.exceptions import StoreError
from salary_app.employees.model import Employee, EmployeeDetails, EmployeeListItem
from salary_app.employees.service import EmployeeService
from salary_app.main import create_app
from salary_app.reference.model import Address, City, Company, Department, Office, Position
from salary_app.salaries.model import Salary, SalaryLine, period_overlaps
from salary_app.salaries.service import SalaryService

# Last day of a month, so the whole current month is not in the future.
NOW = datetime(2026, 10, 31, 12, 0, 0)


@dataclasses.dataclass
class InMemoryStore:
    cities: dict = dataclasses.field(default_factory=dict)
    companies: dict = dataclasses.field(default_factory=dict)
    addresses: dict = dataclasses.field(default_factory=dict)
    offices: dict = dataclasses.field(default_factory=dict)
    departments: dict = dataclasses.field(default_factory=dict)
    positions: dict = dataclasses.field(default_factory=dict)
    employees: dict = dataclasses.field(default_factory=dict)
    salaries: dict = dataclasses.field(default_factory=dict)
    next_ids: dict = dataclasses.field(default_factory=dict)
    fail_employee_insert: bool = False

    def next_id(self, table: str) -> int:
        current = self.next_ids.get(table) or (max(getattr(self, table), default=0) + 1)
        self.next_ids[table] = current + 1
        return current


def seeded_store() -> InMemoryStore:
    s = InMemoryStore()
    s.cities = {1: City(1, "Sofia"), 2: City(2, "Plovdiv"), 3: City(3, "Varna")}
    s.companies = {1: Company(1, "Tech Solutions Ltd."), 2: Company(2, "Digital Innovations Inc.")}
    s.addresses = {
        1: Address(1, "Main Street", "1", 1, AddressType.OFFICE),
        2: Address(2, "Tech Boulevard", "42", 2, AddressType.OFFICE),
    }
    s.offices = {1: Office(1, "Sofia HQ", 1, 1), 2: Office(2, "Plovdiv Branch", 2, 2)}
    s.departments = {1: Department(1, "IT", 1), 2: Department(2, "HR", 1), 3: Department(3, "Development", 2)}
    s.positions = {
        1: Position(1, "Senior Developer", Decimal("5000.00"), 1),
        2: Position(2, "HR Manager", Decimal("4000.00"), 2),
        3: Position(3, "Junior Developer", Decimal("3000.00"), 3),
    }
    s.employees = {
        1: Employee(1, "John", None, "Doe", 1, 1, 1, 1, NOW - timedelta(days=730)),
        2: Employee(2, "Jane", None, "Smith", 1, 2, 1, 1, NOW - timedelta(days=365)),
        3: Employee(3, "Bob", None, "Johnson", 2, 3, 2, 2, NOW - timedelta(days=182)),
    }
    return s


class FakeReferenceRepo:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def get_company(self, company_id):
        return self._s.companies.get(int(company_id))

    def get_position(self, position_id):
        return self._s.positions.get(int(position_id))

    def get_office(self, office_id):
        return self._s.offices.get(int(office_id))

    def get_city(self, city_id):
        return self._s.cities.get(int(city_id))

    def list_companies(self):
        return sorted(self._s.companies.values(), key=lambda c: c.name)

    def list_positions(self):
        return sorted(self._s.positions.values(), key=lambda p: p.title)

    def list_offices(self):
        return sorted(self._s.offices.values(), key=lambda o: o.name)

    def list_cities(self):
        return sorted(self._s.cities.values(), key=lambda c: c.name)

    def list_departments(self):
        return sorted(self._s.departments.values(), key=lambda d: d.name)


class FakeAddressRepo:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def get_by_id(self, address_id):
        return self._s.addresses.get(int(address_id))

    def create(self, *, street_name, street_number, neighborhood, postal_code, city_id, address_type):
        aid = self._s.next_id("addresses")
        self._s.addresses[aid] = Address(aid, street_name, street_number, city_id, address_type, neighborhood, postal_code)
        return aid

    def update(self, *, address_id, street_name, street_number, neighborhood, postal_code, city_id, address_type):
        if address_id not in self._s.addresses:
            return False
        self._s.addresses[address_id] = Address(
            address_id, street_name, street_number, city_id, address_type, neighborhood, postal_code
        )
        return True


class FakeEmployeeRepo:
    def __init__(self, store: InMemoryStore):
        self._s = store
        self.locked: list[int] = []

    def get_by_id(self, employee_id):
        return self._s.employees.get(int(employee_id))

    def get_for_update(self, employee_id):
        self.locked.append(int(employee_id))
        return self.get_by_id(employee_id)

    def list_active(self):
        out = []
        for e in sorted(self._s.employees.values(), key=lambda e: (e.last_name, e.first_name)):
            if e.is_terminated:
                continue
            a = self._s.addresses[e.address_id]
            out.append(
                EmployeeListItem(
                    employee_id=e.employee_id,
                    full_name=e.full_name,
                    company_name=self._s.companies[e.company_id].name,
                    position_title=self._s.positions[e.position_id].title,
                    office_name=self._s.offices[e.office_id].name,
                    city_name=self._s.cities[a.city_id].name,
                    street=f"{a.street_name} {a.street_number}",
                    hire_date=e.hire_date,
                )
            )
        return out

    def get_details(self, employee_id):
        e = self._s.employees.get(int(employee_id))
        if not e:
            return None
        a = self._s.addresses[e.address_id]
        p = self._s.positions[e.position_id]
        return EmployeeDetails(
            employee=e,
            street_name=a.street_name,
            street_number=a.street_number,
            neighborhood=a.neighborhood,
            postal_code=a.postal_code,
            city_id=a.city_id,
            city_name=self._s.cities[a.city_id].name,
            address_type=a.address_type,
            company_name=self._s.companies[e.company_id].name,
            position_title=p.title,
            base_salary=p.base_salary,
            office_name=self._s.offices[e.office_id].name,
        )

    def create(self, *, first_name, middle_name, last_name, address_id, position_id, office_id, company_id, hire_date, state):
        if self._s.fail_employee_insert:
            raise StoreError("Database error: simulated insert failure")
        eid = self._s.next_id("employees")
        self._s.employees[eid] = Employee(
            eid, first_name, middle_name, last_name, address_id, position_id, office_id, company_id, hire_date, state
        )
        return eid

    def update(self, *, employee_id, first_name, middle_name, last_name, position_id, office_id, company_id, hire_date, state):
        e = self._s.employees.get(int(employee_id))
        if not e:
            return False
        if position_id not in self._s.positions or office_id not in self._s.offices or company_id not in self._s.companies:
            raise StoreError("Database error: foreign key constraint fails")
        self._s.employees[e.employee_id] = dataclasses.replace(
            e,
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            position_id=position_id,
            office_id=office_id,
            company_id=company_id,
            hire_date=hire_date,
            state=state,
        )
        return True

    def set_state(self, *, employee_id, state, hire_date=None):
        e = self._s.employees.get(int(employee_id))
        if not e:
            return False
        changes = {"state": state}
        if hire_date is not None:
            changes["hire_date"] = hire_date
        self._s.employees[e.employee_id] = dataclasses.replace(e, **changes)
        return True


class FakeSalaryRepo:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def _line(self, s: Salary) -> SalaryLine:
        e = self._s.employees[s.employee_id]
        p = self._s.positions[e.position_id]
        return SalaryLine(s, e.first_name, e.last_name, p.title, p.base_salary)

    def get_by_id(self, salary_id):
        return self._s.salaries.get(int(salary_id))

    def get_line(self, salary_id):
        s = self.get_by_id(salary_id)
        return self._line(s) if s else None

    def list_lines(self):
        return [self._line(s) for s in sorted(self._s.salaries.values(), key=lambda s: s.period_start, reverse=True)]

    def list_for_employee(self, employee_id):
        return sorted(
            (s for s in self._s.salaries.values() if s.employee_id == int(employee_id)),
            key=lambda s: s.period_start,
            reverse=True,
        )

    def find_overlapping(self, *, employee_id, period_start, period_end, exclude_salary_id=None):
        for s in sorted(self._s.salaries.values(), key=lambda s: s.salary_id):
            if s.employee_id != employee_id or s.salary_id == exclude_salary_id:
                continue
            if period_overlaps(s.period_start, s.period_end, period_start, period_end):
                return s
        return None

    def create(self, *, employee_id, period_start, period_end, bonus, deduction):
        sid = self._s.next_id("salaries")
        self._s.salaries[sid] = Salary(sid, employee_id, period_start, period_end, bonus, deduction)
        return sid

    def update(self, *, salary_id, period_start, period_end, bonus, deduction):
        s = self._s.salaries.get(int(salary_id))
        if not s:
            return False
        self._s.salaries[s.salary_id] = dataclasses.replace(
            s, period_start=period_start, period_end=period_end, bonus=bonus, deduction=deduction
        )
        return True

    def delete_by_id(self, salary_id):
        return self._s.salaries.pop(int(salary_id), None) is not None


@dataclasses.dataclass
class FakeUnitOfWork:
    employees: FakeEmployeeRepo
    salaries: FakeSalaryRepo
    addresses: FakeAddressRepo
    reference: FakeReferenceRepo


class InMemoryUnitOfWorkFactory:
    """Snapshots the store on enter and restores it when the block raises."""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.commits = 0
        self.rollbacks = 0
        self.last: Optional[FakeUnitOfWork] = None

    @contextmanager
    def __call__(self):
        snapshot = copy.deepcopy(vars(self.store))
        uow = FakeUnitOfWork(
            employees=FakeEmployeeRepo(self.store),
            salaries=FakeSalaryRepo(self.store),
            addresses=FakeAddressRepo(self.store),
            reference=FakeReferenceRepo(self.store),
        )
        self.last = uow
        try:
            yield uow
        except Exception:
            vars(self.store).update(snapshot)
            self.rollbacks += 1
            raise
        self.commits += 1


@pytest.fixture
def store() -> InMemoryStore:
    return seeded_store()


@pytest.fixture
def uow_factory(store) -> InMemoryUnitOfWorkFactory:
    return InMemoryUnitOfWorkFactory(store)


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def employee_service(uow_factory, clock) -> EmployeeService:
    return EmployeeService(uow_factory, clock=clock)


@pytest.fixture
def salary_service(uow_factory, clock) -> SalaryService:
    return SalaryService(uow_factory, clock=clock)


@pytest.fixture
def client(monkeypatch, uow_factory, clock):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_services(uow_factory, clock=clock))
    return app.test_client()
