from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, ContextManager, Iterator, Optional, Protocol

from ..employees.mysql_employee_repository import MySQLEmployeeRepository
from ..employees.repository import EmployeeRepository
from ..reference.mysql_reference_repository import MySQLAddressRepository, MySQLReferenceRepository
from ..reference.repository import AddressRepository, ReferenceRepository
from ..salaries.mysql_salary_repository import MySQLSalaryRepository
from ..salaries.repository import SalaryRepository
from .connection import DatabaseConnection
from .mysql_base import db_transaction


class UnitOfWork(Protocol):
    """Repositories sharing one transaction.

    Services open one per operation: every write commits together or not at all.
    """

    employees: EmployeeRepository
    salaries: SalaryRepository
    addresses: AddressRepository
    reference: ReferenceRepository


UnitOfWorkFactory = Callable[[], ContextManager[UnitOfWork]]


@dataclass(frozen=True)
class MySQLUnitOfWork:
    employees: MySQLEmployeeRepository
    salaries: MySQLSalaryRepository
    addresses: MySQLAddressRepository
    reference: MySQLReferenceRepository


def mysql_unit_of_work_factory(
    conn_factory: DatabaseConnection,
    *,
    isolation_level: Optional[str] = None,
) -> UnitOfWorkFactory:
    @contextmanager
    def unit_of_work() -> Iterator[MySQLUnitOfWork]:
        with db_transaction(conn_factory, isolation_level=isolation_level) as (_, cur):
            yield MySQLUnitOfWork(
                employees=MySQLEmployeeRepository(cur),
                salaries=MySQLSalaryRepository(cur),
                addresses=MySQLAddressRepository(cur),
                reference=MySQLReferenceRepository(cur),
            )

    return unit_of_work
