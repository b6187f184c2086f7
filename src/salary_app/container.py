from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_ISOLATION_LEVEL
from .database.connection import DBConfig, DatabaseConnection
from .database.unit_of_work import UnitOfWorkFactory, mysql_unit_of_work_factory
from .employees.service import EmployeeService
from .reference.service import ReferenceDataService
from .salaries.service import SalaryService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    uow_factory: UnitOfWorkFactory

    employee_service: EmployeeService
    salary_service: SalaryService
    reference_service: ReferenceDataService


def build_services(
    uow_factory: UnitOfWorkFactory,
    *,
    conn: Optional[DatabaseConnection] = None,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    clock=None,
) -> Container:
    clock_kw = {"clock": clock} if clock is not None else {}
    return Container(
        conn=conn,
        uow_factory=uow_factory,
        employee_service=EmployeeService(uow_factory, **clock_kw),
        salary_service=SalaryService(uow_factory, currency_symbol=currency_symbol, **clock_kw),
        reference_service=ReferenceDataService(uow_factory),
    )


def build_container(
    *,
    db_config: dict,
    isolation_level: str = DEFAULT_ISOLATION_LEVEL,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        isolation_level=isolation_level,
    )
    conn = DatabaseConnection.get_instance(config)
    uow_factory = mysql_unit_of_work_factory(conn, isolation_level=isolation_level)
    return build_services(uow_factory, conn=conn, currency_symbol=currency_symbol)
