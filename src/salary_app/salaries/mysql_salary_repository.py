from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.mysql_base import fetchall, fetchone
from .model import Salary, SalaryLine
from .repository import SalaryRepository

_LINE_QUERY = """
    SELECT s.salary_id, s.employee_id, s.period_start, s.period_end, s.bonus, s.deduction,
           e.first_name, e.last_name, p.title AS position_title, p.base_salary
    FROM salaries s
    JOIN employees e ON e.employee_id = s.employee_id
    JOIN positions p ON p.position_id = e.position_id
"""


def _salary(r: dict) -> Salary:
    return Salary(
        salary_id=int(r["salary_id"]),
        employee_id=int(r["employee_id"]),
        period_start=r["period_start"],
        period_end=r["period_end"],
        bonus=Decimal(r["bonus"]),
        deduction=Decimal(r["deduction"]),
    )


def _line(r: dict) -> SalaryLine:
    return SalaryLine(
        salary=_salary(r),
        employee_first_name=r["first_name"],
        employee_last_name=r["last_name"],
        position_title=r["position_title"],
        base_salary=Decimal(r["base_salary"]),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, cur):
        self._cur = cur

    def get_by_id(self, salary_id: int) -> Optional[Salary]:
        self._cur.execute(
            """
            SELECT salary_id, employee_id, period_start, period_end, bonus, deduction
            FROM salaries
            WHERE salary_id=%s
            """,
            (int(salary_id),),
        )
        r = fetchone(self._cur)
        return _salary(r) if r else None

    def get_line(self, salary_id: int) -> Optional[SalaryLine]:
        self._cur.execute(_LINE_QUERY + " WHERE s.salary_id=%s", (int(salary_id),))
        r = fetchone(self._cur)
        return _line(r) if r else None

    def list_lines(self) -> Sequence[SalaryLine]:
        self._cur.execute(_LINE_QUERY + " ORDER BY s.period_start DESC, e.last_name, e.first_name")
        return [_line(r) for r in fetchall(self._cur)]

    def list_for_employee(self, employee_id: int) -> Sequence[Salary]:
        self._cur.execute(
            """
            SELECT salary_id, employee_id, period_start, period_end, bonus, deduction
            FROM salaries
            WHERE employee_id=%s
            ORDER BY period_start DESC
            """,
            (int(employee_id),),
        )
        return [_salary(r) for r in fetchall(self._cur)]

    def find_overlapping(
        self,
        *,
        employee_id: int,
        period_start: date,
        period_end: date,
        exclude_salary_id: Optional[int] = None,
    ) -> Optional[Salary]:
        clauses = [
            "employee_id=%s",
            "((period_start <= %s AND period_end >= %s) OR (period_start <= %s AND period_end >= %s))",
        ]
        params: list[object] = [int(employee_id), period_start, period_start, period_end, period_end]
        if exclude_salary_id is not None:
            clauses.append("salary_id <> %s")
            params.append(int(exclude_salary_id))

        where = " AND ".join(clauses)
        self._cur.execute(
            f"""
            SELECT salary_id, employee_id, period_start, period_end, bonus, deduction
            FROM salaries
            WHERE {where}
            ORDER BY period_start
            LIMIT 1
            FOR UPDATE
            """,
            tuple(params),
        )
        r = fetchone(self._cur)
        return _salary(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        period_start: date,
        period_end: date,
        bonus: Decimal,
        deduction: Decimal,
    ) -> int:
        self._cur.execute(
            """
            INSERT INTO salaries(employee_id, period_start, period_end, bonus, deduction)
            VALUES(%s,%s,%s,%s,%s)
            """,
            (int(employee_id), period_start, period_end, bonus, deduction),
        )
        return int(self._cur.lastrowid)

    def update(
        self,
        *,
        salary_id: int,
        period_start: date,
        period_end: date,
        bonus: Decimal,
        deduction: Decimal,
    ) -> bool:
        self._cur.execute(
            """
            UPDATE salaries
            SET period_start=%s, period_end=%s, bonus=%s, deduction=%s
            WHERE salary_id=%s
            """,
            (period_start, period_end, bonus, deduction, int(salary_id)),
        )
        return self._cur.rowcount > 0

    def delete_by_id(self, salary_id: int) -> bool:
        self._cur.execute("DELETE FROM salaries WHERE salary_id=%s", (int(salary_id),))
        return self._cur.rowcount > 0
