from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from .model import SalaryLine

EXPORT_COLUMNS = [
    "Salary ID",
    "Employee",
    "Position",
    "Period Start",
    "Period End",
    "Base Salary",
    "Bonus",
    "Deduction",
    "Total",
]


def salaries_frame(lines: Sequence[SalaryLine]) -> pd.DataFrame:
    rows = [
        (
            ln.salary.salary_id,
            ln.employee_name,
            ln.position_title,
            ln.salary.period_start,
            ln.salary.period_end,
            float(ln.base_salary),
            float(ln.salary.bonus),
            float(ln.salary.deduction),
            float(ln.total),
        )
        for ln in lines
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def salaries_to_xlsx(lines: Sequence[SalaryLine]) -> bytes:
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        salaries_frame(lines).to_excel(writer, index=False, sheet_name="Salaries")
    return out.getvalue()
