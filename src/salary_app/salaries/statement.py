from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from markupsafe import escape

from ..common.money import format_currency
from ..core.constants import DEFAULT_CURRENCY_SYMBOL
from .model import SalaryLine

_HTML_STYLE = """
        body { font-family: Arial, sans-serif; margin: 40px; }
        .header { text-align: center; margin-bottom: 30px; }
        .details { margin-bottom: 20px; }
        .row { margin-bottom: 10px; }
        .label { font-weight: bold; }
        .total { margin-top: 20px; font-weight: bold; }
"""


@dataclass(frozen=True)
class SalaryStatement:
    """Printable statement of one salary record."""

    title: str
    rows: Sequence[Tuple[str, str]]
    total: str

    def to_text(self) -> str:
        width = max(len(label) for label, _ in [*self.rows, ("Total", self.total)]) + 1
        lines = [self.title, "=" * len(self.title)]
        lines += [f"{label + ':':<{width}} {value}" for label, value in self.rows]
        lines.append(f"{'Total:':<{width}} {self.total}")
        return "\n".join(lines) + "\n"

    def to_html(self) -> str:
        body = "\n".join(
            f"            <div class='row'><span class='label'>{escape(label)}:</span> <span>{escape(value)}</span></div>"
            for label, value in self.rows
        )
        return (
            "<html>\n<head>\n    <meta charset='utf-8'>\n"
            f"    <title>{escape(self.title)}</title>\n"
            f"    <style>{_HTML_STYLE}    </style>\n</head>\n<body>\n"
            f"    <div class='header'><h1>{escape(self.title)}</h1></div>\n"
            "    <div class='details'>\n"
            f"{body}\n"
            f"            <div class='row total'><span class='label'>Total:</span> <span>{escape(self.total)}</span></div>\n"
            "    </div>\n</body>\n</html>\n"
        )


def build_statement(line: SalaryLine, *, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> SalaryStatement:
    s = line.salary
    return SalaryStatement(
        title="Salary Statement",
        rows=[
            ("Employee", line.employee_name),
            ("Position", line.position_title),
            ("Period", f"{s.period_start.isoformat()} - {s.period_end.isoformat()}"),
            ("Base Salary", format_currency(line.base_salary, currency_symbol)),
            ("Bonus", format_currency(s.bonus, currency_symbol)),
            ("Deduction", format_currency(s.deduction, currency_symbol)),
        ],
        total=format_currency(line.total, currency_symbol),
    )
