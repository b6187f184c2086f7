from __future__ import annotations

import io

from flask import Flask, Response, request, send_file

from ..common.responses import error_response, ok
from ..common.validators import require_date, require_id
from ..container import Container
from .model import SalaryLine
from .service import SalaryInput

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _salary_input(payload: dict) -> SalaryInput:
    return SalaryInput(
        period_start=require_date(payload.get("period_start"), "period_start"),
        period_end=require_date(payload.get("period_end"), "period_end"),
        bonus=payload.get("bonus"),
        deduction=payload.get("deduction"),
    )


def _line_payload(line: SalaryLine) -> dict:
    s = line.salary
    return {
        "salary_id": s.salary_id,
        "employee_id": s.employee_id,
        "employee_name": line.employee_name,
        "position_title": line.position_title,
        "period_start": s.period_start,
        "period_end": s.period_end,
        "base_salary": line.base_salary,
        "bonus": s.bonus,
        "deduction": s.deduction,
        "total": line.total,
    }


def register(app: Flask, container: Container) -> None:
    def _fail(e: Exception):
        return error_response(e, debug=bool(app.config.get("DEBUG")))

    @app.route("/salaries", methods=["GET"], endpoint="list_salaries")
    def list_salaries():
        try:
            lines = container.salary_service.list_lines()
            return ok({"salaries": [_line_payload(ln) for ln in lines]})
        except Exception as e:
            return _fail(e)

    @app.route("/salaries", methods=["POST"], endpoint="create_salary")
    def create_salary():
        payload = request.get_json(silent=True) or {}
        try:
            employee_id = require_id(payload.get("employee_id"), "employee_id")
            salary_id = container.salary_service.create(employee_id, _salary_input(payload))
            return ok({"salary_id": salary_id}, 201)
        except Exception as e:
            return _fail(e)

    @app.route("/salaries/export", methods=["GET"], endpoint="export_salaries")
    def export_salaries():
        try:
            data = container.salary_service.export_xlsx()
        except Exception as e:
            return _fail(e)
        return send_file(
            io.BytesIO(data),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name="salaries.xlsx",
        )

    @app.route("/salaries/<int:salary_id>", methods=["PUT"], endpoint="update_salary")
    def update_salary(salary_id: int):
        payload = request.get_json(silent=True) or {}
        try:
            container.salary_service.update(salary_id, _salary_input(payload))
            return ok()
        except Exception as e:
            return _fail(e)

    @app.route("/salaries/<int:salary_id>", methods=["DELETE"], endpoint="delete_salary")
    def delete_salary(salary_id: int):
        try:
            container.salary_service.delete(salary_id)
            return ok()
        except Exception as e:
            return _fail(e)

    @app.route("/salaries/<int:salary_id>/statement", methods=["GET"], endpoint="salary_statement")
    def salary_statement(salary_id: int):
        try:
            statement = container.salary_service.statement(salary_id)
        except Exception as e:
            return _fail(e)
        if request.args.get("format") == "text":
            return Response(statement.to_text(), mimetype="text/plain")
        return Response(statement.to_html(), mimetype="text/html")
