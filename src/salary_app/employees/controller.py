from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import iso_or_none
from ..common.responses import error_response, ok
from ..common.validators import optional_datetime, require_datetime, require_flag, require_id
from ..container import Container
from ..core.enums import AddressType, ValidationReason
from ..core.exceptions import ValidationError
from .model import AddressInput, EmployeeDetails, EmployeeDraft, EmployeeUpdate, RelatedIds


def _address_from(payload: dict) -> AddressInput:
    raw_type = payload.get("address_type") or AddressType.EMPLOYEE.value
    try:
        address_type = AddressType(str(raw_type).upper())
    except ValueError:
        raise ValidationError(ValidationReason.INVALID_FORMAT, "address_type is not valid", field="address_type")
    return AddressInput(
        street_name=payload.get("street_name") or "",
        street_number=payload.get("street_number") or "",
        neighborhood=payload.get("neighborhood"),
        postal_code=payload.get("postal_code"),
        address_type=address_type,
    )


def _details_payload(details: EmployeeDetails) -> dict:
    emp = details.employee
    return {
        "employee_id": emp.employee_id,
        "first_name": emp.first_name,
        "middle_name": emp.middle_name,
        "last_name": emp.last_name,
        "full_name": emp.full_name,
        "hire_date": iso_or_none(emp.hire_date),
        "is_terminated": emp.is_terminated,
        "termination_date": iso_or_none(emp.termination_date),
        "company_id": emp.company_id,
        "company_name": details.company_name,
        "position_id": emp.position_id,
        "position_title": details.position_title,
        "base_salary": details.base_salary,
        "office_id": emp.office_id,
        "office_name": details.office_name,
        "address": {
            "address_id": emp.address_id,
            "street_name": details.street_name,
            "street_number": details.street_number,
            "neighborhood": details.neighborhood,
            "postal_code": details.postal_code,
            "city_id": details.city_id,
            "city_name": details.city_name,
            "address_type": details.address_type,
        },
        "salaries": details.salaries,
    }


def register(app: Flask, container: Container) -> None:
    def _fail(e: Exception):
        return error_response(e, debug=bool(app.config.get("DEBUG")))

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            return ok({"employees": container.employee_service.list_active()})
        except Exception as e:
            return _fail(e)

    @app.route("/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        payload = request.get_json(silent=True) or {}
        try:
            draft = EmployeeDraft(
                first_name=payload.get("first_name") or "",
                middle_name=payload.get("middle_name"),
                last_name=payload.get("last_name") or "",
                hire_date=require_datetime(payload.get("hire_date"), "hire_date"),
                address=_address_from(payload),
            )
            related = RelatedIds(
                company_id=require_id(payload.get("company_id"), "company_id"),
                position_id=require_id(payload.get("position_id"), "position_id"),
                office_id=require_id(payload.get("office_id"), "office_id"),
                city_id=require_id(payload.get("city_id"), "city_id"),
            )
            employee_id = container.employee_service.create(draft, related)
            return ok({"employee_id": employee_id}, 201)
        except Exception as e:
            return _fail(e)

    @app.route("/employees/<int:employee_id>", methods=["GET"], endpoint="employee_details")
    def employee_details(employee_id: int):
        try:
            details = container.employee_service.get_details(employee_id)
            return ok({"employee": _details_payload(details)})
        except Exception as e:
            return _fail(e)

    @app.route("/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        payload = request.get_json(silent=True) or {}
        try:
            fields = EmployeeUpdate(
                first_name=payload.get("first_name") or "",
                middle_name=payload.get("middle_name"),
                last_name=payload.get("last_name") or "",
                company_id=payload.get("company_id"),
                position_id=payload.get("position_id"),
                office_id=payload.get("office_id"),
                city_id=payload.get("city_id"),
                hire_date=require_datetime(payload.get("hire_date"), "hire_date"),
                address=_address_from(payload),
                is_terminated=require_flag(payload.get("is_terminated"), "is_terminated"),
                termination_date=optional_datetime(payload.get("termination_date"), "termination_date"),
            )
            container.employee_service.update(employee_id, fields)
            return ok()
        except Exception as e:
            return _fail(e)

    @app.route("/employees/<int:employee_id>/terminate", methods=["POST"], endpoint="terminate_employee")
    def terminate_employee(employee_id: int):
        try:
            container.employee_service.terminate(employee_id)
            return ok()
        except Exception as e:
            return _fail(e)

    @app.route("/employees/<int:employee_id>/rehire", methods=["POST"], endpoint="rehire_employee")
    def rehire_employee(employee_id: int):
        try:
            container.employee_service.rehire(employee_id)
            return ok()
        except Exception as e:
            return _fail(e)
