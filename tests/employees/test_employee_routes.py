from __future__ import annotations

NEW_HIRE = {
    "first_name": "Maria",
    "last_name": "Ivanova",
    "hire_date": "2026-09-01",
    "street_name": "Vitosha",
    "street_number": "12",
    "company_id": 1,
    "position_id": 1,
    "office_id": 1,
    "city_id": 2,
}


def test_list_employees(client):
    resp = client.get("/employees")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert [e["full_name"] for e in body["employees"]] == ["John Doe", "Bob Johnson", "Jane Smith"]


def test_create_employee_returns_201_and_id(client, store):
    resp = client.post("/employees", json=NEW_HIRE)

    assert resp.status_code == 201
    employee_id = resp.get_json()["employee_id"]
    assert store.employees[employee_id].first_name == "Maria"


def test_create_employee_with_unknown_office_is_404(client):
    resp = client.post("/employees", json={**NEW_HIRE, "office_id": 99})

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Office 99 not found"


def test_create_employee_validation_error_is_400_with_reason(client):
    resp = client.post("/employees", json={**NEW_HIRE, "first_name": ""})

    assert resp.status_code == 400
    body = resp.get_json()
    assert (body["reason"], body["field"]) == ("required", "first_name")


def test_create_employee_with_bad_hire_date_is_400(client):
    resp = client.post("/employees", json={**NEW_HIRE, "hire_date": "yesterday"})

    assert resp.status_code == 400
    assert resp.get_json()["reason"] == "invalid-format"


def test_employee_details(client):
    resp = client.get("/employees/3")

    assert resp.status_code == 200
    emp = resp.get_json()["employee"]
    assert emp["full_name"] == "Bob Johnson"
    assert emp["base_salary"] == "3000.00"
    assert emp["address"]["city_name"] == "Plovdiv"
    assert emp["is_terminated"] is False
    assert emp["salaries"] == []


def test_terminate_then_rehire(client, store):
    assert client.post("/employees/2/terminate").status_code == 200
    assert store.employees[2].is_terminated

    assert client.post("/employees/2/rehire").status_code == 200
    assert not store.employees[2].is_terminated


def test_rehire_active_employee_is_409(client):
    resp = client.post("/employees/1/rehire")

    assert resp.status_code == 409
    assert resp.get_json()["success"] is False


def test_update_employee(client, store):
    payload = {**NEW_HIRE, "first_name": "Johnny", "is_terminated": True, "termination_date": "2026-10-01"}

    resp = client.put("/employees/1", json=payload)

    assert resp.status_code == 200
    assert store.employees[1].first_name == "Johnny"
    assert store.employees[1].termination_date.date().isoformat() == "2026-10-01"


def test_unknown_employee_is_404(client):
    assert client.get("/employees/404").status_code == 404
    assert client.post("/employees/404/terminate").status_code == 404


def test_update_employee_with_string_false_keeps_employee_active(client, store):
    resp = client.put("/employees/1", json={**NEW_HIRE, "is_terminated": "false"})

    assert resp.status_code == 200
    assert not store.employees[1].is_terminated
    assert store.employees[1].termination_date is None


def test_update_employee_with_string_true_terminates(client, store):
    resp = client.put("/employees/1", json={**NEW_HIRE, "is_terminated": "1"})

    assert resp.status_code == 200
    assert store.employees[1].is_terminated


def test_update_employee_with_unreadable_flag_is_400(client, store):
    before = store.employees[1]

    resp = client.put("/employees/1", json={**NEW_HIRE, "is_terminated": "maybe"})

    assert resp.status_code == 400
    assert (resp.get_json()["reason"], resp.get_json()["field"]) == ("invalid-format", "is_terminated")
    assert store.employees[1] == before


def test_create_employee_with_non_text_name_is_400(client):
    resp = client.post("/employees", json={**NEW_HIRE, "first_name": 5})

    assert resp.status_code == 400
    assert (resp.get_json()["reason"], resp.get_json()["field"]) == ("invalid-format", "first_name")
