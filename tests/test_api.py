from __future__ import annotations

import pytest

from src.clinic_payroll.clinic_payroll.main import create_app


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


STAFF = {"id": "s1", "name": "Dr. Sana", "role": "dentist", "salary": 30000}


def test_mark_then_read_attendance(client):
    resp = client.post(
        "/api/attendance/mark",
        json={"staffId": "s1", "date": "2025-01-06", "status": "late", "time": "09:20", "notes": "rain"},
    )
    assert resp.status_code == 200
    assert resp.get_json()["data"]["synced"] is True

    resp = client.get("/api/attendance/s1/2025-01-06")
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["status"] == "late"
    assert body["data"]["notes"] == "rain"
    assert body["data"]["isCheckedOut"] is False


def test_mark_missing_fields_is_bad_request(client):
    resp = client.post("/api/attendance/mark", json={"staffId": "s1", "date": "2025-01-06"})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_unmarked_day_reads_as_null(client):
    resp = client.get("/api/attendance/s1/2025-01-07")

    assert resp.status_code == 200
    assert resp.get_json()["data"] is None


def test_checkout_on_holiday_is_reported(client):
    resp = client.post("/api/attendance/checkout", json={"staffId": "s1", "date": "2025-01-05"})

    assert resp.get_json()["data"] == {"record": None, "holiday": True, "synced": True}


def test_holiday_lookup(client):
    assert client.get("/api/calendar/holiday?date=2025-01-05").get_json()["data"]["is_holiday"] is True
    assert client.get("/api/calendar/holiday?date=2025-01-06").get_json()["data"]["is_holiday"] is False
    assert client.get("/api/calendar/holiday?date=nope").status_code == 400


def test_classify_returns_suggestion(client):
    data = client.get("/api/attendance/classify").get_json()["data"]

    assert set(data) == {"status", "time", "is_holiday"}


def test_deductions_endpoint(client):
    resp = client.post("/api/payroll/deductions", json={"staff": STAFF, "start": "2025-01-06", "end": "2025-01-10"})

    data = resp.get_json()["data"]
    assert data["absent_days"] == 5
    assert data["total_deductions"] == 5000


def test_overtime_endpoint_rejects_zero_working_days(client):
    resp = client.post("/api/payroll/overtime", json={"staff": STAFF, "present_days": 3, "working_days": 0})

    assert resp.status_code == 400


def test_salary_endpoint(client):
    resp = client.post(
        "/api/payroll/salary",
        json={"base_salary": 30000, "allowances": 2000, "overtime": 3000, "bonus": 1000, "attendance_deductions": 1500},
    )

    assert resp.get_json()["data"] == {"gross_salary": 36000, "net_salary": 34500}


def test_salary_record_lifecycle(client):
    payload = {"staffId": "s1", "month": "January", "year": 2025, "baseSalary": 30000}

    created = client.post("/api/salaries", json=payload)
    assert created.status_code == 201
    record_id = created.get_json()["data"]["id"]

    assert client.post("/api/salaries", json=payload).status_code == 409

    updated = client.put(f"/api/salaries/{record_id}", json={"bonus": 500})
    assert updated.status_code == 200
    assert updated.get_json()["data"]["grossSalary"] == 30500

    paid = client.post(f"/api/salaries/{record_id}/pay", json={"paymentDate": "2025-02-01"})
    assert paid.get_json()["data"]["status"] == "paid"

    listing = client.get("/api/salaries").get_json()["data"]
    assert listing["total_paid"] == 30500

    assert client.delete(f"/api/salaries/{record_id}").status_code == 200
    assert client.get(f"/api/salaries/{record_id}").status_code == 400


def test_settings_validation_maps_to_422(client):
    doc = client.get("/api/settings/salary").get_json()["data"]
    doc["absentDeductionAmount"] = -5

    resp = client.put("/api/settings/salary", json=doc)

    assert resp.status_code == 422


def test_schedule_save_round_trip(client):
    doc = client.get("/api/settings/schedule").get_json()["data"]
    doc["workingDays"]["saturday"] = True

    resp = client.put("/api/settings/schedule", json=doc)

    assert resp.status_code == 200
    assert client.get("/api/calendar/holiday?date=2025-01-11").get_json()["data"]["is_holiday"] is False


def test_non_json_body_is_rejected(client):
    resp = client.post("/api/attendance/mark", data="staffId=s1")

    assert resp.status_code == 400


def test_mark_with_non_text_notes_is_bad_request(client):
    resp = client.post(
        "/api/attendance/mark",
        json={"staffId": "s1", "date": "2025-01-06", "status": "present", "time": "09:00", "notes": 42},
    )

    assert resp.status_code == 400
