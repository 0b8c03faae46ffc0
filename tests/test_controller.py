from __future__ import annotations

from types import SimpleNamespace

import pytest

from src.payroll_engine.payroll_engine.main import create_app


@pytest.fixture
def client(payroll_service, shift_resolver):
    container = SimpleNamespace(
        shift_resolver=shift_resolver,
        payroll_report_service=payroll_service,
    )
    app = create_app(settings=SimpleNamespace(LOG_LEVEL="WARNING", TESTING=True), container=container)
    return app.test_client()


def test_payroll_report_json(client):
    resp = client.get("/api/payroll/report?start=2025-03-03&end=2025-03-08")

    assert resp.status_code == 200
    data = resp.get_json()
    assert [item["employee_id"] for item in data["items"]] == ["e1", "e2"]
    assert data["items"][0]["net_payable_salary"] == "4000.00"
    assert {f["employee_id"] for f in data["failures"]} == {"e2", "e4"}


def test_payroll_report_csv_download(client):
    resp = client.get("/api/payroll/report?start=2025-03-03&end=2025-03-08&format=csv&employee_id=e1")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "payroll_20250303_20250308.csv" in resp.headers["Content-Disposition"]
    assert resp.data.decode("utf-8-sig").startswith("employee_id,employee_name")


def test_bad_date_is_a_client_error(client):
    resp = client.get("/api/payroll/report?start=03/03/2025&end=2025-03-08")

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


def test_inverted_period_is_a_client_error(client):
    resp = client.get("/api/attendance/e1?start=2025-03-08&end=2025-03-03")

    assert resp.status_code == 400


def test_attendance_history(client):
    resp = client.get("/api/attendance/e1?start=2025-03-03&end=2025-03-08")

    data = resp.get_json()
    assert len(data["rows"]) == 6
    assert data["summary"]["full_days"] == 5


def test_leave_balance(client):
    resp = client.get("/api/leaves/e1/balance?as_of=2025-03-08")

    data = resp.get_json()
    assert data["leave_year"] == {"start": "2024-11-01", "end": "2025-10-31"}
    assert data["extra"] == 1
    assert data["pending"] == 4


def test_shift_policy_defaults(client):
    resp = client.get("/api/shifts/e9?date=2025-03-03")

    data = resp.get_json()
    assert data["start_time"] == "09:00"
    assert data["end_time"] == "18:00"
    assert data["is_default"] is True
    assert data["weekly_off_days"] == [0]
