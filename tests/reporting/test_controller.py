from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

import pytest

from src.hrhub_attendance.hrhub_attendance.container import Container, build_report_service
from src.hrhub_attendance.hrhub_attendance.core.enums import PunchDirection
from src.hrhub_attendance.hrhub_attendance.employees.model import Employee, EmployeeFilter
from src.hrhub_attendance.hrhub_attendance.main import create_app
from src.hrhub_attendance.hrhub_attendance.punches.model import PunchEvent
from src.hrhub_attendance.hrhub_attendance.shifts.model import Shift
from tests.fakes import employee_matches

DAY = date(2024, 1, 2)


@dataclass
class InMemoryEmployees:
    employees: list[Employee]

    def list_active(self, criteria: EmployeeFilter):
        return [e for e in self.employees if employee_matches(criteria, e)]

    def get_active_by_id(self, employee_id: int) -> Optional[Employee]:
        return next((e for e in self.employees if e.employee_id == employee_id), None)


@dataclass
class InMemoryShifts:
    shifts: dict[int, Shift]

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self.shifts.get(shift_id)


@dataclass
class InMemoryPunches:
    events: list[PunchEvent]
    broken: bool = False

    def list_for_employee(self, employee_code: str, start: datetime, end: datetime):
        if self.broken:
            raise ConnectionError("log store unreachable")
        return [e for e in self.events if e.employee_code == employee_code and start <= e.timestamp < end]

    def list_between(self, start: datetime, end: datetime, *, employee_code: Optional[str] = None):
        return [
            e
            for e in self.events
            if start <= e.timestamp < end and (employee_code is None or e.employee_code == employee_code)
        ]


@pytest.fixture
def punches():
    return InMemoryPunches(
        [
            PunchEvent("E001", datetime.combine(DAY, time(9, 20)), PunchDirection.IN, "Ayesha Rahman"),
            PunchEvent("E001", datetime.combine(DAY, time(17, 5)), PunchDirection.OUT, "Ayesha Rahman"),
        ]
    )


@pytest.fixture
def client(monkeypatch, employee, day_shift, punches, fixed_now):
    monkeypatch.setenv("APP_ENV", "testing")
    employees = InMemoryEmployees([employee])
    shifts = InMemoryShifts({1: day_shift})
    service = build_report_service(employees, shifts, punches, clock=lambda: fixed_now)
    container = Container(
        conn=None,
        employees_repo=employees,
        shifts_repo=shifts,
        punches_repo=punches,
        attendance_report_service=service,
        clock=lambda: fixed_now,
    )
    app = create_app(container)
    return app.test_client()


def test_daily_report_json(client):
    resp = client.get("/api/attendance-report/daily?reportDate=2024-01-02")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["total_count"] == 1
    row = body["rows"][0]
    assert row["status"] == "Present"
    assert row["check_in_time"] == "2024-01-02T09:20:00"
    assert row["work_duration"] == "07:45:00"
    assert row["late_by"] == "00:20:00"
    assert row["is_late"] is True
    assert body["summary"]["overall_attendance_percentage"] == 100.0


def test_daily_report_rejects_bad_input(client):
    assert client.get("/api/attendance-report/daily?reportDate=02-01-2024").status_code == 400
    assert client.get("/api/attendance-report/daily?page=0").status_code == 400
    assert client.get("/api/attendance-report/daily?isLate=maybe").status_code == 400


def test_daily_all_employees(client):
    resp = client.get("/api/attendance-report/daily/all-employees?reportDate=2024-01-02")

    assert resp.status_code == 200
    assert [r["emp_code"] for r in resp.get_json()] == ["E001"]


def test_daily_export_is_csv_attachment(client):
    resp = client.get("/api/attendance-report/daily/export?reportDate=2024-01-02")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "daily_attendance_20240102.csv" in resp.headers["Content-Disposition"]
    assert resp.data.decode("utf-8").startswith("Report: Daily Attendance Report\n")


def test_employee_report_range(client):
    resp = client.get("/api/attendance-report/employee?startDate=2024-01-01&endDate=2024-01-07")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["rows"][0]["total_working_days"] == 5
    assert len(body["rows"][0]["daily_attendance"]) == 7
    assert body["summary"]["overall_attendance_percentage"] == pytest.approx(20.0)


def test_employee_report_reversed_range_is_400(client):
    resp = client.get("/api/attendance-report/employee?startDate=2024-01-07&endDate=2024-01-01")

    assert resp.status_code == 400


def test_employee_by_id(client):
    found = client.get("/api/attendance-report/employee/1?startDate=2024-01-02&endDate=2024-01-02")
    missing = client.get("/api/attendance-report/employee/42?startDate=2024-01-02&endDate=2024-01-02")
    no_range = client.get("/api/attendance-report/employee/1")

    assert found.status_code == 200
    assert found.get_json()["present_days"] == 1
    assert missing.status_code == 404
    assert no_range.status_code == 400


def test_employee_export(client):
    resp = client.get("/api/attendance-report/employee/export?startDate=2024-01-02&endDate=2024-01-02")

    assert resp.status_code == 200
    assert "employee_attendance_20240102.csv" in resp.headers["Content-Disposition"]


def test_summary_and_log_summary(client):
    summary = client.get("/api/attendance-report/summary?startDate=2024-01-02&endDate=2024-01-02")
    logs = client.get("/api/attendance-report/log-summary?startDate=2024-01-02&endDate=2024-01-02&employeeId=E001")

    assert summary.get_json()["present_employees"] == 1
    log_rows = logs.get_json()
    assert log_rows[0]["status"] == "Present"
    assert log_rows[0]["employee_name"] == "Ayesha Rahman"
    assert log_rows[0]["check_in_count"] == 1


def test_upstream_failure_is_502(client, punches):
    punches.broken = True

    resp = client.get("/api/attendance-report/daily?reportDate=2024-01-02")

    assert resp.status_code == 502


def test_day_filters_only_apply_to_daily_report(client):
    daily = client.get("/api/attendance-report/daily?reportDate=2024-01-02&attendanceStatus=Absent")
    period = client.get(
        "/api/attendance-report/employee?startDate=2024-01-02&endDate=2024-01-02&attendanceStatus=Absent"
    )

    assert daily.get_json()["total_count"] == 0
    assert period.get_json()["total_count"] == 1
