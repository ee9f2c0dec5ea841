from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.hrhub_attendance.hrhub_attendance.core.enums import PunchDirection
from src.hrhub_attendance.hrhub_attendance.employees.model import Employee
from src.hrhub_attendance.hrhub_attendance.punches.model import PunchEvent
from src.hrhub_attendance.hrhub_attendance.shifts.model import Shift


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 2, 18, 0, 0)


@pytest.fixture
def day_shift() -> Shift:
    return Shift(shift_id=1, shift_name="General", start_time=time(9, 0), end_time=time(17, 0))


@pytest.fixture
def employee() -> Employee:
    return Employee(
        employee_id=1,
        emp_code="E001",
        name="Ayesha Rahman",
        company_id=1,
        department_id=10,
        section_id=100,
        designation_id=1000,
        shift_id=1,
        department_name="Accounts",
        section_name="Payables",
        designation_name="Officer",
        shift_name="General",
    )


@pytest.fixture
def punch():
    """punch("E001", date, "09:20", "IN") -> PunchEvent."""

    def _make(emp_code: str, day: date, hhmm: str, direction: str) -> PunchEvent:
        parts = [int(p) for p in hhmm.split(":")]
        while len(parts) < 3:
            parts.append(0)
        return PunchEvent(
            employee_code=emp_code,
            timestamp=datetime.combine(day, time(*parts)),
            direction=PunchDirection(direction),
        )

    return _make
