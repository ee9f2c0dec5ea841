from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..core.enums import DailyStatus, LogSummaryStatus
from ..punches.model import PunchEvent


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """Classification result for one employee on one calendar date.

    Field order is the column order of flat exports.
    """

    employee_id: int
    emp_code: str
    employee_name: str
    employee_name_bangla: Optional[str]
    department_name: str
    section_name: str
    designation_name: str
    shift_name: Optional[str]
    report_date: date
    status: DailyStatus
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    work_duration: Optional[timedelta] = None
    overtime: Optional[timedelta] = None
    remarks: Optional[str] = None
    is_late: bool = False
    is_early_leave: bool = False
    late_by: Optional[timedelta] = None
    early_by: Optional[timedelta] = None


@dataclass(frozen=True)
class PeriodAttendanceReport:
    """Aggregate of one employee's daily records over [start_date, end_date]."""

    employee_id: int
    emp_code: str
    employee_name: str
    employee_name_bangla: Optional[str]
    department_name: str
    section_name: str
    designation_name: str
    shift_name: Optional[str]
    start_date: date
    end_date: date
    total_working_days: int
    present_days: int
    absent_days: int
    late_days: int
    half_days: int
    total_work_duration: timedelta
    total_overtime: timedelta
    attendance_percentage: float
    daily_attendance: tuple[DailyAttendanceRecord, ...] = ()


@dataclass(frozen=True)
class CohortSummary:
    """Organization-level totals over every record matched by a report query."""

    total_employees: int = 0
    present_employees: int = 0
    absent_employees: int = 0
    late_employees: int = 0
    half_day_employees: int = 0
    overall_attendance_percentage: float = 0.0
    total_work_duration: timedelta = timedelta(0)
    total_overtime: timedelta = timedelta(0)
    total_working_days: int = 0


@dataclass(frozen=True)
class AttendanceLogSummary:
    """Raw per-day log digest with the coarse Present/Partial/Absent status."""

    employee_code: str
    employee_name: str
    date: date
    first_check_in: Optional[datetime]
    last_check_out: Optional[datetime]
    all_logs: tuple[PunchEvent, ...]
    total_work_time: Optional[timedelta]
    check_in_count: int
    check_out_count: int
    status: LogSummaryStatus
