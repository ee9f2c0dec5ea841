from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Generic, Optional, Sequence, TypeVar

from ..attendance.model import CohortSummary, DailyAttendanceRecord, PeriodAttendanceReport
from ..common.validators import require_positive
from ..core.constants import DEFAULT_PAGE_SIZE, DEFAULT_SORT_BY, DEFAULT_SORT_ORDER
from ..employees.model import EmployeeFilter

RowT = TypeVar("RowT")


@dataclass(frozen=True)
class _CohortQuery:
    employee_id: Optional[int] = None
    emp_code: Optional[str] = None
    department_id: Optional[int] = None
    section_id: Optional[int] = None
    company_id: Optional[int] = None
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: Optional[str] = DEFAULT_SORT_BY
    sort_order: Optional[str] = DEFAULT_SORT_ORDER

    def employee_filter(self) -> EmployeeFilter:
        return EmployeeFilter(
            employee_id=self.employee_id,
            emp_code_contains=self.emp_code or None,
            department_id=self.department_id,
            section_id=self.section_id,
            company_id=self.company_id,
        )


@dataclass(frozen=True)
class DailyReportQuery(_CohortQuery):
    report_date: Optional[date] = None
    # Post-classification filters, applied per day record.
    status: Optional[str] = None
    is_late: Optional[bool] = None
    is_early_leave: Optional[bool] = None


@dataclass(frozen=True)
class PeriodReportQuery(_CohortQuery):
    """Range query. Missing dates default to the last 30 days (service clock)."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None


@dataclass(frozen=True)
class ReportPage(Generic[RowT]):
    rows: list[RowT]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    start_date: date
    end_date: date
    summary: CohortSummary


def matches_daily_filters(record: DailyAttendanceRecord, query: DailyReportQuery) -> bool:
    """Post-classification filters that the directory cannot resolve."""

    if query.status and record.status != query.status:
        return False
    if query.is_late is not None and record.is_late != query.is_late:
        return False
    if query.is_early_leave is not None and record.is_early_leave != query.is_early_leave:
        return False
    return True


def _check_in_key(r: DailyAttendanceRecord):
    # Unset check-in sorts before any time when ascending.
    return (r.check_in_time is not None, r.check_in_time or datetime.min)


DAILY_SORT_KEYS: dict[str, Callable[[DailyAttendanceRecord], object]] = {
    "employeename": lambda r: r.employee_name.casefold(),
    "departmentname": lambda r: r.department_name.casefold(),
    "attendancestatus": lambda r: r.status.value,
    "checkintime": _check_in_key,
}

PERIOD_SORT_KEYS: dict[str, Callable[[PeriodAttendanceReport], object]] = {
    "employeename": lambda r: r.employee_name.casefold(),
    "departmentname": lambda r: r.department_name.casefold(),
    "attendancepercentage": lambda r: r.attendance_percentage,
    "presentdays": lambda r: r.present_days,
}


def sort_rows(
    rows: Sequence[RowT],
    keys: dict[str, Callable[[RowT], object]],
    sort_by: Optional[str],
    sort_order: Optional[str],
) -> list[RowT]:
    """Stable sort by a named key; unknown keys fall back to employee name ascending."""

    key = keys.get((sort_by or "").lower())
    if key is None:
        return sorted(rows, key=keys["employeename"])
    descending = (sort_order or "").lower() == "desc"
    return sorted(rows, key=key, reverse=descending)


def sort_daily(rows: Sequence[DailyAttendanceRecord], sort_by: Optional[str], sort_order: Optional[str]):
    return sort_rows(rows, DAILY_SORT_KEYS, sort_by, sort_order)


def sort_period(rows: Sequence[PeriodAttendanceReport], sort_by: Optional[str], sort_order: Optional[str]):
    return sort_rows(rows, PERIOD_SORT_KEYS, sort_by, sort_order)


def paginate(rows: Sequence[RowT], page: int, page_size: int) -> tuple[list[RowT], int]:
    """Return (page rows, total pages) for a 1-based page."""

    page = require_positive(page, "page")
    page_size = require_positive(page_size, "page_size")
    skip = (page - 1) * page_size
    return list(rows[skip : skip + page_size]), math.ceil(len(rows) / page_size)
