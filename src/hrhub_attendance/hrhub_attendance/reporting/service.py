from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Sequence, TypeVar

from ..attendance.classifier import DailyStatusClassifier
from ..attendance.log_summary import summarize_logs
from ..attendance.model import (
    AttendanceLogSummary,
    CohortSummary,
    DailyAttendanceRecord,
    PeriodAttendanceReport,
)
from ..attendance.period import PeriodAggregator
from ..attendance.summary import summarize_daily_records, summarize_period_reports, summarize_range
from ..common.datetime_utils import day_bounds, now_local
from ..common.validators import require_date_range, require_positive
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import UpstreamFailure
from ..employees.model import Employee, EmployeeFilter
from ..employees.repository import EmployeeRepository
from ..export.flat_text import export_to_flat_text
from ..punches.repository import PunchEventRepository
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from .fetchers import PunchFetcher, SequentialPunchFetcher
from .query import (
    DailyReportQuery,
    PeriodReportQuery,
    ReportPage,
    matches_daily_filters,
    paginate,
    sort_daily,
    sort_period,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AttendanceReportService:
    """Cohort Reporter: attendance for a set of employees over a date or a range.

    Employees are processed one after another. Any collaborator failure is
    logged and re-raised as UpstreamFailure, aborting the whole report.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        punches: PunchEventRepository,
        *,
        classifier: Optional[DailyStatusClassifier] = None,
        fetcher: Optional[PunchFetcher] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employees = employees
        self._shifts = shifts
        self._punches = punches
        self._classifier = classifier or DailyStatusClassifier()
        self._aggregator = PeriodAggregator(self._classifier)
        self._fetcher = fetcher or SequentialPunchFetcher(punches)
        self._clock = clock

    # ----- collaborators -----

    def _upstream(self, what: str, fn: Callable[..., T], *args, **kwargs) -> T:
        try:
            return fn(*args, **kwargs)
        except Exception as exc:
            logger.error("Error %s", what, exc_info=True)
            raise UpstreamFailure(f"Error {what}") from exc

    def _list_employees(self, criteria: EmployeeFilter) -> Sequence[Employee]:
        return self._upstream("listing employees", self._employees.list_active, criteria)

    def _shift_resolver(self) -> Callable[[Employee], Optional[Shift]]:
        """Per-request shift lookup, one repository call per distinct shift id."""

        cache: dict[int, Optional[Shift]] = {}

        def resolve(employee: Employee) -> Optional[Shift]:
            if employee.shift_id is None:
                return None
            if employee.shift_id not in cache:
                cache[employee.shift_id] = self._upstream(
                    f"loading shift {employee.shift_id}", self._shifts.get_by_id, employee.shift_id
                )
            return cache[employee.shift_id]

        return resolve

    def _daily_records(
        self,
        employee: Employee,
        shift: Optional[Shift],
        start: date,
        end: date,
    ) -> dict[date, DailyAttendanceRecord]:
        events = self._upstream(
            f"loading punches for employee {employee.emp_code} ({start} - {end})",
            self._fetcher.fetch,
            employee,
            start,
            end,
        )
        return {day: self._classifier.classify(employee, day_events, shift, day) for day, day_events in events.items()}

    def _period_for(self, employee: Employee, shift: Optional[Shift], start: date, end: date) -> PeriodAttendanceReport:
        events = self._upstream(
            f"loading punches for employee {employee.emp_code} ({start} - {end})",
            self._fetcher.fetch,
            employee,
            start,
            end,
        )
        return self._aggregator.build(employee, shift, start, end, events)

    def _default_range(self, start: Optional[date], end: Optional[date]) -> tuple[date, date]:
        today = self._clock().date()
        return (
            start or today - timedelta(days=DEFAULT_REPORT_DAYS),
            end or today,
        )

    # ----- daily -----

    def daily_report(self, query: DailyReportQuery) -> ReportPage[DailyAttendanceRecord]:
        page = require_positive(query.page, "page")
        page_size = require_positive(query.page_size, "page_size")
        report_date = query.report_date or self._clock().date()

        shift_for = self._shift_resolver()
        records = []
        for employee in self._list_employees(query.employee_filter()):
            record = self._daily_records(employee, shift_for(employee), report_date, report_date)[report_date]
            if matches_daily_filters(record, query):
                records.append(record)

        records = sort_daily(records, query.sort_by, query.sort_order)
        rows, total_pages = paginate(records, page, page_size)

        return ReportPage(
            rows=rows,
            total_count=len(records),
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            start_date=report_date,
            end_date=report_date,
            summary=summarize_daily_records(records, report_date, report_date),
        )

    def daily_report_for_all(self, report_date: date, company_id: Optional[int] = None) -> list[DailyAttendanceRecord]:
        """Unfiltered, unsorted daily records of every active employee."""

        shift_for = self._shift_resolver()
        return [
            self._daily_records(employee, shift_for(employee), report_date, report_date)[report_date]
            for employee in self._list_employees(EmployeeFilter(company_id=company_id))
        ]

    # ----- period -----

    def period_report(self, query: PeriodReportQuery) -> ReportPage[PeriodAttendanceReport]:
        page = require_positive(query.page, "page")
        page_size = require_positive(query.page_size, "page_size")
        start, end = require_date_range(*self._default_range(query.start_date, query.end_date))

        shift_for = self._shift_resolver()
        reports = [
            self._period_for(employee, shift_for(employee), start, end)
            for employee in self._list_employees(query.employee_filter())
        ]

        reports = sort_period(reports, query.sort_by, query.sort_order)
        rows, total_pages = paginate(reports, page, page_size)

        return ReportPage(
            rows=rows,
            total_count=len(reports),
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            start_date=start,
            end_date=end,
            summary=summarize_period_reports(reports, start, end),
        )

    def period_report_for_employee(self, employee_id: int, start: date, end: date) -> Optional[PeriodAttendanceReport]:
        """None when the employee does not exist or is inactive."""

        require_date_range(start, end)
        employee = self._upstream(
            f"loading employee {employee_id}", self._employees.get_active_by_id, int(employee_id)
        )
        if employee is None:
            return None
        return self._period_for(employee, self._shift_resolver()(employee), start, end)

    # ----- organization summary & raw logs -----

    def attendance_summary(self, start: date, end: date, company_id: Optional[int] = None) -> CohortSummary:
        require_date_range(start, end)

        employees = self._list_employees(EmployeeFilter(company_id=company_id))
        shift_for = self._shift_resolver()

        by_date: dict[date, list[DailyAttendanceRecord]] = {}
        for employee in employees:
            for day, record in self._daily_records(employee, shift_for(employee), start, end).items():
                by_date.setdefault(day, []).append(record)

        return summarize_range(len(employees), by_date, start, end)

    def log_summary(self, start: date, end: date, employee_code: Optional[str] = None) -> list[AttendanceLogSummary]:
        require_date_range(start, end)
        range_start, _ = day_bounds(start)
        _, range_end = day_bounds(end)

        events = self._upstream(
            "loading attendance log summary",
            self._punches.list_between,
            range_start,
            range_end,
            employee_code=employee_code or None,
        )
        return summarize_logs(events)

    # ----- export -----

    def export_daily_report(self, query: DailyReportQuery) -> bytes:
        report = self.daily_report(query)
        return export_to_flat_text(report.rows, "Daily Attendance Report", generated_at=self._clock())

    def export_period_report(self, query: PeriodReportQuery) -> bytes:
        report = self.period_report(query)
        return export_to_flat_text(report.rows, "Employee Attendance Report", generated_at=self._clock())
