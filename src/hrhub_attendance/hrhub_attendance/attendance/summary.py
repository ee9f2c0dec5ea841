"""Cohort summaries.

The daily and the period summaries use different attendance formulas on
purpose; keep them as separate functions.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Mapping, Sequence

from ..common.datetime_utils import count_working_days, iter_dates
from ..core.enums import DailyStatus
from .model import CohortSummary, DailyAttendanceRecord, PeriodAttendanceReport
from .period import count_status, total_overtime, total_work


def summarize_daily_records(records: Sequence[DailyAttendanceRecord], start: date, end: date) -> CohortSummary:
    """Overall % is the share of records whose status is not Absent."""

    attended = sum(1 for r in records if r.status != DailyStatus.ABSENT)
    return CohortSummary(
        total_employees=len(records),
        present_employees=count_status(records, DailyStatus.PRESENT),
        absent_employees=count_status(records, DailyStatus.ABSENT),
        late_employees=count_status(records, DailyStatus.LATE),
        half_day_employees=count_status(records, DailyStatus.HALF_DAY),
        overall_attendance_percentage=attended / len(records) * 100 if records else 0.0,
        total_work_duration=total_work(records),
        total_overtime=total_overtime(records),
        total_working_days=count_working_days(start, end),
    )


def summarize_period_reports(reports: Sequence[PeriodAttendanceReport], start: date, end: date) -> CohortSummary:
    """Overall % is the mean of each employee's own attendance percentage."""

    return CohortSummary(
        total_employees=len(reports),
        present_employees=sum(r.present_days for r in reports),
        absent_employees=sum(r.absent_days for r in reports),
        late_employees=sum(r.late_days for r in reports),
        half_day_employees=sum(r.half_days for r in reports),
        overall_attendance_percentage=(
            sum(r.attendance_percentage for r in reports) / len(reports) if reports else 0.0
        ),
        total_work_duration=sum((r.total_work_duration for r in reports), timedelta(0)),
        total_overtime=sum((r.total_overtime for r in reports), timedelta(0)),
        total_working_days=count_working_days(start, end),
    )


def summarize_range(
    total_employees: int,
    records_by_date: Mapping[date, Sequence[DailyAttendanceRecord]],
    start: date,
    end: date,
) -> CohortSummary:
    """Organization-wide employee-day counts over every date of the range.

    Overall % = (present + late + half) / (employees * working days) * 100.
    """

    days = [records_by_date.get(d, ()) for d in iter_dates(start, end)]
    records = [r for day in days for r in day]
    working_days = count_working_days(start, end)

    present = count_status(records, DailyStatus.PRESENT)
    late = count_status(records, DailyStatus.LATE)
    half = count_status(records, DailyStatus.HALF_DAY)
    denominator = total_employees * working_days

    return CohortSummary(
        total_employees=total_employees,
        present_employees=present,
        absent_employees=count_status(records, DailyStatus.ABSENT),
        late_employees=late,
        half_day_employees=half,
        overall_attendance_percentage=(present + late + half) / denominator * 100 if denominator else 0.0,
        total_work_duration=total_work(records),
        total_overtime=total_overtime(records),
        total_working_days=working_days,
    )
