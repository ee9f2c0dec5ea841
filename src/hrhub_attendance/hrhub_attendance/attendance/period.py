"""Period Aggregator: folds daily records of one employee into period totals."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import count_working_days, iter_dates
from ..common.validators import require_date_range
from ..core.enums import DailyStatus
from ..employees.model import Employee
from ..punches.model import PunchEvent
from ..shifts.model import Shift
from .classifier import DailyStatusClassifier
from .model import DailyAttendanceRecord, PeriodAttendanceReport


def count_status(records: Iterable[DailyAttendanceRecord], status: DailyStatus) -> int:
    return sum(1 for r in records if r.status == status)


def total_work(records: Iterable[DailyAttendanceRecord]) -> timedelta:
    return sum((r.work_duration for r in records if r.work_duration is not None), timedelta(0))


def total_overtime(records: Iterable[DailyAttendanceRecord]) -> timedelta:
    return sum((r.overtime for r in records if r.overtime is not None), timedelta(0))


def attendance_percentage(*, present_days: int, late_days: int, half_days: int, working_days: int) -> float:
    """(present + late + half) / working days * 100.

    Attended weekend days can push the raw ratio above 100, so it is capped.
    """

    if working_days <= 0:
        return 0.0
    return min((present_days + late_days + half_days) / working_days * 100, 100.0)


class PeriodAggregator:
    def __init__(self, classifier: Optional[DailyStatusClassifier] = None):
        self._classifier = classifier or DailyStatusClassifier()

    def build(
        self,
        employee: Employee,
        shift: Optional[Shift],
        start: date,
        end: date,
        events_by_date: Mapping[date, Sequence[PunchEvent]],
    ) -> PeriodAttendanceReport:
        require_date_range(start, end)

        daily = tuple(
            self._classifier.classify(employee, events_by_date.get(day, ()), shift, day)
            for day in iter_dates(start, end)
        )
        return fold_period(employee, shift, start, end, daily)


def fold_period(
    employee: Employee,
    shift: Optional[Shift],
    start: date,
    end: date,
    daily: Sequence[DailyAttendanceRecord],
) -> PeriodAttendanceReport:
    working_days = count_working_days(start, end)
    present_days = count_status(daily, DailyStatus.PRESENT)
    # Always 0: the classifier flags lateness instead of emitting LATE.
    late_days = count_status(daily, DailyStatus.LATE)
    half_days = count_status(daily, DailyStatus.HALF_DAY)

    return PeriodAttendanceReport(
        employee_id=employee.employee_id,
        emp_code=employee.emp_code,
        employee_name=employee.name,
        employee_name_bangla=employee.name_bangla,
        department_name=employee.department_name,
        section_name=employee.section_name,
        designation_name=employee.designation_name,
        shift_name=shift.shift_name if shift else employee.shift_name,
        start_date=start,
        end_date=end,
        total_working_days=working_days,
        present_days=present_days,
        absent_days=count_status(daily, DailyStatus.ABSENT),
        late_days=late_days,
        half_days=half_days,
        total_work_duration=total_work(daily),
        total_overtime=total_overtime(daily),
        attendance_percentage=attendance_percentage(
            present_days=present_days,
            late_days=late_days,
            half_days=half_days,
            working_days=working_days,
        ),
        daily_attendance=tuple(daily),
    )


_default_aggregator = PeriodAggregator()


def build_period_report(
    employee: Employee,
    shift: Optional[Shift],
    start: date,
    end: date,
    events_by_date: Mapping[date, Sequence[PunchEvent]],
) -> PeriodAttendanceReport:
    return _default_aggregator.build(employee, shift, start, end, events_by_date)
