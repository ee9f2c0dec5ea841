"""Daily Status Classifier.

Turns the raw punches of one employee for one calendar date into a single
:class:`DailyAttendanceRecord`. Pure: no clock, no I/O, never raises for odd
input such as an OUT punch earlier than the first IN.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..core.enums import DailyStatus, PunchDirection
from ..employees.model import Employee
from ..punches.model import PunchEvent
from ..shifts.model import Shift
from .factory import AttendanceStrategyFactory
from .model import DailyAttendanceRecord
from .strategies.base import PunchWindow


def extract_window(events: Iterable[PunchEvent]) -> PunchWindow:
    """Earliest IN and latest OUT; arrival order of the events does not matter."""

    check_ins = [e.timestamp for e in events if e.direction == PunchDirection.IN]
    check_outs = [e.timestamp for e in events if e.direction == PunchDirection.OUT]
    return PunchWindow(
        check_in=min(check_ins) if check_ins else None,
        check_out=max(check_outs) if check_outs else None,
    )


class DailyStatusClassifier:
    def __init__(self, *, strategy_factory: Optional[AttendanceStrategyFactory] = None):
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def classify(
        self,
        employee: Employee,
        events: Iterable[PunchEvent],
        shift: Optional[Shift],
        work_date: date,
    ) -> DailyAttendanceRecord:
        events = list(events)
        identity = dict(
            employee_id=employee.employee_id,
            emp_code=employee.emp_code,
            employee_name=employee.name,
            employee_name_bangla=employee.name_bangla,
            department_name=employee.department_name,
            section_name=employee.section_name,
            designation_name=employee.designation_name,
            shift_name=shift.shift_name if shift else employee.shift_name,
            report_date=work_date,
        )

        if not events:
            return DailyAttendanceRecord(status=DailyStatus.ABSENT, **identity)

        window = extract_window(events)
        decision = self._factory.for_shift(shift).decide(window, shift)

        return DailyAttendanceRecord(
            status=decision.status,
            check_in_time=window.check_in,
            check_out_time=window.check_out,
            work_duration=window.work_duration,
            is_late=decision.is_late,
            late_by=decision.late_by,
            is_early_leave=decision.is_early_leave,
            early_by=decision.early_by,
            **identity,
        )


_default_classifier = DailyStatusClassifier()


def classify_day(
    employee: Employee,
    events: Iterable[PunchEvent],
    shift: Optional[Shift],
    work_date: date,
) -> DailyAttendanceRecord:
    """Classify one day with the default 15 minute grace and 4 hour half-day rules."""
    return _default_classifier.classify(employee, events, shift, work_date)
