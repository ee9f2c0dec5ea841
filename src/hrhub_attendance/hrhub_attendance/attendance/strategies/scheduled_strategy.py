from __future__ import annotations

from datetime import timedelta
from typing import Optional

from ...core.constants import DEFAULT_HALF_DAY_THRESHOLD_HOURS, DEFAULT_LATE_GRACE_MINUTES
from ...core.enums import DailyStatus
from ...shifts.model import Shift
from .base import DayStatusStrategy, PunchWindow, StatusDecision


class ScheduledStrategy(DayStatusStrategy):
    """Shift assigned: short days become half days, grace window decides late/early.

    Shift start/end are anchored on the date of the punch they are compared with.
    """

    def __init__(
        self,
        *,
        grace: timedelta = timedelta(minutes=DEFAULT_LATE_GRACE_MINUTES),
        half_day_threshold: timedelta = timedelta(hours=DEFAULT_HALF_DAY_THRESHOLD_HOURS),
    ):
        self._grace = grace
        self._half_day_threshold = half_day_threshold

    def decide(self, window: PunchWindow, shift: Optional[Shift]) -> StatusDecision:
        if shift is None:
            raise ValueError("ScheduledStrategy requires a shift")

        duration = window.work_duration
        if duration is not None:
            status = DailyStatus.HALF_DAY if duration < self._half_day_threshold else DailyStatus.PRESENT
        elif window.check_in is not None:
            status = DailyStatus.HALF_DAY
        else:
            status = DailyStatus.ABSENT

        is_late = False
        late_by = None
        if window.check_in is not None:
            shift_start = shift.start_on(window.check_in.date())
            if window.check_in > shift_start + self._grace:
                is_late = True
                late_by = window.check_in - shift_start

        is_early_leave = False
        early_by = None
        if window.check_out is not None:
            shift_end = shift.end_on(window.check_out.date())
            if window.check_out < shift_end - self._grace:
                is_early_leave = True
                early_by = shift_end - window.check_out

        return StatusDecision(
            status=status,
            is_late=is_late,
            late_by=late_by,
            is_early_leave=is_early_leave,
            early_by=early_by,
        )
