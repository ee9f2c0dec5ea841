from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from ..core.constants import DEFAULT_HALF_DAY_THRESHOLD_HOURS, DEFAULT_LATE_GRACE_MINUTES
from ..shifts.model import Shift
from .strategies.base import DayStatusStrategy
from .strategies.scheduled_strategy import ScheduledStrategy
from .strategies.unscheduled_strategy import UnscheduledStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the day status strategy for an employee's shift."""

    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES
    half_day_threshold_hours: float = DEFAULT_HALF_DAY_THRESHOLD_HOURS
    _unscheduled: DayStatusStrategy = field(default_factory=UnscheduledStrategy, init=False, repr=False)

    def for_shift(self, shift: Optional[Shift]) -> DayStatusStrategy:
        if not shift:
            return self._unscheduled
        return ScheduledStrategy(
            grace=timedelta(minutes=self.grace_minutes),
            half_day_threshold=timedelta(hours=self.half_day_threshold_hours),
        )
