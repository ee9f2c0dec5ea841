from __future__ import annotations

from typing import Optional

from ...core.enums import DailyStatus
from ...shifts.model import Shift
from .base import DayStatusStrategy, PunchWindow, StatusDecision


class UnscheduledStrategy(DayStatusStrategy):
    """No shift assigned: status from IN/OUT presence only, never late or early."""

    def decide(self, window: PunchWindow, shift: Optional[Shift]) -> StatusDecision:
        if window.check_in is not None and window.check_out is not None:
            return StatusDecision(status=DailyStatus.PRESENT)
        if window.check_in is not None:
            return StatusDecision(status=DailyStatus.HALF_DAY)
        return StatusDecision(status=DailyStatus.ABSENT)
