from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ...core.enums import DailyStatus
from ...shifts.model import Shift


@dataclass(frozen=True)
class PunchWindow:
    """First IN and last OUT of one day, as extracted from the raw punches."""

    check_in: Optional[datetime]
    check_out: Optional[datetime]

    @property
    def work_duration(self) -> Optional[timedelta]:
        if self.check_in is None or self.check_out is None:
            return None
        return self.check_out - self.check_in


@dataclass(frozen=True)
class StatusDecision:
    status: DailyStatus
    is_late: bool = False
    late_by: Optional[timedelta] = None
    is_early_leave: bool = False
    early_by: Optional[timedelta] = None


class DayStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how a punched day gets its status."""

    @abstractmethod
    def decide(self, window: PunchWindow, shift: Optional[Shift]) -> StatusDecision:
        raise NotImplementedError
