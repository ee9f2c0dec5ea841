from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: the expected working window of an employee."""

    shift_id: int
    shift_name: str
    start_time: time
    end_time: time
    break_start: Optional[time] = None
    break_end: Optional[time] = None

    def start_on(self, work_date: date) -> datetime:
        return datetime.combine(work_date, self.start_time)

    def end_on(self, work_date: date) -> datetime:
        return datetime.combine(work_date, self.end_time)
