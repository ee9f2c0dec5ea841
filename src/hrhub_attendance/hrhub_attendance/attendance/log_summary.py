from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable

from ..core.enums import LogSummaryStatus, PunchDirection
from ..punches.model import PunchEvent
from .classifier import extract_window
from .model import AttendanceLogSummary


def coarse_status(events: Iterable[PunchEvent]) -> LogSummaryStatus:
    """Present when both IN and OUT exist, Partial with only IN, Absent otherwise.

    Deliberately separate from the shift-aware daily classifier: no durations,
    no half days.
    """

    directions = {e.direction for e in events}
    has_in = PunchDirection.IN in directions
    has_out = PunchDirection.OUT in directions
    if has_in and has_out:
        return LogSummaryStatus.PRESENT
    if has_in:
        return LogSummaryStatus.PARTIAL
    return LogSummaryStatus.ABSENT


def summarize_logs(events: Iterable[PunchEvent]) -> list[AttendanceLogSummary]:
    """Group punches by (employee code, calendar date) and digest each group.

    Groups keep the order in which they first appear; events inside a group
    are sorted by time.
    """

    groups: dict[tuple[str, date], list[PunchEvent]] = defaultdict(list)
    for event in events:
        groups[(event.employee_code, event.timestamp.date())].append(event)

    summaries = []
    for (employee_code, day), items in groups.items():
        items.sort(key=lambda e: e.timestamp)
        window = extract_window(items)
        summaries.append(
            AttendanceLogSummary(
                employee_code=employee_code,
                employee_name=next((e.employee_name for e in items if e.employee_name), ""),
                date=day,
                first_check_in=window.check_in,
                last_check_out=window.check_out,
                all_logs=tuple(items),
                total_work_time=window.work_duration,
                check_in_count=sum(1 for e in items if e.direction == PunchDirection.IN),
                check_out_count=sum(1 for e in items if e.direction == PunchDirection.OUT),
                status=coarse_status(items),
            )
        )
    return summaries
