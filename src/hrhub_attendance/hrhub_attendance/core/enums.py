from __future__ import annotations

from enum import Enum


class PunchDirection(str, Enum):
    """Direction recorded by the device for a single punch."""

    IN = "IN"
    OUT = "OUT"


class DailyStatus(str, Enum):
    """Status of a classified attendance day.

    LATE is never produced by the daily classifier (lateness is a flag on the
    record). It is kept so report filters and day counts can refer to it.
    """

    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "Half Day"
    LATE = "Late"


class LogSummaryStatus(str, Enum):
    """Coarse status used by the raw log summary (IN/OUT presence only)."""

    PRESENT = "Present"
    PARTIAL = "Partial"
    ABSENT = "Absent"


class FetchStrategy(str, Enum):
    SEQUENTIAL = "sequential"
    BATCHED = "batched"
