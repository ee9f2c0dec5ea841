from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import PunchDirection


@dataclass(frozen=True)
class PunchEvent:
    """One clock action captured by a device. Immutable once ingested."""

    employee_code: str
    timestamp: datetime
    direction: PunchDirection
    employee_name: str = ""
