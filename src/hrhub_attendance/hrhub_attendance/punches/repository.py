from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import PunchEvent


class PunchEventRepository(Protocol):
    def list_for_employee(self, employee_code: str, start: datetime, end: datetime) -> Sequence[PunchEvent]:
        """Events of one employee with start <= timestamp < end."""

        raise NotImplementedError

    def list_between(
        self,
        start: datetime,
        end: datetime,
        *,
        employee_code: Optional[str] = None,
    ) -> Sequence[PunchEvent]:
        """Events with start <= timestamp < end, optionally for one employee."""

        raise NotImplementedError
