from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import PunchDirection
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PunchEvent
from .repository import PunchEventRepository


def _to_event(r: Dict[str, Any]) -> PunchEvent:
    return PunchEvent(
        employee_code=r["employee_id"],
        employee_name=r.get("employee_name") or "",
        timestamp=r["log_time"],
        direction=PunchDirection(str(r["log_type"]).strip().upper()),
    )


class MySQLPunchEventRepository(PunchEventRepository):
    """Reads device logs ingested into attendance_logs (IN/OUT rows only)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_code: str, start: datetime, end: datetime) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, employee_name, log_time, log_type
                FROM attendance_logs
                WHERE employee_id=%s AND log_time >= %s AND log_time < %s
                  AND log_type IN ('IN', 'OUT')
                ORDER BY log_time
                """,
                (employee_code, start, end),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def list_between(
        self,
        start: datetime,
        end: datetime,
        *,
        employee_code: Optional[str] = None,
    ) -> Sequence[PunchEvent]:
        clauses = ["log_time >= %s", "log_time < %s", "log_type IN ('IN', 'OUT')"]
        params: list[object] = [start, end]
        if employee_code:
            clauses.append("employee_id=%s")
            params.append(employee_code)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, employee_name, log_time, log_type
                FROM attendance_logs
                WHERE {where}
                ORDER BY log_time
                """,
                tuple(params),
            )
            return [_to_event(r) for r in fetchall(cur)]
