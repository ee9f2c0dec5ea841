from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from .attendance.classifier import DailyStatusClassifier
from .attendance.factory import AttendanceStrategyFactory
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_HALF_DAY_THRESHOLD_HOURS, DEFAULT_LATE_GRACE_MINUTES
from .core.enums import FetchStrategy
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .punches.mysql_punch_repository import MySQLPunchEventRepository
from .punches.repository import PunchEventRepository
from .reporting.fetchers import build_fetcher
from .reporting.service import AttendanceReportService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository
    punches_repo: PunchEventRepository

    attendance_report_service: AttendanceReportService
    clock: Callable[[], datetime] = now_local


def build_report_service(
    employees: EmployeeRepository,
    shifts: ShiftRepository,
    punches: PunchEventRepository,
    *,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    half_day_threshold_hours: float = DEFAULT_HALF_DAY_THRESHOLD_HOURS,
    fetch_strategy: str | FetchStrategy = FetchStrategy.SEQUENTIAL,
    clock: Callable[[], datetime] = now_local,
) -> AttendanceReportService:
    classifier = DailyStatusClassifier(
        strategy_factory=AttendanceStrategyFactory(
            grace_minutes=int(grace_minutes),
            half_day_threshold_hours=float(half_day_threshold_hours),
        )
    )
    return AttendanceReportService(
        employees,
        shifts,
        punches,
        classifier=classifier,
        fetcher=build_fetcher(fetch_strategy, punches),
        clock=clock,
    )


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    shifts_repo = MySQLShiftRepository(conn)
    punches_repo = MySQLPunchEventRepository(conn)

    attendance_report_service = build_report_service(
        employees_repo,
        shifts_repo,
        punches_repo,
        grace_minutes=getattr(settings, "LATE_GRACE_MINUTES", DEFAULT_LATE_GRACE_MINUTES),
        half_day_threshold_hours=getattr(settings, "HALF_DAY_THRESHOLD_HOURS", DEFAULT_HALF_DAY_THRESHOLD_HOURS),
        fetch_strategy=getattr(settings, "PUNCH_FETCH_STRATEGY", FetchStrategy.SEQUENTIAL),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        punches_repo=punches_repo,
        attendance_report_service=attendance_report_service,
    )
