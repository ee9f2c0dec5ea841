from __future__ import annotations

import logging
from dataclasses import fields, is_dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_duration, parse_iso_date
from ..core.constants import DEFAULT_PAGE_SIZE, DEFAULT_SORT_BY, DEFAULT_SORT_ORDER
from ..core.exceptions import UpstreamFailure, ValidationError
from ..container import Container
from .query import DailyReportQuery, PeriodReportQuery

logger = logging.getLogger(__name__)

URL_PREFIX = "/api/attendance-report"


def to_json(value: Any) -> Any:
    """Convert report dataclasses into JSON-friendly structures."""

    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, timedelta):
        return format_duration(value)
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def _parse_date(value: Optional[str], field_name: str) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD") from None


def _parse_int(value: Optional[str], field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer") from None


def _parse_bool(value: Optional[str], field_name: str) -> Optional[bool]:
    if value is None or value == "":
        return None
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes"}:
        return True
    if lowered in {"0", "false", "no"}:
        return False
    raise ValidationError(f"{field_name} must be true or false")


def _int_or_default(value: Optional[str], field_name: str, default: int) -> int:
    parsed = _parse_int(value, field_name)
    return default if parsed is None else parsed


def _cohort_args() -> dict:
    args = request.args
    return dict(
        employee_id=_parse_int(args.get("employeeId"), "employeeId"),
        emp_code=args.get("empId") or None,
        department_id=_parse_int(args.get("departmentId"), "departmentId"),
        section_id=_parse_int(args.get("sectionId"), "sectionId"),
        company_id=_parse_int(args.get("companyId"), "companyId"),
        page=_int_or_default(args.get("page"), "page", 1),
        page_size=_int_or_default(args.get("pageSize"), "pageSize", DEFAULT_PAGE_SIZE),
        sort_by=args.get("sortBy") or DEFAULT_SORT_BY,
        sort_order=args.get("sortOrder") or DEFAULT_SORT_ORDER,
    )


def _daily_query() -> DailyReportQuery:
    args = request.args
    return DailyReportQuery(
        report_date=_parse_date(args.get("reportDate"), "reportDate"),
        status=args.get("attendanceStatus") or None,
        is_late=_parse_bool(args.get("isLate"), "isLate"),
        is_early_leave=_parse_bool(args.get("isEarlyLeave"), "isEarlyLeave"),
        **_cohort_args(),
    )


def _period_query() -> PeriodReportQuery:
    return PeriodReportQuery(
        start_date=_parse_date(request.args.get("startDate"), "startDate"),
        end_date=_parse_date(request.args.get("endDate"), "endDate"),
        **_cohort_args(),
    )


def _required_range() -> tuple[date, date]:
    start = _parse_date(request.args.get("startDate"), "startDate")
    end = _parse_date(request.args.get("endDate"), "endDate")
    if not start or not end:
        raise ValidationError("startDate and endDate are required")
    return start, end


def register(app: Flask, container: Container) -> None:
    reports = container.attendance_report_service

    def _csv(payload: bytes, filename: str):
        return app.response_class(
            payload,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return jsonify({"message": str(exc)}), 400

    @app.errorhandler(UpstreamFailure)
    def handle_upstream_failure(exc: UpstreamFailure):
        logger.error("Attendance report failed: %s", exc)
        return jsonify({"message": "Attendance data source unavailable"}), 502

    @app.route(f"{URL_PREFIX}/daily", methods=["GET"], endpoint="daily_attendance_report")
    def daily_attendance_report():
        page = reports.daily_report(_daily_query())
        return jsonify(to_json(page))

    @app.route(f"{URL_PREFIX}/daily/all-employees", methods=["GET"], endpoint="daily_attendance_all_employees")
    def daily_attendance_all_employees():
        report_date = _parse_date(request.args.get("reportDate"), "reportDate") or container.clock().date()
        company_id = _parse_int(request.args.get("companyId"), "companyId")
        return jsonify(to_json(reports.daily_report_for_all(report_date, company_id)))

    @app.route(f"{URL_PREFIX}/daily/export", methods=["GET"], endpoint="daily_attendance_export")
    def daily_attendance_export():
        query = _daily_query()
        payload = reports.export_daily_report(query)
        stamp = (query.report_date or container.clock().date()).strftime("%Y%m%d")
        return _csv(payload, f"daily_attendance_{stamp}.csv")

    @app.route(f"{URL_PREFIX}/employee", methods=["GET"], endpoint="employee_attendance_report")
    def employee_attendance_report():
        page = reports.period_report(_period_query())
        return jsonify(to_json(page))

    @app.route(f"{URL_PREFIX}/employee/<int:employee_id>", methods=["GET"], endpoint="employee_attendance_by_id")
    def employee_attendance_by_id(employee_id: int):
        start, end = _required_range()
        report = reports.period_report_for_employee(employee_id, start, end)
        if report is None:
            return jsonify({"message": f"Employee {employee_id} not found"}), 404
        return jsonify(to_json(report))

    @app.route(f"{URL_PREFIX}/employee/export", methods=["GET"], endpoint="employee_attendance_export")
    def employee_attendance_export():
        payload = reports.export_period_report(_period_query())
        stamp = container.clock().strftime("%Y%m%d")
        return _csv(payload, f"employee_attendance_{stamp}.csv")

    @app.route(f"{URL_PREFIX}/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary():
        start, end = _required_range()
        company_id = _parse_int(request.args.get("companyId"), "companyId")
        return jsonify(to_json(reports.attendance_summary(start, end, company_id)))

    @app.route(f"{URL_PREFIX}/log-summary", methods=["GET"], endpoint="attendance_log_summary")
    def attendance_log_summary():
        start, end = _required_range()
        employee_code = request.args.get("employeeId") or None
        return jsonify(to_json(reports.log_summary(start, end, employee_code)))
