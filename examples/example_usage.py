"""Example: call the report service directly, without Flask.

The controllers are a thin layer; everything below goes through the same
AttendanceReportService the HTTP endpoints use.
"""

import importlib
from datetime import date, timedelta

from config import get_settings_module

from src.hrhub_attendance.hrhub_attendance.container import build_container
from src.hrhub_attendance.hrhub_attendance.reporting.query import DailyReportQuery


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)
    reports = container.attendance_report_service

    today = date.today()
    page = reports.daily_report(DailyReportQuery(report_date=today, page_size=5))
    print(f"{page.total_count} employees, {page.summary.overall_attendance_percentage:.1f}% attended")
    for row in page.rows:
        print(row.emp_code, row.employee_name, row.status.value, row.check_in_time, row.check_out_time)

    summary = reports.attendance_summary(today - timedelta(days=6), today)
    print(summary)


if __name__ == "__main__":
    main()
