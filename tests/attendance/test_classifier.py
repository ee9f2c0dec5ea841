from __future__ import annotations

import itertools
from datetime import date, datetime, time, timedelta

import pytest

from src.hrhub_attendance.hrhub_attendance.attendance.classifier import (
    DailyStatusClassifier,
    classify_day,
    extract_window,
)
from src.hrhub_attendance.hrhub_attendance.attendance.factory import AttendanceStrategyFactory
from src.hrhub_attendance.hrhub_attendance.core.enums import DailyStatus

DAY = date(2024, 1, 2)


def test_late_arrival_is_still_present(employee, day_shift, punch):
    events = [punch("E001", DAY, "09:20", "IN"), punch("E001", DAY, "17:05", "OUT")]

    rec = classify_day(employee, events, day_shift, DAY)

    assert rec.status == DailyStatus.PRESENT
    assert rec.check_in_time == datetime(2024, 1, 2, 9, 20)
    assert rec.check_out_time == datetime(2024, 1, 2, 17, 5)
    assert rec.work_duration == timedelta(hours=7, minutes=45)
    assert rec.is_late is True
    assert rec.late_by == timedelta(minutes=20)
    assert rec.is_early_leave is False
    assert rec.early_by is None
    assert rec.overtime is None


@pytest.mark.parametrize("with_shift", [False, True])
def test_no_events_is_absent_with_nothing_set(employee, day_shift, with_shift):
    rec = classify_day(employee, [], day_shift if with_shift else None, DAY)

    assert rec.status == DailyStatus.ABSENT
    assert rec.check_in_time is None
    assert rec.check_out_time is None
    assert rec.work_duration is None
    assert rec.overtime is None
    assert rec.is_late is False and rec.late_by is None
    assert rec.is_early_leave is False and rec.early_by is None


def test_order_of_events_does_not_matter(employee, day_shift, punch):
    events = [
        punch("E001", DAY, "08:55", "IN"),
        punch("E001", DAY, "12:00", "OUT"),
        punch("E001", DAY, "13:00", "IN"),
        punch("E001", DAY, "17:30", "OUT"),
    ]

    results = {classify_day(employee, list(p), day_shift, DAY) for p in itertools.permutations(events)}

    assert len(results) == 1
    rec = results.pop()
    assert rec.check_in_time == datetime(2024, 1, 2, 8, 55)
    assert rec.check_out_time == datetime(2024, 1, 2, 17, 30)


def test_check_in_only_is_half_day(employee, day_shift, punch):
    rec = classify_day(employee, [punch("E001", DAY, "09:00", "IN")], day_shift, DAY)

    assert rec.status == DailyStatus.HALF_DAY
    assert rec.check_in_time == datetime(2024, 1, 2, 9, 0)
    assert rec.check_out_time is None
    assert rec.work_duration is None


def test_check_out_only_is_absent(employee, punch):
    rec = classify_day(employee, [punch("E001", DAY, "17:00", "OUT")], None, DAY)

    assert rec.status == DailyStatus.ABSENT
    assert rec.check_out_time == datetime(2024, 1, 2, 17, 0)


def test_grace_boundary_is_not_late(employee, day_shift, punch):
    on_edge = classify_day(employee, [punch("E001", DAY, "09:15:00", "IN")], day_shift, DAY)
    past_edge = classify_day(employee, [punch("E001", DAY, "09:15:01", "IN")], day_shift, DAY)

    assert on_edge.is_late is False
    assert on_edge.late_by is None
    assert past_edge.is_late is True
    assert past_edge.late_by == timedelta(minutes=15, seconds=1)


def test_short_day_with_shift_is_half_day(employee, day_shift, punch):
    events = [punch("E001", DAY, "09:00", "IN"), punch("E001", DAY, "12:30", "OUT")]

    rec = classify_day(employee, events, day_shift, DAY)

    assert rec.status == DailyStatus.HALF_DAY
    assert rec.work_duration == timedelta(hours=3, minutes=30)
    assert rec.is_early_leave is True
    assert rec.early_by == timedelta(hours=4, minutes=30)


def test_short_day_without_shift_stays_present(employee, punch):
    events = [punch("E001", DAY, "09:00", "IN"), punch("E001", DAY, "12:30", "OUT")]

    rec = classify_day(employee, events, None, DAY)

    assert rec.status == DailyStatus.PRESENT
    assert rec.is_late is False
    assert rec.is_early_leave is False


def test_exactly_four_hours_is_present(employee, day_shift, punch):
    events = [punch("E001", DAY, "09:00", "IN"), punch("E001", DAY, "13:00", "OUT")]

    rec = classify_day(employee, events, day_shift, DAY)

    assert rec.status == DailyStatus.PRESENT


def test_early_leave_boundary(employee, day_shift, punch):
    at_edge = classify_day(
        employee, [punch("E001", DAY, "09:00", "IN"), punch("E001", DAY, "16:45", "OUT")], day_shift, DAY
    )
    before_edge = classify_day(
        employee, [punch("E001", DAY, "09:00", "IN"), punch("E001", DAY, "16:44:59", "OUT")], day_shift, DAY
    )

    assert at_edge.is_early_leave is False
    assert before_edge.is_early_leave is True
    assert before_edge.early_by == timedelta(minutes=15, seconds=1)


def test_out_before_in_gives_negative_duration(employee, day_shift, punch):
    events = [punch("E001", DAY, "08:00", "OUT"), punch("E001", DAY, "10:00", "IN")]

    rec = classify_day(employee, events, day_shift, DAY)

    assert rec.work_duration == timedelta(hours=-2)
    assert rec.status == DailyStatus.HALF_DAY


def test_weekend_day_without_events_is_still_absent(employee, day_shift):
    saturday = date(2024, 1, 6)

    rec = classify_day(employee, [], day_shift, saturday)

    assert rec.status == DailyStatus.ABSENT
    assert rec.report_date == saturday


def test_classifier_honours_configured_grace(employee, day_shift, punch):
    classifier = DailyStatusClassifier(strategy_factory=AttendanceStrategyFactory(grace_minutes=5))

    rec = classifier.classify(employee, [punch("E001", DAY, "09:06", "IN")], day_shift, DAY)

    assert rec.is_late is True
    assert rec.late_by == timedelta(minutes=6)


def test_record_carries_employee_identity(employee, day_shift):
    rec = classify_day(employee, [], day_shift, DAY)

    assert rec.employee_id == 1
    assert rec.emp_code == "E001"
    assert rec.employee_name == "Ayesha Rahman"
    assert rec.department_name == "Accounts"
    assert rec.shift_name == "General"


def test_extract_window_takes_min_in_and_max_out(punch):
    window = extract_window(
        [punch("E001", DAY, "10:00", "IN"), punch("E001", DAY, "09:00", "IN"), punch("E001", DAY, "11:00", "OUT")]
    )

    assert window.check_in.time() == time(9, 0)
    assert window.check_out.time() == time(11, 0)
    assert window.work_duration == timedelta(hours=2)


def test_late_by_counts_from_shift_start_not_from_grace_end(employee, day_shift, punch):
    rec = classify_day(employee, [punch("E001", DAY, "09:20", "IN")], day_shift, DAY)

    assert rec.late_by == timedelta(minutes=20)
    assert rec.late_by != timedelta(minutes=5)
