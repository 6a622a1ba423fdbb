from __future__ import annotations

from datetime import date, datetime, time

from src.hr_attendance.hr_attendance.attendance.classifier import classify_day
from src.hr_attendance.hr_attendance.attendance.model import Adjustment, AttendanceEvent
from src.hr_attendance.hr_attendance.core.enums import (
    AdjustmentKind,
    DayStatus,
    EmployeeStatus,
    EventKind,
    LeaveStatus,
)
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.leaves.model import LeaveGrant
from src.hr_attendance.hr_attendance.policy.model import HRPolicy, Holiday
from src.hr_attendance.hr_attendance.policy.resolver import resolve_policy

TUESDAY = date(2026, 3, 3)
WEDNESDAY = date(2026, 3, 4)
SATURDAY = date(2026, 3, 7)


def _ctx(holidays=()):
    policy = HRPolicy(work_start=time(8, 0), absent_cutoff=time(9, 0), grace_minutes=10)
    return resolve_policy(policy, holidays)


def _ev(kind: EventKind, day: date, hh: int, mm: int) -> AttendanceEvent:
    return AttendanceEvent(employee_id="u1", kind=kind, timestamp=datetime.combine(day, time(hh, mm)))


def _leave(start: date, end: date, status=LeaveStatus.APPROVED) -> LeaveGrant:
    return LeaveGrant(employee_id="u1", leave_type="SICK", start_date=start, end_date=end, status=status)


def test_late_after_grace_counts_minutes_past_grace():
    events = [_ev(EventKind.IN, TUESDAY, 8, 15), _ev(EventKind.OUT, TUESDAY, 17, 0)]

    result = classify_day(TUESDAY, events, _ctx())

    assert result.status == DayStatus.LATE
    assert result.late_minutes == 5


def test_holiday_wins_over_late_arrival():
    events = [_ev(EventKind.IN, WEDNESDAY, 8, 25), _ev(EventKind.OUT, WEDNESDAY, 17, 0)]

    result = classify_day(WEDNESDAY, events, _ctx([Holiday(WEDNESDAY, "Company day")]))

    assert result.status == DayStatus.HOLIDAY
    assert result.holiday_name == "Company day"
    assert result.late_minutes is None
    assert result.worked_minutes is None


def test_holiday_on_weekend_is_holiday():
    result = classify_day(SATURDAY, [], _ctx([Holiday(SATURDAY, "New year")]))
    assert result.status == DayStatus.HOLIDAY


def test_leave_on_weekend_is_weekend():
    result = classify_day(SATURDAY, [], _ctx(), leaves=[_leave(date(2026, 3, 6), date(2026, 3, 9))])

    assert result.status == DayStatus.WEEKEND
    assert result.late_minutes is None


def test_approved_leave_carries_type():
    result = classify_day(TUESDAY, [], _ctx(), leaves=[_leave(TUESDAY, TUESDAY)])

    assert result.status == DayStatus.LEAVE
    assert result.leave_type == "SICK"


def test_pending_leave_is_ignored():
    result = classify_day(TUESDAY, [], _ctx(), leaves=[_leave(TUESDAY, TUESDAY, status=LeaveStatus.PENDING)])
    assert result.status == DayStatus.ABSENT


def test_open_clock_in_needs_review():
    result = classify_day(TUESDAY, [_ev(EventKind.IN, TUESDAY, 9, 0)], _ctx())

    assert result.status == DayStatus.NO_DATA
    assert result.review_needed is True
    assert result.first_in == datetime(2026, 3, 3, 9, 0)


def test_early_arrival_is_not_negative_lateness():
    events = [_ev(EventKind.IN, TUESDAY, 7, 30), _ev(EventKind.OUT, TUESDAY, 17, 0)]

    result = classify_day(TUESDAY, events, _ctx())

    assert result.status == DayStatus.PRESENT
    assert result.late_minutes == 0


def test_arrival_exactly_at_grace_is_present():
    events = [_ev(EventKind.IN, TUESDAY, 8, 10), _ev(EventKind.OUT, TUESDAY, 17, 0)]
    assert classify_day(TUESDAY, events, _ctx()).status == DayStatus.PRESENT


def test_forgive_late_zeroes_lateness():
    events = [_ev(EventKind.IN, TUESDAY, 11, 45), _ev(EventKind.OUT, TUESDAY, 17, 0)]
    adj = Adjustment(employee_id="u1", work_date=TUESDAY, kind=AdjustmentKind.FORGIVE_LATE)

    result = classify_day(TUESDAY, events, _ctx(), adjustment=adj)

    assert result.status == DayStatus.PRESENT
    assert result.late_minutes == 0
    assert result.adjustment is adj


def test_reentries_collapse_to_first_in_and_last_out():
    events = [
        _ev(EventKind.OUT, TUESDAY, 17, 0),
        _ev(EventKind.IN, TUESDAY, 13, 0),
        _ev(EventKind.IN, TUESDAY, 8, 0),
        _ev(EventKind.OUT, TUESDAY, 12, 0),
    ]

    result = classify_day(TUESDAY, events, _ctx())

    assert result.first_in == datetime(2026, 3, 3, 8, 0)
    assert result.last_out == datetime(2026, 3, 3, 17, 0)
    assert result.worked_minutes == 9 * 60
    assert result.work_hours == "9h 0m"


def test_add_record_overrides_only_the_side_it_supplies():
    events = [_ev(EventKind.IN, TUESDAY, 8, 40)]
    adj = Adjustment(
        employee_id="u1",
        work_date=TUESDAY,
        kind=AdjustmentKind.ADD_RECORD,
        adjusted_out=datetime(2026, 3, 3, 17, 30),
    )

    result = classify_day(TUESDAY, events, _ctx(), adjustment=adj)

    assert result.status == DayStatus.LATE
    assert result.late_minutes == 30
    assert result.first_in == datetime(2026, 3, 3, 8, 40)
    assert result.last_out == datetime(2026, 3, 3, 17, 30)


def test_add_record_replaces_raw_clock_in():
    events = [_ev(EventKind.IN, TUESDAY, 9, 30), _ev(EventKind.OUT, TUESDAY, 17, 0)]
    adj = Adjustment(
        employee_id="u1",
        work_date=TUESDAY,
        kind=AdjustmentKind.ADD_RECORD,
        adjusted_in=datetime(2026, 3, 3, 8, 0),
    )

    result = classify_day(TUESDAY, events, _ctx(), adjustment=adj)

    assert result.status == DayStatus.PRESENT
    assert result.first_in == datetime(2026, 3, 3, 8, 0)


def test_event_without_timestamp_is_ignored():
    events = [
        AttendanceEvent(employee_id="u1", kind=EventKind.IN, timestamp=None),
        _ev(EventKind.OUT, TUESDAY, 17, 0),
    ]

    result = classify_day(TUESDAY, events, _ctx())

    assert result.status == DayStatus.ABSENT


def test_classifier_is_idempotent():
    events = [_ev(EventKind.IN, TUESDAY, 8, 15), _ev(EventKind.OUT, TUESDAY, 17, 0)]
    ctx = _ctx()

    assert classify_day(TUESDAY, events, ctx) == classify_day(TUESDAY, events, ctx)


def test_employment_window_statuses_come_first():
    ctx = _ctx([Holiday(TUESDAY, "Holiday")])
    newcomer = Employee(employee_id="u1", display_name="A", start_date=date(2026, 3, 10))
    leaver = Employee(employee_id="u1", display_name="A", end_date=date(2026, 3, 1))
    suspended = Employee(employee_id="u1", display_name="A", status=EmployeeStatus.SUSPENDED)

    assert classify_day(TUESDAY, [], ctx, today=date(2026, 3, 2)).status == DayStatus.FUTURE
    assert classify_day(TUESDAY, [], ctx, employee=newcomer).status == DayStatus.NOT_STARTED
    assert classify_day(TUESDAY, [], ctx, employee=leaver).status == DayStatus.ENDED
    assert classify_day(WEDNESDAY, [], ctx, employee=suspended).status == DayStatus.SUSPENDED
