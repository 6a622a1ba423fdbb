from __future__ import annotations

from datetime import date, datetime, time

from src.hr_attendance.hr_attendance.attendance.classifier import classify_day
from src.hr_attendance.hr_attendance.attendance.model import Adjustment, AttendanceEvent
from src.hr_attendance.hr_attendance.core.enums import AdjustmentKind, DayStatus, EventKind, LeaveStatus
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.leaves.model import LeaveGrant
from src.hr_attendance.hr_attendance.payroll.workdays import count_paid_working_days, is_paid_working_day
from src.hr_attendance.hr_attendance.policy.model import HRPolicy, Holiday
from src.hr_attendance.hr_attendance.policy.resolver import resolve_policy

TUESDAY = date(2026, 3, 3)


def _ctx(holidays=()):
    return resolve_policy(HRPolicy(work_start=time(8, 0), absent_cutoff=time(9, 0), grace_minutes=10), holidays)


def _in(day: date, hh: int, mm: int) -> AttendanceEvent:
    return AttendanceEvent("u1", EventKind.IN, datetime.combine(day, time(hh, mm)))


def _out(day: date, hh: int, mm: int) -> AttendanceEvent:
    return AttendanceEvent("u1", EventKind.OUT, datetime.combine(day, time(hh, mm)))


def test_clock_in_after_cutoff_is_not_paid_even_if_only_late():
    ctx = _ctx()
    events = [_in(TUESDAY, 9, 5), _out(TUESDAY, 17, 0)]

    assert classify_day(TUESDAY, events, ctx).status == DayStatus.LATE
    assert is_paid_working_day(TUESDAY, ctx, events=events) is False


def test_clock_in_at_cutoff_is_paid():
    assert is_paid_working_day(TUESDAY, _ctx(), events=[_in(TUESDAY, 9, 0)]) is True


def test_open_clock_in_before_cutoff_is_paid():
    # Payroll only looks at the first clock-in; a missing OUT is a summary concern.
    assert is_paid_working_day(TUESDAY, _ctx(), events=[_in(TUESDAY, 8, 30)]) is True


def test_add_record_clock_in_moves_day_under_cutoff():
    adj = Adjustment("u1", TUESDAY, AdjustmentKind.ADD_RECORD, adjusted_in=datetime(2026, 3, 3, 8, 0))
    assert is_paid_working_day(TUESDAY, _ctx(), events=[_in(TUESDAY, 10, 0)], adjustment=adj) is True


def test_holiday_weekend_leave_and_future_are_excluded():
    ctx = _ctx([Holiday(TUESDAY, "Holiday")])
    wednesday = date(2026, 3, 4)
    saturday = date(2026, 3, 7)
    leave = LeaveGrant("u1", "BUSINESS", wednesday, wednesday, LeaveStatus.APPROVED)

    assert is_paid_working_day(TUESDAY, ctx, events=[_in(TUESDAY, 8, 0)]) is False
    assert is_paid_working_day(saturday, ctx, events=[_in(saturday, 8, 0)]) is False
    assert is_paid_working_day(wednesday, ctx, events=[_in(wednesday, 8, 0)], leaves=[leave]) is False
    assert is_paid_working_day(wednesday, ctx, events=[_in(wednesday, 8, 0)], today=TUESDAY) is False


def test_count_over_period():
    ctx = _ctx()
    events = [
        _in(date(2026, 3, 2), 8, 0),
        _in(date(2026, 3, 3), 8, 55),
        _in(date(2026, 3, 4), 9, 30),
        _in(date(2026, 3, 7), 8, 0),
        AttendanceEvent("u1", EventKind.IN, None),
    ]
    employee = Employee(employee_id="u1", display_name="A", end_date=date(2026, 3, 2))

    assert count_paid_working_days(start=date(2026, 3, 1), end=date(2026, 3, 8), ctx=ctx, events=events) == 2
    assert (
        count_paid_working_days(
            start=date(2026, 3, 1), end=date(2026, 3, 8), ctx=ctx, events=events, employee=employee
        )
        == 1
    )
