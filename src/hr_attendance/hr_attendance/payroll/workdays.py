from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.clock import (
    effective_clock,
    group_adjustments_by_day,
    group_events_by_day,
    resolve_adjustment,
)
from ..attendance.model import Adjustment, AttendanceEvent
from ..common.datetime_utils import each_day
from ..employees.model import Employee
from ..leaves.model import LeaveGrant, find_approved_leave
from ..policy.resolver import PolicyContext


def is_paid_working_day(
    day: date,
    ctx: PolicyContext,
    *,
    events: Sequence[AttendanceEvent],
    adjustment: Optional[Adjustment] = None,
    leaves: Sequence[LeaveGrant] = (),
    employee: Optional[Employee] = None,
    today: Optional[date] = None,
) -> bool:
    """Payroll eligibility uses the absentee cutoff, not the grace-adjusted work start."""

    if today and day > today:
        return False
    if employee and not employee.is_employed_on(day):
        return False
    if ctx.is_holiday(day) or ctx.is_weekend(day):
        return False
    if find_approved_leave(leaves, day):
        return False

    first_in = effective_clock(events, adjustment, ctx).first_in
    if first_in is None:
        return False
    return first_in <= ctx.absent_cutoff(day)


def count_paid_working_days(
    *,
    start: date,
    end: date,
    ctx: PolicyContext,
    events: Iterable[AttendanceEvent],
    adjustments: Iterable[Adjustment] = (),
    leaves: Sequence[LeaveGrant] = (),
    employee: Optional[Employee] = None,
    today: Optional[date] = None,
) -> int:
    events_by_day = group_events_by_day(events, ctx)
    adjustments_by_day = group_adjustments_by_day(adjustments)

    count = 0
    for day in each_day(start, end):
        adjustment, _ = resolve_adjustment(adjustments_by_day.get(day, ()))
        if is_paid_working_day(
            day,
            ctx,
            events=events_by_day.get(day, ()),
            adjustment=adjustment,
            leaves=leaves,
            employee=employee,
            today=today,
        ):
            count += 1
    return count
