from __future__ import annotations

from typing import Optional

from ...core.enums import DayStatus
from ...leaves.model import find_approved_leave
from ...policy.resolver import PolicyContext
from ..model import DailyClassification
from .base import DayInputs, DayRule


class HolidayRule(DayRule):
    def evaluate(self, day: DayInputs, ctx: PolicyContext) -> Optional[DailyClassification]:
        if not ctx.is_holiday(day.work_date):
            return None
        return DailyClassification(
            work_date=day.work_date,
            status=DayStatus.HOLIDAY,
            holiday_name=ctx.holiday_name(day.work_date),
        )


class WeekendRule(DayRule):
    def evaluate(self, day: DayInputs, ctx: PolicyContext) -> Optional[DailyClassification]:
        if not ctx.is_weekend(day.work_date):
            return None
        return DailyClassification(work_date=day.work_date, status=DayStatus.WEEKEND)


class LeaveRule(DayRule):
    """Approved leave covering the day (half-day grants included)."""

    def evaluate(self, day: DayInputs, ctx: PolicyContext) -> Optional[DailyClassification]:
        leave = find_approved_leave(day.leaves, day.work_date)
        if not leave:
            return None
        return DailyClassification(
            work_date=day.work_date,
            status=DayStatus.LEAVE,
            leave_type=leave.leave_type,
        )
