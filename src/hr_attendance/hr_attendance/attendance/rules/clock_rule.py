from __future__ import annotations

from ...common.datetime_utils import minutes_between
from ...core.enums import AdjustmentKind, DayStatus
from ...policy.resolver import PolicyContext
from ..clock import effective_clock
from ..model import DailyClassification
from .base import DayInputs


class ClockRule:
    """Terminal step: judge the day from the effective first-in / last-out."""

    def decide(self, day: DayInputs, ctx: PolicyContext) -> DailyClassification:
        d = day.work_date
        adjustment = day.adjustment
        clock = effective_clock(day.events, adjustment, ctx)

        if clock.first_in is None:
            return DailyClassification(work_date=d, status=DayStatus.ABSENT, adjustment=adjustment)

        if clock.last_out is None:
            # Open clock-in: needs a human to reconcile, neither absent nor present.
            return DailyClassification(
                work_date=d,
                status=DayStatus.NO_DATA,
                first_in=clock.first_in,
                adjustment=adjustment,
                review_needed=True,
            )

        late = max(0, minutes_between(ctx.work_start_with_grace(d), clock.first_in))
        if adjustment and adjustment.kind == AdjustmentKind.FORGIVE_LATE:
            late = 0

        return DailyClassification(
            work_date=d,
            status=DayStatus.LATE if late > 0 else DayStatus.PRESENT,
            late_minutes=late,
            worked_minutes=minutes_between(clock.first_in, clock.last_out),
            first_in=clock.first_in,
            last_out=clock.last_out,
            adjustment=adjustment,
        )
