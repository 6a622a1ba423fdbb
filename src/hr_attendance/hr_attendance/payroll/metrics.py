from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..attendance.clock import (
    effective_clock,
    group_adjustments_by_day,
    group_events_by_day,
    resolve_adjustment,
)
from ..attendance.model import Adjustment, AttendanceEvent
from ..common.datetime_utils import each_day, minutes_between
from ..core.enums import AdjustmentKind, OverLimitMode, PayType
from ..employees.model import Employee
from ..leaves.model import LeaveGrant, find_approved_leave
from ..policy.resolver import PolicyContext
from .calculator.base import DeductionCalculator
from .calculator.standard_calculator import StandardDeductionCalculator
from .periods import PayPeriod
from .sso import calc_sso_monthly, split_sso_half


@dataclass(frozen=True)
class DayLog:
    work_date: date
    kind: str
    detail: str


@dataclass(frozen=True)
class Deduction:
    name: str
    amount: float
    notes: str = ""


@dataclass
class AttendanceMetrics:
    scheduled_work_days: int = 0
    present_days: float = 0.0
    late_days: int = 0
    late_minutes: int = 0
    absent_units: float = 0.0
    leave_days: float = 0.0
    payable_units: float = 0.0
    warnings: list[str] = field(default_factory=list)
    day_logs: list[DayLog] = field(default_factory=list)


@dataclass
class LeaveSummary:
    days_by_type: dict[str, float] = field(default_factory=dict)
    over_limit_days: float = 0.0


@dataclass
class PeriodMetrics:
    attendance: AttendanceMetrics
    leave: LeaveSummary
    auto_deductions: list[Deduction]
    calc_notes: str
    sso_employee: float = 0.0


def _round_half_units(value: float) -> float:
    return math.floor(value * 2 + 0.5) / 2


def compute_period_metrics(
    *,
    employee: Employee,
    period: PayPeriod,
    ctx: PolicyContext,
    leaves_of_year: Sequence[LeaveGrant],
    events: Sequence[AttendanceEvent],
    adjustments: Sequence[Adjustment] = (),
    today: Optional[date] = None,
    calculator: Optional[DeductionCalculator] = None,
) -> PeriodMetrics:
    """Payslip metrics for one employee over one pay period.

    Works in payable units: a scheduled day is worth 1, split into halves by
    half-day leave or a first scan after the absentee cutoff. Lateness for
    deductions is counted from the nominal work start once the grace window
    is exceeded.
    """

    calculator = calculator or StandardDeductionCalculator()
    approved = [leave for leave in leaves_of_year if leave.is_approved]
    scans = employee.pay_type in (PayType.MONTHLY, PayType.DAILY)

    att = AttendanceMetrics()
    leave_by_type: dict[str, float] = defaultdict(float)
    events_by_day = group_events_by_day(events, ctx)
    adjustments_by_day = group_adjustments_by_day(adjustments)

    end = min(period.end, today) if today else period.end
    for day in each_day(period.start, end):
        if not employee.is_employed_on(day):
            continue
        if ctx.is_holiday(day) or ctx.is_weekend(day):
            continue
        att.scheduled_work_days += 1

        leave = find_approved_leave(approved, day)
        leave_units = 0.0
        if leave:
            leave_units = leave.units_on(day)
            att.leave_days += leave_units
            leave_by_type[leave.leave_type] += leave_units
            half = f" (half day, {leave.half_day_session.value.lower()})" if leave.is_half_day and leave.half_day_session else ""
            att.day_logs.append(DayLog(day, "LEAVE", f"{leave.leave_type} leave{half}: {leave.reason or '-'}"))
            if leave_units == 1:
                att.payable_units += 1
                continue

        if not scans:
            continue

        adjustment, warning = resolve_adjustment(adjustments_by_day.get(day, ()))
        if warning:
            att.warnings.append(warning)
        clock = effective_clock(events_by_day.get(day, ()), adjustment, ctx)

        day_payable = leave_units
        remaining = 1 - leave_units

        if clock.first_in is None:
            if remaining > 0:
                att.absent_units += remaining
                detail = "absent (no scan for the remaining half)" if leave_units else "absent (no clock-in)"
                att.day_logs.append(DayLog(day, "ABSENT", detail))
        else:
            morning_leave = bool(leave and leave.is_morning_half)
            if clock.first_in > ctx.absent_cutoff(day) and not morning_leave:
                att.absent_units += remaining * 0.5
                day_payable += remaining * 0.5
                att.day_logs.append(DayLog(day, "ABSENT", "morning absent (clock-in after cutoff)"))
            else:
                forgiven = adjustment is not None and adjustment.kind == AdjustmentKind.FORGIVE_LATE
                if not morning_leave and not forgiven and clock.first_in > ctx.work_start_with_grace(day):
                    late = minutes_between(ctx.work_start(day), clock.first_in)
                    att.late_days += 1
                    att.late_minutes += late
                    att.day_logs.append(
                        DayLog(day, "LATE", f"late {late} min (clock-in {clock.first_in.strftime('%H:%M')})")
                    )
                day_payable += remaining

            if clock.last_out is None and (today is None or day < today):
                att.warnings.append(f"{day.isoformat()} has no clock-out (OUT); please correct it")

        att.payable_units += day_payable

    if employee.pay_type == PayType.MONTHLY_NOSCAN:
        att.present_days = max(0.0, att.scheduled_work_days - att.leave_days)
        att.payable_units = float(att.scheduled_work_days)
    else:
        att.absent_units = _round_half_units(att.absent_units)
        att.present_days = max(0.0, att.scheduled_work_days - att.leave_days - math.floor(att.absent_units))

    leave_summary = LeaveSummary(days_by_type=dict(leave_by_type))
    deductions: list[Deduction] = []
    notes: list[str] = []
    base_days = ctx.policy.payroll.salary_deduction_base_days
    salary = employee.salary_monthly

    for leave_type, policy in ctx.policy.leave_types.items():
        if not policy.annual_entitlement:
            continue
        over = over_limit_days_in_period(
            [leave for leave in approved if leave.leave_type == leave_type],
            entitlement=policy.annual_entitlement,
            period=period,
        )
        leave_summary.over_limit_days += over
        if over <= 0:
            continue

        if salary and policy.over_limit_mode in (OverLimitMode.DEDUCT_SALARY, OverLimitMode.UNPAID):
            rate = calculator.day_rate(salary, policy.deduction_base_days or base_days)
            deductions.append(Deduction(f"[AUTO] Over-limit leave ({leave_type})", rate * over, f"{over:g} days"))
        elif policy.over_limit_mode == OverLimitMode.DISALLOW:
            notes.append(f"Warning: {leave_type} leave is {over:g} days over the entitlement but deductions are disabled")

    if employee.pay_type == PayType.MONTHLY and salary:
        if att.absent_units > 0:
            deductions.append(
                Deduction(
                    "[AUTO] Absence",
                    calculator.day_rate(salary, base_days) * att.absent_units,
                    f"{att.absent_units:g} units",
                )
            )
        if att.late_minutes > 0:
            deductions.append(
                Deduction(
                    "[AUTO] Lateness",
                    calculator.minute_rate(salary, base_days) * att.late_minutes,
                    f"{att.late_minutes} minutes",
                )
            )

    sso_employee = 0.0
    if salary:
        sso = ctx.policy.sso
        p1, p2 = split_sso_half(calc_sso_monthly(salary, sso.employee_percent, sso.min_base, sso.monthly_cap))
        sso_employee = p1 if period.half == 1 else p2

    return PeriodMetrics(
        attendance=att,
        leave=leave_summary,
        auto_deductions=deductions,
        calc_notes="\n".join(notes),
        sso_employee=sso_employee,
    )


def over_limit_days_in_period(leaves: Sequence[LeaveGrant], *, entitlement: float, period: PayPeriod) -> float:
    """Walk a year's approved leave of one type in date order; count the overage landing in period."""

    taken = 0.0
    over = 0.0
    for leave in sorted(leaves, key=lambda item: item.start_date):
        for day in each_day(leave.start_date, leave.end_date):
            units = leave.units_on(day)
            taken += units
            if taken > entitlement and period.start <= day <= period.end:
                over += min(units, taken - entitlement)
    return over
