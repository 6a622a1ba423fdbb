from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import each_day
from ..core.enums import DayStatus
from ..employees.model import Employee
from ..leaves.model import LeaveGrant
from ..policy.resolver import PolicyContext
from .classifier import DailyClassifier
from .clock import group_adjustments_by_day, group_events_by_day, resolve_adjustment
from .model import Adjustment, AttendanceEvent, DailyClassification, PeriodSummary
from .rules.base import DayInputs

logger = logging.getLogger(__name__)


def summarize_period(
    employee_id: str,
    display_name: str,
    days: Sequence[DailyClassification],
    *,
    warnings: Iterable[str] = (),
    employee: Optional[Employee] = None,
) -> PeriodSummary:
    """Fold daily classifications into one PeriodSummary.

    Only PRESENT/LATE/ABSENT/LEAVE move the headline counters; late minutes
    accumulate on LATE days only; review_needed sticks once any day raises it.
    """

    counts: Counter[DayStatus] = Counter()
    total_late_minutes = 0
    review_needed = False

    for day in days:
        counts[day.status] += 1
        if day.status == DayStatus.LATE:
            total_late_minutes += day.late_minutes or 0
        review_needed = review_needed or day.review_needed

    return PeriodSummary(
        employee_id=employee_id,
        display_name=display_name,
        total_present=counts[DayStatus.PRESENT],
        total_late=counts[DayStatus.LATE],
        total_absent=counts[DayStatus.ABSENT],
        total_leave=counts[DayStatus.LEAVE],
        total_late_minutes=total_late_minutes,
        days=tuple(days),
        review_needed=review_needed,
        status_counts=dict(counts),
        warnings=tuple(warnings),
        employee_status=employee.status if employee else None,
        start_date=employee.start_date if employee else None,
        end_date=employee.end_date if employee else None,
    )


def classify_period(
    *,
    start: date,
    end: date,
    ctx: PolicyContext,
    events: Iterable[AttendanceEvent],
    adjustments: Iterable[Adjustment] = (),
    leaves: Sequence[LeaveGrant] = (),
    employee: Optional[Employee] = None,
    today: Optional[date] = None,
    classifier: Optional[DailyClassifier] = None,
) -> tuple[list[DailyClassification], list[str]]:
    """Run the classifier for every day of [start, end] for one employee's inputs."""

    classifier = classifier or DailyClassifier()
    events_by_day = group_events_by_day(events, ctx)
    adjustments_by_day = group_adjustments_by_day(adjustments)

    days: list[DailyClassification] = []
    warnings: list[str] = []
    for d in each_day(start, end):
        adjustment, warning = resolve_adjustment(adjustments_by_day.get(d, ()))
        if warning:
            warnings.append(warning)
        day = DayInputs(
            work_date=d,
            events=tuple(events_by_day.get(d, ())),
            adjustment=adjustment,
            leaves=leaves,
            employee=employee,
            today=today,
        )
        days.append(classifier.classify(day, ctx))
    return days, warnings


def synthesize_employees(events: Iterable[AttendanceEvent], known_ids: set[str]) -> list[Employee]:
    """Minimal identities for employees seen only in clock events."""

    names: dict[str, str] = {}
    for event in events:
        if event.employee_id in known_ids:
            continue
        current = names.get(event.employee_id)
        if current is None or (current == event.employee_id and event.employee_name):
            names[event.employee_id] = event.employee_name or event.employee_id

    for employee_id in names:
        logger.warning("Attendance events for %s have no employee profile", employee_id)
    return [Employee(employee_id=k, display_name=v) for k, v in sorted(names.items(), key=lambda kv: kv[1])]


def build_period_summaries(
    *,
    start: date,
    end: date,
    ctx: PolicyContext,
    employees: Sequence[Employee],
    events: Sequence[AttendanceEvent],
    adjustments: Sequence[Adjustment] = (),
    leaves: Sequence[LeaveGrant] = (),
    today: Optional[date] = None,
    include=None,
) -> list[PeriodSummary]:
    """One PeriodSummary per employee, with the full per-day breakdown.

    include filters which profiles are summarized; employees that only appear
    in events are never dropped.
    """

    events_by_emp: dict[str, list[AttendanceEvent]] = {}
    for event in events:
        events_by_emp.setdefault(event.employee_id, []).append(event)
    adjustments_by_emp: dict[str, list[Adjustment]] = {}
    for adj in adjustments:
        adjustments_by_emp.setdefault(adj.employee_id, []).append(adj)
    leaves_by_emp: dict[str, list[LeaveGrant]] = {}
    for leave in leaves:
        if leave.is_approved:
            leaves_by_emp.setdefault(leave.employee_id, []).append(leave)

    known_ids = {e.employee_id for e in employees}
    selected = [e for e in employees if include is None or include(e)]
    selected += synthesize_employees(events, known_ids)

    classifier = DailyClassifier()
    summaries: list[PeriodSummary] = []
    for employee in selected:
        days, warnings = classify_period(
            start=start,
            end=end,
            ctx=ctx,
            events=events_by_emp.get(employee.employee_id, ()),
            adjustments=adjustments_by_emp.get(employee.employee_id, ()),
            leaves=leaves_by_emp.get(employee.employee_id, ()),
            employee=employee,
            today=today,
            classifier=classifier,
        )
        summaries.append(
            summarize_period(
                employee.employee_id,
                employee.display_name,
                days,
                warnings=warnings,
                employee=employee,
            )
        )
    return summaries
