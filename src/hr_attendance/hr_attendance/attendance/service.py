from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..common.datetime_utils import end_of_month
from ..common.fetch import fetch_parallel
from ..core.constants import DEFAULT_FETCH_WORKERS
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..policy.repository import HolidayRepository, PolicyRepository
from ..policy.resolver import resolve_policy
from .aggregator import build_period_summaries
from .model import PeriodSummary
from .repository import AdjustmentRepository, AttendanceEventRepository

logger = logging.getLogger(__name__)


def leave_years(start: date, end: date) -> range:
    return range(start.year, end.year + 1)


class AttendanceSummaryService:
    """Fetch a period's records in parallel, then classify and aggregate per employee."""

    def __init__(
        self,
        employees: EmployeeRepository,
        events: AttendanceEventRepository,
        adjustments: AdjustmentRepository,
        leaves: LeaveRepository,
        holidays: HolidayRepository,
        policies: PolicyRepository,
        *,
        fetch_workers: int = DEFAULT_FETCH_WORKERS,
    ):
        self._employees = employees
        self._events = events
        self._adjustments = adjustments
        self._leaves = leaves
        self._holidays = holidays
        self._policies = policies
        self._fetch_workers = int(fetch_workers)

    def build_monthly_summary(self, month: date, *, today: Optional[date] = None) -> list[PeriodSummary]:
        start = month.replace(day=1)
        return self.build_period_summary(start=start, end=end_of_month(start), today=today)

    def build_period_summary(
        self,
        *,
        start: date,
        end: date,
        today: Optional[date] = None,
    ) -> list[PeriodSummary]:
        if end < start:
            raise ValidationError("end must not be before start")

        calls = {
            "employees": self._employees.list_employees,
            "policy": self._policies.get_policy,
            "holidays": lambda: self._holidays.list_holidays(start_date=start, end_date=end),
            "events": lambda: self._events.list_events(
                start=datetime.combine(start, time.min),
                end=datetime.combine(end + timedelta(days=1), time.min),
            ),
            "adjustments": lambda: self._adjustments.list_adjustments(start_date=start, end_date=end),
        }
        for year in leave_years(start, end):
            calls[f"leaves_{year}"] = lambda year=year: self._leaves.list_leaves(year=year)
        fetched = fetch_parallel(calls, max_workers=self._fetch_workers)

        ctx = resolve_policy(fetched["policy"], fetched["holidays"], start=start, end=end)
        leaves = [leave for year in leave_years(start, end) for leave in fetched[f"leaves_{year}"]]

        summaries = build_period_summaries(
            start=start,
            end=end,
            ctx=ctx,
            employees=fetched["employees"],
            events=fetched["events"],
            adjustments=fetched["adjustments"],
            leaves=leaves,
            today=today,
            include=_requires_scan,
        )
        logger.info(
            "attendance summary %s..%s: %d employees, %d need review",
            start.isoformat(),
            end.isoformat(),
            len(summaries),
            sum(1 for s in summaries if s.review_needed),
        )
        return summaries


def _requires_scan(employee: Employee) -> bool:
    return employee.requires_scan
