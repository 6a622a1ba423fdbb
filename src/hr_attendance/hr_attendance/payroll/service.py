from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..attendance.repository import AdjustmentRepository, AttendanceEventRepository
from ..common.fetch import fetch_parallel
from ..core.constants import DEFAULT_FETCH_WORKERS
from ..core.enums import EmployeeStatus, LeaveStatus, PayType
from ..core.exceptions import ConfigurationError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..policy.repository import HolidayRepository, PolicyRepository
from ..policy.resolver import resolve_policy
from .calculator.base import DeductionCalculator
from .calculator.standard_calculator import StandardDeductionCalculator
from .metrics import PeriodMetrics, compute_period_metrics
from .periods import PayPeriod, resolve_pay_period
from .workdays import count_paid_working_days

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeWorkdays:
    employee_id: str
    display_name: str
    pay_type: Optional[PayType]
    salary_monthly: Optional[float]
    paid_working_days: int


def is_payroll_eligible(employee: Employee) -> bool:
    return (
        employee.status == EmployeeStatus.ACTIVE
        and bool(employee.salary_monthly and employee.salary_monthly > 0)
        and employee.pay_type != PayType.NOPAY
    )


class PayrollService:
    def __init__(
        self,
        employees: EmployeeRepository,
        events: AttendanceEventRepository,
        adjustments: AdjustmentRepository,
        leaves: LeaveRepository,
        holidays: HolidayRepository,
        policies: PolicyRepository,
        *,
        calculator: Optional[DeductionCalculator] = None,
        fetch_workers: int = DEFAULT_FETCH_WORKERS,
    ):
        self._employees = employees
        self._events = events
        self._adjustments = adjustments
        self._leaves = leaves
        self._holidays = holidays
        self._policies = policies
        self._calculator = calculator or StandardDeductionCalculator()
        self._fetch_workers = int(fetch_workers)

    def resolve_period(self, *, month: date, half: int) -> PayPeriod:
        policy = self._policies.get_policy()
        if policy is None:
            raise ConfigurationError("HR settings not found. Configure them before running payroll.")
        return resolve_pay_period(month.year, month.month, half, policy.payroll)

    def _fetch_period(self, period: PayPeriod) -> dict:
        return fetch_parallel(
            {
                "employees": self._employees.list_employees,
                "policy": self._policies.get_policy,
                "holidays": lambda: self._holidays.list_holidays(start_date=period.start, end_date=period.end),
                "leaves": lambda: self._leaves.list_leaves(year=period.start.year, status=LeaveStatus.APPROVED),
                "events": lambda: self._events.list_events(
                    start=datetime.combine(period.start, time.min),
                    end=datetime.combine(period.end + timedelta(days=1), time.min),
                ),
                "adjustments": lambda: self._adjustments.list_adjustments(
                    start_date=period.start, end_date=period.end
                ),
            },
            max_workers=self._fetch_workers,
        )

    def count_workdays(self, *, month: date, half: int, today: Optional[date] = None) -> list[EmployeeWorkdays]:
        """Paid working days per payroll-eligible employee for one half-month."""

        period = self.resolve_period(month=month, half=half)
        fetched = self._fetch_period(period)
        ctx = resolve_policy(fetched["policy"], fetched["holidays"], start=period.start, end=period.end)

        out: list[EmployeeWorkdays] = []
        for employee in fetched["employees"]:
            if not is_payroll_eligible(employee):
                continue
            emp_id = employee.employee_id
            days = count_paid_working_days(
                start=period.start,
                end=period.end,
                ctx=ctx,
                events=[e for e in fetched["events"] if e.employee_id == emp_id],
                adjustments=[a for a in fetched["adjustments"] if a.employee_id == emp_id],
                leaves=[leave for leave in fetched["leaves"] if leave.employee_id == emp_id],
                employee=employee,
                today=today,
            )
            out.append(
                EmployeeWorkdays(
                    employee_id=emp_id,
                    display_name=employee.display_name,
                    pay_type=employee.pay_type,
                    salary_monthly=employee.salary_monthly,
                    paid_working_days=days,
                )
            )

        logger.info("payroll workdays %s: %d employees", period.run_id, len(out))
        return out

    def compute_metrics(
        self,
        *,
        employee_id: str,
        month: date,
        half: int,
        today: Optional[date] = None,
    ) -> PeriodMetrics:
        period = self.resolve_period(month=month, half=half)
        fetched = self._fetch_period(period)
        ctx = resolve_policy(fetched["policy"], fetched["holidays"], start=period.start, end=period.end)

        employee = next((e for e in fetched["employees"] if e.employee_id == employee_id), None)
        if employee is None:
            raise ValidationError(f"Employee {employee_id} not found")

        return compute_period_metrics(
            employee=employee,
            period=period,
            ctx=ctx,
            leaves_of_year=[leave for leave in fetched["leaves"] if leave.employee_id == employee_id],
            events=[e for e in fetched["events"] if e.employee_id == employee_id],
            adjustments=[a for a in fetched["adjustments"] if a.employee_id == employee_id],
            today=today,
            calculator=self._calculator,
        )
