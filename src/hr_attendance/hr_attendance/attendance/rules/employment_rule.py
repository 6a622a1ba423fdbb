from __future__ import annotations

from typing import Optional

from ...core.enums import DayStatus, EmployeeStatus
from ...policy.resolver import PolicyContext
from ..model import DailyClassification
from .base import DayInputs, DayRule


class EmploymentRule(DayRule):
    """Days that cannot be judged yet or fall outside employment.

    Only applies when the caller supplies a reference day and/or a profile.
    """

    def evaluate(self, day: DayInputs, ctx: PolicyContext) -> Optional[DailyClassification]:
        d = day.work_date
        if day.today and d > day.today:
            return DailyClassification(work_date=d, status=DayStatus.FUTURE)

        employee = day.employee
        if not employee:
            return None
        if employee.start_date and d < employee.start_date:
            return DailyClassification(work_date=d, status=DayStatus.NOT_STARTED)
        if employee.end_date and d > employee.end_date:
            return DailyClassification(work_date=d, status=DayStatus.ENDED)
        if employee.status == EmployeeStatus.SUSPENDED:
            return DailyClassification(work_date=d, status=DayStatus.SUSPENDED)
        return None
