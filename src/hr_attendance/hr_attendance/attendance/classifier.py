from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..employees.model import Employee
from ..leaves.model import LeaveGrant
from ..policy.resolver import PolicyContext
from .factory import DayRuleFactory
from .model import Adjustment, AttendanceEvent, DailyClassification
from .rules.base import DayInputs


class DailyClassifier:
    """Assign exactly one status to an (employee, day); first matching rule wins."""

    def __init__(self, factory: DayRuleFactory | None = None):
        factory = factory or DayRuleFactory()
        self._gates = factory.gates()
        self._terminal = factory.terminal()

    def classify(self, day: DayInputs, ctx: PolicyContext) -> DailyClassification:
        for rule in self._gates:
            result = rule.evaluate(day, ctx)
            if result is not None:
                return result
        return self._terminal.decide(day, ctx)


_default_classifier = DailyClassifier()


def classify_day(
    work_date: date,
    events: Sequence[AttendanceEvent],
    ctx: PolicyContext,
    *,
    adjustment: Optional[Adjustment] = None,
    leaves: Sequence[LeaveGrant] = (),
    employee: Optional[Employee] = None,
    today: Optional[date] = None,
) -> DailyClassification:
    """Classify one day for one employee. Pure: same inputs, same output."""

    day = DayInputs(
        work_date=work_date,
        events=tuple(events),
        adjustment=adjustment,
        leaves=tuple(leaves),
        employee=employee,
        today=today,
    )
    return _default_classifier.classify(day, ctx)
