from __future__ import annotations

from dataclasses import dataclass

from .rules.base import DayRule
from .rules.calendar_rules import HolidayRule, LeaveRule, WeekendRule
from .rules.clock_rule import ClockRule
from .rules.employment_rule import EmploymentRule


@dataclass
class DayRuleFactory:
    """Factory Pattern: build the status precedence chain.

    The order is load-bearing: employment window, holiday, weekend, leave,
    then the clock.
    """

    def gates(self) -> tuple[DayRule, ...]:
        return (EmploymentRule(), HolidayRule(), WeekendRule(), LeaveRule())

    def terminal(self) -> ClockRule:
        return ClockRule()
