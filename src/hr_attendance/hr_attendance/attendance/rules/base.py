from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ...employees.model import Employee
from ...leaves.model import LeaveGrant
from ...policy.resolver import PolicyContext
from ..model import Adjustment, AttendanceEvent, DailyClassification


@dataclass(frozen=True)
class DayInputs:
    """Everything already fetched for one (employee, calendar day)."""

    work_date: date
    events: Sequence[AttendanceEvent] = ()
    adjustment: Optional[Adjustment] = None
    leaves: Sequence[LeaveGrant] = ()
    employee: Optional[Employee] = None
    today: Optional[date] = None


class DayRule(ABC):
    """Strategy Pattern: one step of the status precedence chain."""

    @abstractmethod
    def evaluate(self, day: DayInputs, ctx: PolicyContext) -> Optional[DailyClassification]:
        """Return a classification to stop the chain, or None to fall through."""

        raise NotImplementedError
