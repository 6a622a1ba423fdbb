from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import HRPolicy, Holiday


class PolicyRepository(Protocol):
    def get_policy(self) -> Optional[HRPolicy]:
        """Current HR settings snapshot, or None when never configured."""

        raise NotImplementedError


class HolidayRepository(Protocol):
    def list_holidays(self, *, start_date: date, end_date: date) -> Sequence[Holiday]:
        raise NotImplementedError
