from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from .model import Adjustment, AttendanceEvent


class AttendanceEventRepository(Protocol):
    def list_events(self, *, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        """Events with start <= timestamp < end, ordered by timestamp."""

        raise NotImplementedError


class AdjustmentRepository(Protocol):
    def list_adjustments(self, *, start_date: date, end_date: date) -> Sequence[Adjustment]:
        """Adjustments with start_date <= work_date <= end_date."""

        raise NotImplementedError
