from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import HalfDaySession, LeaveStatus


@dataclass(frozen=True)
class LeaveGrant:
    """Đơn nghỉ phép của nhân viên (khoảng ngày tính cả hai đầu)."""

    employee_id: str
    leave_type: str
    start_date: date
    end_date: date
    status: LeaveStatus
    is_half_day: bool = False
    half_day_session: Optional[HalfDaySession] = None
    reason: Optional[str] = None

    @property
    def is_approved(self) -> bool:
        return self.status == LeaveStatus.APPROVED

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def units_on(self, day: date) -> float:
        """Leave units taken on day: 0.5 for a single-day half-day grant, else 1."""
        if self.is_half_day and self.start_date == self.end_date == day:
            return 0.5
        return 1.0

    @property
    def is_morning_half(self) -> bool:
        return self.is_half_day and self.half_day_session == HalfDaySession.MORNING


def find_approved_leave(leaves, day: date) -> Optional[LeaveGrant]:
    for leave in leaves:
        if leave.is_approved and leave.covers(day):
            return leave
    return None
