from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import AdjustmentKind, DayStatus, EmployeeStatus, EventKind


@dataclass(frozen=True)
class AttendanceEvent:
    """Thực thể miền (domain): Một lần quét vào/ra tại kiosk."""

    employee_id: str
    kind: EventKind
    timestamp: Optional[datetime]
    employee_name: Optional[str] = None
    event_id: Optional[str] = None


@dataclass(frozen=True)
class Adjustment:
    """Điều chỉnh ngày công do quản trị viên tạo (không phải nhân viên)."""

    employee_id: str
    work_date: date
    kind: AdjustmentKind
    adjusted_in: Optional[datetime] = None
    adjusted_out: Optional[datetime] = None
    notes: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None


@dataclass(frozen=True)
class DailyClassification:
    """Read-model: kết quả phân loại một ngày công (không lưu CSDL)."""

    work_date: date
    status: DayStatus
    late_minutes: Optional[int] = None
    worked_minutes: Optional[int] = None
    first_in: Optional[datetime] = None
    last_out: Optional[datetime] = None
    leave_type: Optional[str] = None
    holiday_name: Optional[str] = None
    adjustment: Optional[Adjustment] = None
    review_needed: bool = False

    @property
    def work_hours(self) -> Optional[str]:
        if self.worked_minutes is None:
            return None
        return f"{self.worked_minutes // 60}h {self.worked_minutes % 60}m"


@dataclass(frozen=True)
class PeriodSummary:
    """Read-model phục vụ màn hình tổng hợp chấm công theo kỳ."""

    employee_id: str
    display_name: str
    total_present: int
    total_late: int
    total_absent: int
    total_leave: int
    total_late_minutes: int
    days: tuple[DailyClassification, ...]
    review_needed: bool
    status_counts: dict[DayStatus, int] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()
    employee_status: Optional[EmployeeStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
