from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Loại thao tác chấm công tại kiosk."""

    IN = "IN"
    OUT = "OUT"


class AdjustmentKind(str, Enum):
    """Kiểu điều chỉnh do quản trị viên tạo cho một ngày công."""

    ADD_RECORD = "ADD_RECORD"
    FORGIVE_LATE = "FORGIVE_LATE"


class DayStatus(str, Enum):
    """Trạng thái chấm công của một nhân viên trong một ngày."""

    PRESENT = "PRESENT"
    LATE = "LATE"
    ABSENT = "ABSENT"
    LEAVE = "LEAVE"
    HOLIDAY = "HOLIDAY"
    WEEKEND = "WEEKEND"
    NO_DATA = "NO_DATA"
    FUTURE = "FUTURE"
    NOT_STARTED = "NOT_STARTED"
    ENDED = "ENDED"
    SUSPENDED = "SUSPENDED"


class WeekendMode(str, Enum):
    SAT_SUN = "SAT_SUN"
    SUN_ONLY = "SUN_ONLY"


class LeaveStatus(str, Enum):
    """Trạng thái luồng duyệt đơn nghỉ phép."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class LeaveType(str, Enum):
    SICK = "SICK"
    BUSINESS = "BUSINESS"
    VACATION = "VACATION"


class HalfDaySession(str, Enum):
    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"


class PayType(str, Enum):
    """Hình thức trả lương; quyết định nhân viên có cần chấm công hay không."""

    MONTHLY = "MONTHLY"
    DAILY = "DAILY"
    MONTHLY_NOSCAN = "MONTHLY_NOSCAN"
    NOPAY = "NOPAY"


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    RESIGNED = "RESIGNED"


class OverLimitMode(str, Enum):
    """Cách xử lý số ngày nghỉ vượt định mức năm."""

    DEDUCT_SALARY = "DEDUCT_SALARY"
    UNPAID = "UNPAID"
    DISALLOW = "DISALLOW"
