from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeStatus, PayType


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Hồ sơ nhân viên dùng cho chấm công/lương.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    employee_id: str
    display_name: str
    pay_type: Optional[PayType] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    salary_monthly: Optional[float] = None

    @property
    def requires_scan(self) -> bool:
        """Only MONTHLY and DAILY employees clock in at the kiosk."""
        return self.pay_type in (PayType.MONTHLY, PayType.DAILY)

    def is_employed_on(self, day: date) -> bool:
        if self.start_date and day < self.start_date:
            return False
        if self.end_date and day > self.end_date:
            return False
        return True
