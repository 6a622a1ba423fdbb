"""Ví dụ: dùng service layer (không qua Flask).

In bảng tổng hợp chấm công tháng hiện tại và số ngày công tính lương kỳ 1.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_attendance.hr_attendance.common.datetime_utils import now_local
from src.hr_attendance.hr_attendance.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    month = now_local().date().replace(day=1)
    for s in container.attendance_summary_service.build_monthly_summary(month):
        print(s.display_name, s.total_present, s.total_late, s.total_absent, s.total_leave, s.total_late_minutes)

    for row in container.payroll_service.count_workdays(month=month, half=1):
        print(row.display_name, row.paid_working_days)


if __name__ == "__main__":
    main()
