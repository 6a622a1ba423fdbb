from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceSummaryService
from .core.constants import DEFAULT_FETCH_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .payroll.service import PayrollService
from .policy.mysql_policy_repository import MySQLPolicyRepository


@dataclass(frozen=True)
class Container:
    attendance_summary_service: AttendanceSummaryService
    payroll_service: PayrollService
    conn: Optional[DatabaseConnection] = None


def build_container(*, db_config: dict, fetch_workers: int = DEFAULT_FETCH_WORKERS) -> Container:
    conn = DatabaseConnection(DBConfig.from_settings(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    policy_repo = MySQLPolicyRepository(conn)

    attendance_summary_service = AttendanceSummaryService(
        employees_repo,
        attendance_repo,
        attendance_repo,
        leaves_repo,
        policy_repo,
        policy_repo,
        fetch_workers=fetch_workers,
    )
    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        attendance_repo,
        leaves_repo,
        policy_repo,
        policy_repo,
        fetch_workers=fetch_workers,
    )

    return Container(
        attendance_summary_service=attendance_summary_service,
        payroll_service=payroll_service,
        conn=conn,
    )
