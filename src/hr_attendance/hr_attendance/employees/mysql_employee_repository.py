from __future__ import annotations

from typing import Sequence

from ..core.enums import EmployeeStatus, PayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, display_name, pay_type, status, start_date, end_date, salary_monthly
                FROM employees
                ORDER BY display_name ASC
                """
            )
            rows = fetchall(cur)
            return [
                Employee(
                    employee_id=str(r["employee_id"]),
                    display_name=r["display_name"],
                    pay_type=PayType(r["pay_type"]) if r.get("pay_type") else None,
                    status=EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value),
                    start_date=normalize_mysql_date(r.get("start_date")),
                    end_date=normalize_mysql_date(r.get("end_date")),
                    salary_monthly=float(r["salary_monthly"]) if r.get("salary_monthly") is not None else None,
                )
                for r in rows
            ]
