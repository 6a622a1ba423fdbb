from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import HalfDaySession, LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import LeaveGrant
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_leaves(self, *, year: int, status: Optional[LeaveStatus] = None) -> Sequence[LeaveGrant]:
        sql = """
            SELECT employee_id, leave_type, start_date, end_date, status, is_half_day, half_day_session, reason
            FROM hr_leaves
            WHERE leave_year=%s
        """
        params: list = [int(year)]
        if status:
            sql += " AND status=%s"
            params.append(status.value)
        sql += " ORDER BY start_date ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
            return [
                LeaveGrant(
                    employee_id=str(r["employee_id"]),
                    leave_type=r["leave_type"],
                    start_date=normalize_mysql_date(r["start_date"]),
                    end_date=normalize_mysql_date(r["end_date"]),
                    status=LeaveStatus(r["status"]),
                    is_half_day=bool(r.get("is_half_day")),
                    half_day_session=HalfDaySession(r["half_day_session"]) if r.get("half_day_session") else None,
                    reason=r.get("reason"),
                )
                for r in rows
            ]
