from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from ..core.enums import AdjustmentKind, EventKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_datetime
from .model import Adjustment, AttendanceEvent
from .repository import AdjustmentRepository, AttendanceEventRepository


class MySQLAttendanceRepository(AttendanceEventRepository, AdjustmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_events(self, *, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, employee_id, employee_name, kind, event_time
                FROM attendance_events
                WHERE event_time >= %s AND event_time < %s
                ORDER BY event_time ASC
                """,
                (start, end),
            )
            rows = fetchall(cur)
            return [
                AttendanceEvent(
                    employee_id=str(r["employee_id"]),
                    kind=EventKind(r["kind"]),
                    timestamp=normalize_mysql_datetime(r.get("event_time")),
                    employee_name=r.get("employee_name"),
                    event_id=str(r["event_id"]),
                )
                for r in rows
            ]

    def list_adjustments(self, *, start_date: date, end_date: date) -> Sequence[Adjustment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, kind, adjusted_in, adjusted_out, notes, updated_at, updated_by
                FROM attendance_adjustments
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date ASC, updated_at ASC
                """,
                (start_date, end_date),
            )
            rows = fetchall(cur)
            return [
                Adjustment(
                    employee_id=str(r["employee_id"]),
                    work_date=normalize_mysql_date(r["work_date"]),
                    kind=AdjustmentKind(r["kind"]),
                    adjusted_in=normalize_mysql_datetime(r.get("adjusted_in")),
                    adjusted_out=normalize_mysql_datetime(r.get("adjusted_out")),
                    notes=r.get("notes"),
                    updated_at=normalize_mysql_datetime(r.get("updated_at")),
                    updated_by=r.get("updated_by"),
                )
                for r in rows
            ]
