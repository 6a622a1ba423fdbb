from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.constants import HR_SETTINGS_KEY
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, load_json_document, normalize_mysql_date
from .model import HRPolicy, Holiday
from .repository import HolidayRepository, PolicyRepository


class MySQLPolicyRepository(PolicyRepository, HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_policy(self) -> Optional[HRPolicy]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT document FROM settings WHERE setting_key=%s",
                (HR_SETTINGS_KEY,),
            )
            row = fetchone(cur)
            if not row:
                return None
            doc = load_json_document(row.get("document"))
            return HRPolicy.from_document(doc) if doc is not None else None

    def list_holidays(self, *, start_date: date, end_date: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_date, name
                FROM hr_holidays
                WHERE holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date ASC
                """,
                (start_date, end_date),
            )
            rows = fetchall(cur)
            return [Holiday(holiday_date=normalize_mysql_date(r["holiday_date"]), name=r["name"]) for r in rows]
