from src.hr_attendance.hr_attendance.container import build_container
from src.hr_attendance.hr_attendance.database.connection import DBConfig


def _db_config(host: str) -> dict:
    return {"host": host, "port": "3307", "user": "hr", "password": "secret", "database": "hr_attendance_test"}


def test_each_container_uses_its_own_database_settings():
    first = build_container(db_config=_db_config("db-a"))
    second = build_container(db_config=_db_config("db-b"))

    assert first.conn is not second.conn
    assert first.conn.config.host == "db-a"
    assert second.conn.config == DBConfig(
        host="db-b", port=3307, user="hr", password="secret", database="hr_attendance_test"
    )
