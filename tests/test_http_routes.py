from __future__ import annotations

from datetime import datetime, time

import pytest

from src.hr_attendance.hr_attendance.attendance.model import AttendanceEvent
from src.hr_attendance.hr_attendance.attendance.service import AttendanceSummaryService
from src.hr_attendance.hr_attendance.container import Container
from src.hr_attendance.hr_attendance.core.enums import EventKind, PayType
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.main import create_app
from src.hr_attendance.hr_attendance.payroll.service import PayrollService
from src.hr_attendance.hr_attendance.policy.model import HRPolicy


class FakeRepos:
    def __init__(self, *, policy, employees=(), events=()):
        self.policy = policy
        self.employees = list(employees)
        self.events = list(events)

    def list_employees(self):
        return self.employees

    def get_policy(self):
        return self.policy

    def list_holidays(self, *, start_date, end_date):
        return []

    def list_leaves(self, *, year, status=None):
        return []

    def list_events(self, *, start, end):
        return [e for e in self.events if start <= e.timestamp < end]

    def list_adjustments(self, *, start_date, end_date):
        return []


POLICY = HRPolicy(work_start=time(8, 0), absent_cutoff=time(9, 0), grace_minutes=10)


def _client(monkeypatch, repos: FakeRepos):
    monkeypatch.setenv("APP_ENV", "testing")
    container = Container(
        attendance_summary_service=AttendanceSummaryService(repos, repos, repos, repos, repos, repos, fetch_workers=2),
        payroll_service=PayrollService(repos, repos, repos, repos, repos, repos, fetch_workers=2),
    )
    return create_app(container).test_client()


@pytest.fixture
def repos():
    return FakeRepos(
        policy=POLICY,
        employees=[Employee("u1", "Anan", pay_type=PayType.MONTHLY, salary_monthly=26000)],
        events=[
            AttendanceEvent("u1", EventKind.IN, datetime(2026, 3, 3, 8, 30)),
            AttendanceEvent("u1", EventKind.OUT, datetime(2026, 3, 3, 17, 0)),
        ],
    )


def test_attendance_summary_json(monkeypatch, repos):
    res = _client(monkeypatch, repos).get("/api/hr/attendance-summary?month=2026-03&today=2026-03-31")

    assert res.status_code == 200
    body = res.get_json()
    assert body["start"] == "2026-03-01"
    assert body["end"] == "2026-03-31"
    summary = body["summaries"][0]
    assert summary["employee_id"] == "u1"
    assert summary["total_late"] == 1
    assert summary["total_late_minutes"] == 20
    day = next(d for d in summary["days"] if d["date"] == "2026-03-03")
    assert day["status"] == "LATE"
    assert day["work_hours"] == "8h 30m"


def test_attendance_summary_csv(monkeypatch, repos):
    res = _client(monkeypatch, repos).get("/api/hr/attendance-summary.csv?start=2026-03-03&end=2026-03-03")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert res.data.startswith("\ufeff".encode("utf-8"))
    text = res.data.decode("utf-8-sig")
    assert "u1,Anan,2026-03-03,LATE,20,8h 30m,08:30,17:00" in text


def test_bad_month_is_400(monkeypatch, repos):
    res = _client(monkeypatch, repos).get("/api/hr/attendance-summary?month=2026-13")
    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_half_range_is_400(monkeypatch, repos):
    res = _client(monkeypatch, repos).get("/api/hr/attendance-summary?start=2026-03-01")
    assert res.status_code == 400


def test_missing_policy_is_409(monkeypatch):
    res = _client(monkeypatch, FakeRepos(policy=None)).get("/api/hr/payroll/workdays?month=2026-03&period=1")
    assert res.status_code == 409


def test_payroll_workdays(monkeypatch, repos):
    res = _client(monkeypatch, repos).get("/api/hr/payroll/workdays?month=2026-03&period=1&today=2026-03-31")

    assert res.status_code == 200
    body = res.get_json()
    assert body["period"] == 1
    assert body["employees"] == [
        {
            "employee_id": "u1",
            "display_name": "Anan",
            "pay_type": "MONTHLY",
            "salary_monthly": 26000,
            "paid_working_days": 1,
        }
    ]


def test_payroll_metrics_unknown_employee(monkeypatch, repos):
    res = _client(monkeypatch, repos).get("/api/hr/payroll/metrics/ghost?month=2026-03&period=1")
    assert res.status_code == 400
