from __future__ import annotations

from datetime import date, datetime

from src.hr_attendance.hr_attendance.attendance.clock import resolve_adjustment
from src.hr_attendance.hr_attendance.attendance.model import Adjustment
from src.hr_attendance.hr_attendance.core.enums import AdjustmentKind

DAY = date(2026, 3, 3)


def test_single_adjustment_passes_through():
    adj = Adjustment(employee_id="u1", work_date=DAY, kind=AdjustmentKind.FORGIVE_LATE)
    assert resolve_adjustment([adj]) == (adj, None)


def test_no_adjustment():
    assert resolve_adjustment([]) == (None, None)


def test_latest_written_wins_per_field_and_warns():
    older = Adjustment(
        employee_id="u1",
        work_date=DAY,
        kind=AdjustmentKind.ADD_RECORD,
        adjusted_in=datetime(2026, 3, 3, 8, 0),
        adjusted_out=datetime(2026, 3, 3, 17, 0),
        updated_at=datetime(2026, 3, 4, 9, 0),
    )
    newer = Adjustment(
        employee_id="u1",
        work_date=DAY,
        kind=AdjustmentKind.ADD_RECORD,
        adjusted_out=datetime(2026, 3, 3, 18, 0),
        updated_at=datetime(2026, 3, 5, 9, 0),
    )

    # Input order does not matter; updated_at decides.
    merged, warning = resolve_adjustment([newer, older])

    assert merged.adjusted_in == datetime(2026, 3, 3, 8, 0)
    assert merged.adjusted_out == datetime(2026, 3, 3, 18, 0)
    assert merged.updated_at == datetime(2026, 3, 5, 9, 0)
    assert warning is not None and "2 adjustments" in warning


def test_latest_kind_is_kept():
    add = Adjustment(
        employee_id="u1",
        work_date=DAY,
        kind=AdjustmentKind.ADD_RECORD,
        adjusted_in=datetime(2026, 3, 3, 8, 0),
        updated_at=datetime(2026, 3, 4, 9, 0),
    )
    forgive = Adjustment(
        employee_id="u1",
        work_date=DAY,
        kind=AdjustmentKind.FORGIVE_LATE,
        updated_at=datetime(2026, 3, 4, 10, 0),
    )

    merged, _ = resolve_adjustment([add, forgive])

    assert merged.kind == AdjustmentKind.FORGIVE_LATE
