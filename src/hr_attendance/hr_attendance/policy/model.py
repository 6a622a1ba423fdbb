from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any, Mapping, Optional

from ..common.validators import require_non_negative_int, require_time_of_day
from ..core import constants
from ..core.enums import OverLimitMode, WeekendMode
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class Holiday:
    """Thực thể miền (domain): Ngày nghỉ lễ của công ty."""

    holiday_date: date
    name: str


@dataclass(frozen=True)
class LeaveTypePolicy:
    annual_entitlement: Optional[float] = None
    over_limit_mode: Optional[OverLimitMode] = None
    deduction_base_days: Optional[int] = None


@dataclass(frozen=True)
class PayrollSettings:
    period1_start: int = constants.DEFAULT_PERIOD1_START
    period1_end: int = constants.DEFAULT_PERIOD1_END
    period2_start: int = constants.DEFAULT_PERIOD2_START
    salary_deduction_base_days: int = constants.DEFAULT_SALARY_DEDUCTION_BASE_DAYS


@dataclass(frozen=True)
class SsoSettings:
    employee_percent: float = 0.0
    employer_percent: float = 0.0
    monthly_cap: float = 0.0
    min_base: float = 0.0


@dataclass(frozen=True)
class HRPolicy:
    """Snapshot of the HR settings document.

    A computation always runs against exactly one snapshot; callers pass it in
    explicitly instead of reading it from global state.
    """

    work_start: time
    absent_cutoff: time
    grace_minutes: int = constants.DEFAULT_GRACE_MINUTES
    weekend_mode: WeekendMode = WeekendMode.SAT_SUN
    work_end: Optional[time] = None
    timezone: Optional[str] = None
    payroll: PayrollSettings = field(default_factory=PayrollSettings)
    sso: SsoSettings = field(default_factory=SsoSettings)
    leave_types: Mapping[str, LeaveTypePolicy] = field(default_factory=dict)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "HRPolicy":
        """Build a policy from the raw settings document (camelCase keys)."""

        weekend_raw = (doc.get("weekendPolicy") or {}).get("mode") or WeekendMode.SAT_SUN.value
        try:
            weekend_mode = WeekendMode(weekend_raw)
        except ValueError:
            raise ConfigurationError(f"Unknown weekend mode {weekend_raw!r}")

        work_end_raw = (doc.get("workEnd") or "").strip()
        work_end = require_time_of_day(work_end_raw, "workEnd", work_end_raw) if work_end_raw else None

        return cls(
            work_start=require_time_of_day(doc.get("workStart"), "workStart", constants.DEFAULT_WORK_START),
            absent_cutoff=require_time_of_day(
                doc.get("absentCutoffTime"), "absentCutoffTime", constants.DEFAULT_ABSENT_CUTOFF
            ),
            grace_minutes=require_non_negative_int(
                doc.get("graceMinutes"), "graceMinutes", constants.DEFAULT_GRACE_MINUTES
            ),
            weekend_mode=weekend_mode,
            work_end=work_end,
            timezone=doc.get("timezone") or None,
            payroll=_payroll_from(doc.get("payroll") or {}),
            sso=_sso_from(doc.get("sso") or {}),
            leave_types=_leave_types_from((doc.get("leavePolicy") or {}).get("leaveTypes") or {}),
        )


def _payroll_from(raw: Mapping[str, Any]) -> PayrollSettings:
    return PayrollSettings(
        period1_start=require_non_negative_int(raw.get("period1Start"), "payroll.period1Start", constants.DEFAULT_PERIOD1_START)
        or constants.DEFAULT_PERIOD1_START,
        period1_end=require_non_negative_int(raw.get("period1End"), "payroll.period1End", constants.DEFAULT_PERIOD1_END)
        or constants.DEFAULT_PERIOD1_END,
        period2_start=require_non_negative_int(raw.get("period2Start"), "payroll.period2Start", constants.DEFAULT_PERIOD2_START)
        or constants.DEFAULT_PERIOD2_START,
        salary_deduction_base_days=require_non_negative_int(
            raw.get("salaryDeductionBaseDays"),
            "payroll.salaryDeductionBaseDays",
            constants.DEFAULT_SALARY_DEDUCTION_BASE_DAYS,
        )
        or constants.DEFAULT_SALARY_DEDUCTION_BASE_DAYS,
    )


def _sso_from(raw: Mapping[str, Any]) -> SsoSettings:
    return SsoSettings(
        employee_percent=float(raw.get("employeePercent") or 0),
        employer_percent=float(raw.get("employerPercent") or 0),
        monthly_cap=float(raw.get("monthlyCap") or 0),
        min_base=float(raw.get("minBase") or 0),
    )


def _leave_types_from(raw: Mapping[str, Any]) -> dict[str, LeaveTypePolicy]:
    out: dict[str, LeaveTypePolicy] = {}
    for leave_type, policy in raw.items():
        policy = policy or {}
        handling = policy.get("overLimitHandling") or {}
        mode_raw = handling.get("mode")
        try:
            mode = OverLimitMode(mode_raw) if mode_raw else None
        except ValueError:
            raise ConfigurationError(f"Unknown over-limit mode {mode_raw!r} for {leave_type}")

        entitlement = policy.get("annualEntitlement")
        out[str(leave_type)] = LeaveTypePolicy(
            annual_entitlement=float(entitlement) if entitlement not in (None, "") else None,
            over_limit_mode=mode,
            deduction_base_days=int(handling["salaryDeductionBaseDays"]) if handling.get("salaryDeductionBaseDays") else None,
        )
    return out
