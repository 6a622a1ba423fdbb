from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..common.datetime_utils import at_time, to_local_naive
from ..core.enums import WeekendMode
from ..core.exceptions import ConfigurationError
from .model import HRPolicy, Holiday

SATURDAY = 5
SUNDAY = 6

_WEEKEND_DAYS = {
    WeekendMode.SAT_SUN: frozenset({SATURDAY, SUNDAY}),
    WeekendMode.SUN_ONLY: frozenset({SUNDAY}),
}


@dataclass(frozen=True)
class PolicyContext:
    """Per-day thresholds derived once from a policy snapshot and holiday list."""

    policy: HRPolicy
    holidays: Mapping[date, str] = field(default_factory=dict)
    tz: Optional[ZoneInfo] = None

    def work_start(self, day: date) -> datetime:
        return at_time(day, self.policy.work_start)

    def work_start_with_grace(self, day: date) -> datetime:
        return at_time(day, self.policy.work_start, extra_minutes=self.policy.grace_minutes)

    def absent_cutoff(self, day: date) -> datetime:
        return at_time(day, self.policy.absent_cutoff)

    def is_holiday(self, day: date) -> bool:
        return day in self.holidays

    def holiday_name(self, day: date) -> Optional[str]:
        return self.holidays.get(day)

    def is_weekend(self, day: date) -> bool:
        return day.weekday() in _WEEKEND_DAYS[self.policy.weekend_mode]

    def local_time(self, instant: datetime) -> datetime:
        return to_local_naive(instant, self.tz)

    def local_day(self, instant: datetime) -> date:
        return self.local_time(instant).date()


def resolve_policy(
    policy: Optional[HRPolicy],
    holidays: Iterable[Holiday] = (),
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> PolicyContext:
    """Derive a PolicyContext; holidays outside [start, end] are dropped when a range is given."""

    if policy is None:
        raise ConfigurationError("HR settings not found. Configure them before computing attendance.")

    tz = None
    if policy.timezone:
        try:
            tz = ZoneInfo(policy.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ConfigurationError(f"Unknown timezone {policy.timezone!r}")

    holiday_map: dict[date, str] = {}
    for h in holidays:
        if start and h.holiday_date < start:
            continue
        if end and h.holiday_date > end:
            continue
        holiday_map[h.holiday_date] = h.name

    return PolicyContext(policy=policy, holidays=holiday_map, tz=tz)
