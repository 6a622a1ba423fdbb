from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from ..core.exceptions import ConfigurationError, ValidationError
from ..policy.model import PayrollSettings


@dataclass(frozen=True)
class PayPeriod:
    start: date
    end: date
    half: int

    @property
    def run_id(self) -> str:
        return f"{self.start.strftime('%Y-%m')}-{self.half}"


def resolve_pay_period(year: int, month: int, half: int, settings: PayrollSettings) -> PayPeriod:
    """Half 1 runs period1_start..period1_end, half 2 runs period2_start..end of month."""

    if half not in (1, 2):
        raise ValidationError("period must be 1 or 2")

    last_day = calendar.monthrange(year, month)[1]

    def clamp(day: int) -> int:
        return min(max(day, 1), last_day)

    if half == 1:
        start, end = clamp(settings.period1_start), clamp(settings.period1_end)
    else:
        start, end = clamp(settings.period2_start), last_day

    if end < start:
        raise ConfigurationError(f"Pay period {half} ends before it starts ({start} > {end})")
    return PayPeriod(start=date(year, month, start), end=date(year, month, end), half=half)
