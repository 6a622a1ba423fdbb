from __future__ import annotations

from ...core.constants import WORK_HOURS_PER_DAY
from .base import DeductionCalculator


class StandardDeductionCalculator(DeductionCalculator):
    """Standard rule: salary / base days per day, an 8 hour day per minute."""

    def day_rate(self, salary_monthly: float, base_days: int) -> float:
        return salary_monthly / max(int(base_days), 1)

    def minute_rate(self, salary_monthly: float, base_days: int) -> float:
        return self.day_rate(salary_monthly, base_days) / WORK_HOURS_PER_DAY / 60
