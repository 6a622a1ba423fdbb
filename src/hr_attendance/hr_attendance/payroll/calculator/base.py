from __future__ import annotations

from abc import ABC, abstractmethod


class DeductionCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll deductions)."""

    @abstractmethod
    def day_rate(self, salary_monthly: float, base_days: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def minute_rate(self, salary_monthly: float, base_days: int) -> float:
        raise NotImplementedError
