"""Social Security Office (SSO) contribution helpers."""

from __future__ import annotations

import math


def round2(value: float, decimals: int = 2) -> float:
    """Round half up to the given number of decimals."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def clamp_sso_base(salary_monthly: float, min_base: float, cap: float) -> float:
    return max(min_base, min(salary_monthly, cap))


def calc_sso_monthly(salary_monthly: float, percent: float, min_base: float, cap: float) -> float:
    if salary_monthly <= 0 or percent <= 0:
        return 0.0
    base = clamp_sso_base(salary_monthly, min_base, cap)
    return round2(base * (percent / 100))


def split_sso_half(sso_monthly: float) -> tuple[float, float]:
    """Split a monthly amount over two pay periods; p1 + p2 always equals the total."""
    p1 = round2(sso_monthly / 2)
    p2 = round2(sso_monthly - p1)
    return p1, p2
