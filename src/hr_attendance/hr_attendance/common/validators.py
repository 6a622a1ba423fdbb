from __future__ import annotations

from datetime import time
from typing import Any, Optional

from ..core.exceptions import ConfigurationError
from .datetime_utils import parse_hhmm


def require_time_of_day(value: Optional[str], field_name: str, default: str) -> time:
    raw = (value or "").strip() or default
    try:
        return parse_hhmm(raw)
    except ValueError:
        raise ConfigurationError(f"{field_name} must be HH:MM, got {raw!r}")


def require_non_negative_int(value: Any, field_name: str, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{field_name} must be a whole number, got {value!r}")
    if number < 0:
        raise ConfigurationError(f"{field_name} must not be negative")
    return number
