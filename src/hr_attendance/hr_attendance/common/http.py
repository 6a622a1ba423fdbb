from __future__ import annotations

from datetime import date
from functools import wraps
from typing import Optional

from flask import jsonify, request

from ..core.exceptions import ConfigurationError, ValidationError
from .datetime_utils import now_local, parse_iso_date, parse_month


def json_errors(view):
    """Map domain errors raised by a view to JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except ConfigurationError as e:
            return jsonify({"success": False, "message": str(e)}), 409

    return wrapper


def month_arg(name: str = "month") -> date:
    raw = request.args.get(name)
    if not raw:
        return now_local().date().replace(day=1)
    try:
        return parse_month(raw)
    except ValueError:
        raise ValidationError(f"{name} must be YYYY-MM")


def date_arg(name: str) -> Optional[date]:
    raw = request.args.get(name)
    if not raw:
        return None
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError(f"{name} must be YYYY-MM-DD")


def today_arg() -> date:
    return date_arg("today") or now_local().date()


def iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None
