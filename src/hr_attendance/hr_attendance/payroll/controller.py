from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.http import json_errors, month_arg, today_arg
from ..container import Container
from ..core.exceptions import ValidationError


def _half_arg() -> int:
    raw = request.args.get("period") or "1"
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("period must be 1 or 2")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/hr/payroll/workdays", methods=["GET"], endpoint="payroll_workdays")
    @json_errors
    def payroll_workdays():
        month = month_arg()
        half = _half_arg()
        rows = container.payroll_service.count_workdays(month=month, half=half, today=today_arg())
        return jsonify(
            {
                "success": True,
                "month": month.strftime("%Y-%m"),
                "period": half,
                "employees": [
                    {
                        "employee_id": r.employee_id,
                        "display_name": r.display_name,
                        "pay_type": r.pay_type.value if r.pay_type else None,
                        "salary_monthly": r.salary_monthly,
                        "paid_working_days": r.paid_working_days,
                    }
                    for r in rows
                ],
            }
        )

    @app.route("/api/hr/payroll/metrics/<employee_id>", methods=["GET"], endpoint="payroll_metrics")
    @json_errors
    def payroll_metrics(employee_id: str):
        metrics = container.payroll_service.compute_metrics(
            employee_id=employee_id,
            month=month_arg(),
            half=_half_arg(),
            today=today_arg(),
        )
        att = metrics.attendance
        return jsonify(
            {
                "success": True,
                "attendance": {
                    "scheduled_work_days": att.scheduled_work_days,
                    "present_days": att.present_days,
                    "late_days": att.late_days,
                    "late_minutes": att.late_minutes,
                    "absent_units": att.absent_units,
                    "leave_days": att.leave_days,
                    "payable_units": att.payable_units,
                    "warnings": att.warnings,
                    "day_logs": [
                        {"date": log.work_date.isoformat(), "type": log.kind, "detail": log.detail}
                        for log in att.day_logs
                    ],
                },
                "leave": asdict(metrics.leave),
                "auto_deductions": [asdict(d) for d in metrics.auto_deductions],
                "calc_notes": metrics.calc_notes,
                "sso_employee": metrics.sso_employee,
            }
        )
