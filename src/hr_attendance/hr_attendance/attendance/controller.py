from __future__ import annotations

import csv
import io

from flask import Flask, Response, jsonify

from ..common.datetime_utils import end_of_month
from ..common.http import date_arg, iso, json_errors, month_arg, today_arg
from ..container import Container
from ..core.exceptions import ValidationError
from .model import DailyClassification, PeriodSummary


def day_to_dict(d: DailyClassification) -> dict:
    return {
        "date": d.work_date.isoformat(),
        "status": d.status.value,
        "late_minutes": d.late_minutes,
        "worked_minutes": d.worked_minutes,
        "work_hours": d.work_hours,
        "first_in": iso(d.first_in),
        "last_out": iso(d.last_out),
        "leave_type": d.leave_type,
        "holiday_name": d.holiday_name,
        "adjustment": d.adjustment.kind.value if d.adjustment else None,
        "review_needed": d.review_needed,
    }


def summary_to_dict(s: PeriodSummary) -> dict:
    return {
        "employee_id": s.employee_id,
        "display_name": s.display_name,
        "employee_status": s.employee_status.value if s.employee_status else None,
        "start_date": iso(s.start_date),
        "end_date": iso(s.end_date),
        "total_present": s.total_present,
        "total_late": s.total_late,
        "total_absent": s.total_absent,
        "total_leave": s.total_leave,
        "total_late_minutes": s.total_late_minutes,
        "status_counts": {k.value: v for k, v in s.status_counts.items()},
        "review_needed": s.review_needed,
        "warnings": list(s.warnings),
        "days": [day_to_dict(d) for d in s.days],
    }


def register(app: Flask, container: Container) -> None:
    def _summaries():
        start = date_arg("start")
        end = date_arg("end")
        service = container.attendance_summary_service
        if start or end:
            if not (start and end):
                raise ValidationError("start and end must be given together")
            return start, end, service.build_period_summary(start=start, end=end, today=today_arg())

        month = month_arg()
        return month, end_of_month(month), service.build_monthly_summary(month, today=today_arg())

    @app.route("/api/hr/attendance-summary", methods=["GET"], endpoint="attendance_summary")
    @json_errors
    def attendance_summary():
        start, end, summaries = _summaries()
        return jsonify(
            {
                "success": True,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "summaries": [summary_to_dict(s) for s in summaries],
            }
        )

    @app.route("/api/hr/attendance-summary.csv", methods=["GET"], endpoint="attendance_summary_csv")
    @json_errors
    def attendance_summary_csv():
        start, end, summaries = _summaries()

        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(["employee_id", "display_name", "date", "status", "late_minutes", "work_hours", "first_in", "last_out"])
        for s in summaries:
            for d in s.days:
                writer.writerow(
                    [
                        s.employee_id,
                        s.display_name,
                        d.work_date.isoformat(),
                        d.status.value,
                        d.late_minutes if d.late_minutes is not None else "",
                        d.work_hours or "",
                        d.first_in.strftime("%H:%M") if d.first_in else "",
                        d.last_out.strftime("%H:%M") if d.last_out else "",
                    ]
                )

        filename = f"attendance_summary_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return Response(
            buf.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
