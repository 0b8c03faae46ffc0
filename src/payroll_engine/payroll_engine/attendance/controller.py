from __future__ import annotations

from dataclasses import asdict
from datetime import date

from flask import Flask, jsonify

from ..common.request_args import date_arg, period_args


def register(app: Flask, container) -> None:
    @app.route("/api/shifts/<employee_id>", methods=["GET"], endpoint="shift_policy")
    def shift_policy(employee_id: str):
        work_date = date_arg("date", date.today())
        policy = container.shift_resolver.resolve(employee_id, work_date)
        return jsonify(
            {
                "employee_id": employee_id,
                "start_time": policy.start_time.strftime("%H:%M"),
                "end_time": policy.end_time.strftime("%H:%M"),
                "time_zone": policy.time_zone,
                "late_grace_period_minutes": policy.late_grace_period_minutes,
                "full_day_hours": policy.full_day_hours,
                "half_day_hours": policy.half_day_hours,
                "weekly_off_days": sorted(policy.weekly_off_days),
                "auto_extend": policy.auto_extend,
                "is_default": policy.is_default,
            }
        )

    @app.route("/api/attendance/<employee_id>", methods=["GET"], endpoint="attendance_history")
    def attendance_history(employee_id: str):
        today = date.today()
        start, end = period_args(today.replace(day=1), today)
        report = container.payroll_report_service.attendance_report(employee_id=employee_id, start=start, end=end)
        return jsonify({"rows": report.rows, "summary": asdict(report.summary), "failures": report.failures})
