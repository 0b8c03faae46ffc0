from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.request_args import period_args
from .service import line_item_row


def register(app: Flask, container) -> None:
    @app.route("/api/payroll/report", methods=["GET"], endpoint="payroll_report")
    def payroll_report():
        today = date.today()
        start, end = period_args(today.replace(day=1), today)
        employee_ids = [v for v in request.args.getlist("employee_id") if v.strip()] or None

        svc = container.payroll_report_service
        run = svc.run(start=start, end=end, employee_ids=employee_ids)

        if request.args.get("format") == "csv":
            filename = f"payroll_{start:%Y%m%d}_{end:%Y%m%d}.csv"
            return app.response_class(
                svc.export_csv(run).encode("utf-8-sig"),
                mimetype="text/csv",
                headers={"Content-Disposition": f"attachment; filename={filename}"},
            )

        return jsonify(
            {
                "period": {"start": start.isoformat(), "end": end.isoformat()},
                "items": [line_item_row(item) for item in run.items],
                "failures": [
                    {
                        "employee_id": f.employee_id,
                        "date": f.work_date.isoformat() if f.work_date else None,
                        "error": f.error_type,
                        "message": f.message,
                    }
                    for f in run.failures
                ],
            }
        )
