from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.request_args import date_arg


def register(app: Flask, container) -> None:
    @app.route("/api/leaves/<employee_id>/balance", methods=["GET"], endpoint="leave_balance")
    def leave_balance(employee_id: str):
        as_of = date_arg("as_of", date.today())
        month = (request.args.get("month") or "").strip() or None
        balance = container.payroll_report_service.leave_balance(employee_id=employee_id, as_of=as_of, month=month)

        accounting = balance.accounting
        return jsonify(
            {
                "employee_id": employee_id,
                "leave_year": {"start": accounting.window.start.isoformat(), "end": accounting.window.end.isoformat()},
                "earned": accounting.earned,
                "used": accounting.used,
                "pending": accounting.pending,
                "extra": accounting.extra,
                "total_approved_days": accounting.total_approved_days,
                "sandwich_leaves": {"count": balance.sandwich.count, "days": balance.sandwich.days},
            }
        )
