from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Optional

from .base import PayrollCalculator
from ...attendance.model import DailyClassification
from ...attendance.summary import summarize
from ...common.validators import require_non_negative, require_positive
from ...core.exceptions import ConfigurationError
from ...employees.model import Employee
from ...leaves.model import LeaveAccounting
from ..model import PayrollLineItem, PayrollRule
from ..salary_structure import build_salary_breakdown

HALF = Decimal("0.5")


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: paid days = full + half/2, minus one day's pay per extra leave day.

    Net payable is not floored at zero.
    """

    def compute(
        self,
        employee: Employee,
        classifications: Iterable[DailyClassification],
        leave_accounting: LeaveAccounting,
        base_salary: Any,
        monthly_working_days: Any,
        *,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
        rule: Optional[PayrollRule] = None,
    ) -> PayrollLineItem:
        days = require_positive(monthly_working_days, "Monthly working days")
        base = require_non_negative(base_salary, "Base salary")
        if leave_accounting.employee_id != employee.employee_id:
            raise ConfigurationError(
                f"Leave accounting for {leave_accounting.employee_id} passed for employee {employee.employee_id}"
            )

        own = [c for c in classifications if c.employee_id == employee.employee_id]
        summary = summarize(employee.employee_id, own)
        if period_start is None:
            period_start = min((c.work_date for c in own), default=None)
        if period_end is None:
            period_end = max((c.work_date for c in own), default=None)

        per_day = base / days
        total_worked_days = Decimal(summary.full_days) + HALF * summary.half_days
        worked_salary = total_worked_days * per_day
        loss_of_pay = Decimal(leave_accounting.extra) * per_day

        return PayrollLineItem(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            period_start=period_start,
            period_end=period_end,
            base_salary=base,
            monthly_working_days=days,
            per_day_salary=per_day,
            full_days=summary.full_days,
            half_days=summary.half_days,
            absent_days=summary.absent_days,
            late_days=summary.late_days,
            total_worked_days=total_worked_days,
            worked_salary=worked_salary,
            extra_leave_days=leave_accounting.extra,
            loss_of_pay_deduction=loss_of_pay,
            net_payable_salary=worked_salary - loss_of_pay,
            leaves_used=leave_accounting.used,
            breakdown=build_salary_breakdown(base, rule) if rule is not None else None,
        )
