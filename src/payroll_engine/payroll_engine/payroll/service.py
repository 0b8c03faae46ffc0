from __future__ import annotations

import csv
import io
import logging
from dataclasses import asdict, dataclass, replace
from datetime import date
from typing import Any, Iterable, Optional

from ..attendance.classifier import DailyAttendanceClassifier
from ..attendance.corrections import apply_punch_out_correction
from ..attendance.model import DailyPunchRecord
from ..attendance.repository import OvertimeRepository, PunchOutCorrectionRepository, PunchRecordRepository
from ..attendance.summary import AttendanceSummary, summarize
from ..common.datetime_utils import format_duration
from ..core.constants import MONTHLY_WORKING_DAYS
from ..core.exceptions import DomainError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..leaves.accountant import LeaveYearAccountant
from ..leaves.model import LeaveAccounting, SandwichLeaves, holiday_dates
from ..leaves.repository import HolidayRepository, LeaveRepository
from ..leaves.sandwich import calculate_sandwich_leaves
from ..shifts.resolver import ShiftPolicyResolver
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollFailure, PayrollLineItem, PayrollRule, PayrollRun, quantize_money

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "employee_id",
    "employee_name",
    "period_start",
    "period_end",
    "base_salary",
    "per_day_salary",
    "full_days",
    "half_days",
    "absent_days",
    "late_days",
    "total_worked_days",
    "worked_salary",
    "extra_leave_days",
    "loss_of_pay_deduction",
    "net_payable_salary",
    "approved_overtime",
]


@dataclass(frozen=True)
class AttendanceReport:
    rows: list[dict]
    summary: AttendanceSummary
    failures: list[dict]


@dataclass(frozen=True)
class LeaveBalance:
    accounting: LeaveAccounting
    sandwich: SandwichLeaves


def line_item_row(item: PayrollLineItem) -> dict:
    """Display row: money rounded to cents, net derived from the rounded parts."""
    worked = quantize_money(item.worked_salary)
    loss_of_pay = quantize_money(item.loss_of_pay_deduction)
    row = {
        "employee_id": item.employee_id,
        "employee_name": item.employee_name,
        "period_start": item.period_start.isoformat() if item.period_start else None,
        "period_end": item.period_end.isoformat() if item.period_end else None,
        "base_salary": str(quantize_money(item.base_salary)),
        "per_day_salary": str(quantize_money(item.per_day_salary)),
        "full_days": item.full_days,
        "half_days": item.half_days,
        "absent_days": item.absent_days,
        "late_days": item.late_days,
        "total_worked_days": str(item.total_worked_days),
        "worked_salary": str(worked),
        "extra_leave_days": item.extra_leave_days,
        "loss_of_pay_deduction": str(loss_of_pay),
        "net_payable_salary": str(worked - loss_of_pay),
        "approved_overtime": item.approved_overtime,
    }
    if item.breakdown is not None:
        row["breakdown"] = {k: str(v) for k, v in asdict(item.breakdown).items()}
    return row


class PayrollReportService:
    """Run the reconciliation pipeline (policy → classification → leave accounting → payroll).

    All stores are read once per employee at the start of a run; the
    computation itself is pure. Failures are collected per employee and per
    date so one broken record never blocks the rest of the batch.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        punches: PunchRecordRepository,
        leaves: LeaveRepository,
        holidays: HolidayRepository,
        resolver: ShiftPolicyResolver,
        *,
        classifier: Optional[DailyAttendanceClassifier] = None,
        accountant: Optional[LeaveYearAccountant] = None,
        calculator: Optional[PayrollCalculator] = None,
        monthly_working_days: Any = MONTHLY_WORKING_DAYS,
        payroll_rule: Optional[PayrollRule] = None,
        corrections: Optional[PunchOutCorrectionRepository] = None,
        overtime: Optional[OvertimeRepository] = None,
    ):
        self._employees = employees
        self._punches = punches
        self._leaves = leaves
        self._holidays = holidays
        self._resolver = resolver
        self._classifier = classifier or DailyAttendanceClassifier()
        self._accountant = accountant or LeaveYearAccountant()
        self._calculator = calculator or StandardPayrollCalculator()
        self._monthly_working_days = monthly_working_days
        self._rule = payroll_rule
        self._corrections = corrections
        self._overtime = overtime

    def run(
        self,
        *,
        start: date,
        end: date,
        employee_ids: Optional[Iterable[str]] = None,
        as_of: Optional[date] = None,
        today: Optional[date] = None,
    ) -> PayrollRun:
        if end < start:
            raise ValidationError("Period end must be on or after period start")
        as_of = as_of or end

        employees, failures = self._select_employees(employee_ids)
        holidays = holiday_dates(self._holidays.list_between(start, end))
        policies = self._resolver.resolve_many((e.employee_id for e in employees), start)

        items: list[PayrollLineItem] = []
        for employee in employees:
            try:
                records, correction_failures = self._load_records(employee.employee_id, start, end)
                failures.extend(correction_failures)
                ranged = self._classifier.classify_range(
                    employee_id=employee.employee_id,
                    records=records,
                    policy=policies[employee.employee_id],
                    start=start,
                    end=end,
                    today=today,
                    holiday_dates=holidays,
                )
                failures.extend(
                    PayrollFailure(f.employee_id, f.work_date, "DataIntegrityError", f.message) for f in ranged.failures
                )

                accounting = self._accountant.account(
                    employee.employee_id, self._leaves.list_for_employee(employee.employee_id), as_of
                )
                item = self._calculator.compute(
                    employee,
                    ranged.classifications,
                    accounting,
                    employee.base_salary,
                    self._monthly_working_days,
                    period_start=start,
                    period_end=end,
                    rule=self._rule,
                )
                if self._overtime is not None:
                    approved = self._overtime.count_approved(employee.employee_id, start, end)
                    item = replace(item, approved_overtime=approved)
                items.append(item)
            except (DomainError, ValueError) as ex:
                logger.warning("[payroll] employee_id=%s skipped: %s", employee.employee_id, ex)
                failures.append(PayrollFailure(employee.employee_id, None, type(ex).__name__, str(ex)))

        run = PayrollRun(period_start=start, period_end=end, items=tuple(items), failures=tuple(failures))
        logger.info(
            "[payroll] run %s..%s: %s line items, %s failures, net payable %s",
            start, end, len(items), len(failures), quantize_money(run.total_net_payable),
        )
        return run

    def _load_records(
        self, employee_id: str, start: date, end: date
    ) -> tuple[list[DailyPunchRecord], list[PayrollFailure]]:
        """Stored punch records with approved punch-out corrections applied.

        A correction that cannot be applied is reported for its date; the stored record is used as is.
        """
        records = list(self._punches.list_for_employee(employee_id, start, end))
        if self._corrections is None:
            return records, []

        failures: list[PayrollFailure] = []
        for correction in self._corrections.list_approved_for_employee(employee_id, start, end):
            positions = [i for i, r in enumerate(records) if r.work_date == correction.work_date]
            if not positions:
                logger.warning(
                    "[payroll] correction %s has no punch record employee_id=%s date=%s",
                    correction.request_id, employee_id, correction.work_date,
                )
                failures.append(
                    PayrollFailure(employee_id, correction.work_date, "ValidationError", "no punch record to correct")
                )
                continue
            for i in positions:
                try:
                    records[i] = apply_punch_out_correction(records[i], correction)
                except DomainError as ex:
                    logger.warning(
                        "[payroll] correction %s not applied employee_id=%s date=%s: %s",
                        correction.request_id, employee_id, correction.work_date, ex,
                    )
                    failures.append(PayrollFailure(employee_id, correction.work_date, type(ex).__name__, str(ex)))
        return records, failures

    def _select_employees(self, employee_ids: Optional[Iterable[str]]) -> tuple[list[Employee], list[PayrollFailure]]:
        if employee_ids is None:
            return list(self._employees.list_active()), []

        employees: list[Employee] = []
        failures: list[PayrollFailure] = []
        for employee_id in dict.fromkeys(employee_ids):
            employee = self._employees.get_by_id(employee_id)
            if employee is None or not employee.is_active:
                failures.append(PayrollFailure(employee_id, None, "ValidationError", "Employee not found or inactive"))
                continue
            employees.append(employee)
        return employees, failures

    def attendance_report(
        self,
        *,
        employee_id: str,
        start: date,
        end: date,
        today: Optional[date] = None,
    ) -> AttendanceReport:
        """Per-day rows for attendance history views."""
        if end < start:
            raise ValidationError("Period end must be on or after period start")

        policy = self._resolver.resolve(employee_id, start)
        records, correction_failures = self._load_records(employee_id, start, end)
        ranged = self._classifier.classify_range(
            employee_id=employee_id,
            records=records,
            policy=policy,
            start=start,
            end=end,
            today=today,
            holiday_dates=holiday_dates(self._holidays.list_between(start, end)),
        )

        rows = [
            {
                "employee_id": c.employee_id,
                "date": c.work_date.isoformat(),
                "worked": format_duration(c.worked_duration),
                "worked_minutes": int(c.worked_duration.total_seconds() // 60),
                "login_status": c.login_status.value,
                "worked_category": c.worked_category.value,
                "late_by_minutes": c.late_by_minutes,
                "in_progress": c.in_progress,
                "missed_punch_out": c.missed_punch_out,
                "punch_out_overridden": c.punch_out_overridden,
                "excluded": c.exclusion.value if c.exclusion else None,
                "punch_in_within_geofence": c.punch_in_within_geofence,
                "punch_out_within_geofence": c.punch_out_within_geofence,
            }
            for c in ranged.classifications
        ]
        failures = [{"date": f.work_date.isoformat(), "message": f.message} for f in correction_failures]
        failures += [{"date": f.work_date.isoformat(), "message": f.message} for f in ranged.failures]
        return AttendanceReport(rows=rows, summary=summarize(employee_id, ranged.classifications), failures=failures)

    def leave_balance(self, *, employee_id: str, as_of: date, month: Optional[str] = None) -> LeaveBalance:
        requests = self._leaves.list_for_employee(employee_id)
        accounting = self._accountant.account(employee_id, requests, as_of)
        holidays = self._holidays.list_between(accounting.window.start, accounting.window.end)
        return LeaveBalance(accounting=accounting, sandwich=calculate_sandwich_leaves(requests, holidays, month=month))

    @staticmethod
    def export_csv(run: PayrollRun) -> str:
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=CSV_COLUMNS, extrasaction="ignore")
        writer.writeheader()
        for item in run.items:
            writer.writerow(line_item_row(item))
        return buf.getvalue()
