from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional, Sequence

import pytest

from src.payroll_engine.payroll_engine.attendance.model import DailyPunchRecord, PunchOutCorrection
from src.payroll_engine.payroll_engine.core.enums import CorrectionStatus, LeaveStatus
from src.payroll_engine.payroll_engine.employees.model import Employee
from src.payroll_engine.payroll_engine.leaves.model import Holiday, LeaveRequest
from src.payroll_engine.payroll_engine.payroll.service import PayrollReportService
from src.payroll_engine.payroll_engine.shifts.model import ShiftPolicy
from src.payroll_engine.payroll_engine.shifts.resolver import ShiftPolicyResolver

PERIOD_START = date(2025, 3, 3)  # Monday
PERIOD_END = date(2025, 3, 8)  # Saturday, a holiday


class InMemoryEmployees:
    def __init__(self, employees: Sequence[Employee]):
        self._by_id = {e.employee_id: e for e in employees}

    def list_active(self) -> Sequence[Employee]:
        return [e for e in self._by_id.values() if e.is_active]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)


class InMemoryPunches:
    def __init__(self, records: Sequence[DailyPunchRecord]):
        self._records = list(records)

    def list_for_employee(self, employee_id: str, start: date, end: date) -> Sequence[DailyPunchRecord]:
        return [r for r in self._records if r.employee_id == employee_id and start <= r.work_date <= end]


class InMemoryCorrections:
    def __init__(self, corrections: Sequence[PunchOutCorrection]):
        self._corrections = list(corrections)

    def list_approved_for_employee(self, employee_id: str, start: date, end: date) -> Sequence[PunchOutCorrection]:
        return [
            c
            for c in self._corrections
            if c.employee_id == employee_id and start <= c.work_date <= end and c.status == CorrectionStatus.APPROVED
        ]


class InMemoryOvertime:
    def __init__(self, approved_dates: dict[str, Sequence[date]]):
        self._approved = approved_dates

    def count_approved(self, employee_id: str, start: date, end: date) -> int:
        return sum(1 for d in self._approved.get(employee_id, ()) if start <= d <= end)


class InMemoryLeaves:
    def __init__(self, requests: Sequence[LeaveRequest]):
        self._requests = list(requests)

    def list_for_employee(self, employee_id: str, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        return [
            r for r in self._requests if r.employee_id == employee_id and (status is None or r.status == status)
        ]


class InMemoryHolidays:
    def __init__(self, holidays: Sequence[Holiday]):
        self._holidays = list(holidays)

    def list_between(self, start: date, end: date) -> Sequence[Holiday]:
        return [h for h in self._holidays if h.start_date <= end and h.end_date >= start]


class InMemoryPolicies:
    def __init__(self, policies: Optional[dict[str, ShiftPolicy]] = None):
        self._policies = policies or {}

    def get_active_for_employee(self, employee_id: str) -> Optional[ShiftPolicy]:
        return self._policies.get(employee_id)


def _worked(employee_id: str, day: date, start: time, end: time) -> DailyPunchRecord:
    return DailyPunchRecord(
        employee_id=employee_id,
        work_date=day,
        punch_in=datetime.combine(day, start),
        punch_out=datetime.combine(day, end),
    )


@pytest.fixture
def payroll_service() -> PayrollReportService:
    """e1 works Mon-Fri, e2 has a malformed Tuesday, e3 is inactive, e4 has a negative salary."""
    employees = InMemoryEmployees(
        [
            Employee(employee_id="e1", name="Asha", base_salary=Decimal("26000")),
            Employee(employee_id="e2", name="Ravi", base_salary=Decimal("52000")),
            Employee(employee_id="e3", name="Old Hand", base_salary=Decimal("30000"), is_active=False),
            Employee(employee_id="e4", name="Broken", base_salary=Decimal("-1")),
        ]
    )
    records = [_worked("e1", date(2025, 3, d), time(9, 0), time(18, 0)) for d in range(3, 8)]
    records.append(_worked("e2", date(2025, 3, 4), time(18, 0), time(9, 0)))

    leaves = InMemoryLeaves(
        [
            LeaveRequest(1, "e1", date(2024, 6, 3), date(2024, 6, 3), LeaveStatus.APPROVED),
            LeaveRequest(2, "e1", date(2025, 1, 10), date(2025, 1, 10), LeaveStatus.APPROVED),
            LeaveRequest(3, "e2", date(2025, 2, 10), date(2025, 2, 11), LeaveStatus.REJECTED),
        ]
    )
    holidays = InMemoryHolidays([Holiday(name="Founders Day", start_date=PERIOD_END, end_date=PERIOD_END)])

    return PayrollReportService(
        employees,
        InMemoryPunches(records),
        leaves,
        holidays,
        ShiftPolicyResolver(InMemoryPolicies()),
        monthly_working_days=26,
    )


@pytest.fixture
def shift_resolver() -> ShiftPolicyResolver:
    return ShiftPolicyResolver(InMemoryPolicies())
