from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Iterable, Optional

from ...attendance.model import DailyClassification
from ...employees.model import Employee
from ...leaves.model import LeaveAccounting
from ..model import PayrollLineItem, PayrollRule


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
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
        raise NotImplementedError
