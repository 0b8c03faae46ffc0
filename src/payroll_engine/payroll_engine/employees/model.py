from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Payroll view of an employee: identity plus the salary of the current experience record."""

    employee_id: str
    name: str
    base_salary: Decimal
    department: Optional[str] = None
    role: Optional[str] = None
    is_active: bool = True
