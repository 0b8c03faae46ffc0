from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional, Tuple

from ..common.validators import require_non_negative
from ..core.enums import PfCalculationMethod
from ..core.exceptions import ConfigurationError

CENT = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PayrollRule:
    """Company salary-structure settings used to split a monthly gross into components."""

    basic_percentage: Decimal = Decimal("40")
    hra_percentage: Decimal = Decimal("40")
    conveyance: Decimal = Decimal("1600")
    medical: Decimal = Decimal("1250")
    pf_calculation_method: PfCalculationMethod = PfCalculationMethod.PERCENTAGE
    pf_percentage: Decimal = Decimal("12")
    employer_pf_percentage: Decimal = Decimal("12")
    pf_fixed_amount_employee: Decimal = Decimal("1800")
    pf_fixed_amount_employer: Decimal = Decimal("1800")
    pt_slab1_limit: Decimal = Decimal("15000")
    pt_slab2_limit: Decimal = Decimal("20000")
    pt_slab1_amount: Decimal = Decimal("150")
    pt_slab2_amount: Decimal = Decimal("200")

    def __post_init__(self) -> None:
        for name in (
            "basic_percentage",
            "hra_percentage",
            "conveyance",
            "medical",
            "pf_percentage",
            "employer_pf_percentage",
            "pf_fixed_amount_employee",
            "pf_fixed_amount_employer",
            "pt_slab1_limit",
            "pt_slab2_limit",
            "pt_slab1_amount",
            "pt_slab2_amount",
        ):
            object.__setattr__(self, name, require_non_negative(getattr(self, name), name))
        object.__setattr__(self, "pf_calculation_method", PfCalculationMethod(self.pf_calculation_method))

        for name in ("basic_percentage", "hra_percentage", "pf_percentage", "employer_pf_percentage"):
            if getattr(self, name) > 100:
                raise ConfigurationError(f"{name} cannot exceed 100")
        if self.pt_slab2_limit < self.pt_slab1_limit:
            raise ConfigurationError("Professional tax slab 2 limit must not be below slab 1 limit")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PayrollRule":
        known = cls.__dataclass_fields__.keys()
        return cls(**{k: v for k, v in values.items() if k in known})


@dataclass(frozen=True)
class SalaryBreakdown:
    basic: Decimal
    hra: Decimal
    conveyance: Decimal
    medical: Decimal
    special: Decimal
    gross: Decimal
    pf: Decimal
    employer_pf: Decimal
    pt: Decimal


@dataclass(frozen=True)
class PayrollLineItem:
    """One employee's payroll for a reporting period.

    Money is kept unrounded; ``net_payable_salary`` is exactly
    ``worked_salary - loss_of_pay_deduction`` and may be negative.
    """

    employee_id: str
    employee_name: str
    period_start: date
    period_end: date
    base_salary: Decimal
    monthly_working_days: Decimal
    per_day_salary: Decimal
    full_days: int
    half_days: int
    absent_days: int
    late_days: int
    total_worked_days: Decimal
    worked_salary: Decimal
    extra_leave_days: int
    loss_of_pay_deduction: Decimal
    net_payable_salary: Decimal
    leaves_used: int = 0
    breakdown: Optional[SalaryBreakdown] = None
    approved_overtime: int = 0


@dataclass(frozen=True)
class PayrollFailure:
    """Why an employee (or one of their days) could not be reconciled."""

    employee_id: str
    work_date: Optional[date]
    error_type: str
    message: str


@dataclass(frozen=True)
class PayrollRun:
    period_start: date
    period_end: date
    items: Tuple[PayrollLineItem, ...] = field(default_factory=tuple)
    failures: Tuple[PayrollFailure, ...] = field(default_factory=tuple)

    @property
    def total_net_payable(self) -> Decimal:
        return sum((item.net_payable_salary for item in self.items), Decimal("0"))
