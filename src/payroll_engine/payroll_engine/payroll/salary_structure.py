from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..common.validators import require_non_negative
from ..core.enums import PfCalculationMethod
from ..core.exceptions import ConfigurationError
from .model import PayrollRule, SalaryBreakdown, quantize_money

HUNDRED = Decimal("100")


def professional_tax(gross: Decimal, rule: PayrollRule) -> Decimal:
    """Slab lookup: nothing below slab 1, slab 1 amount below slab 2, slab 2 amount above."""
    if gross < rule.pt_slab1_limit:
        return Decimal("0")
    if gross < rule.pt_slab2_limit:
        return rule.pt_slab1_amount
    return rule.pt_slab2_amount


def build_salary_breakdown(monthly_gross: Any, rule: PayrollRule) -> SalaryBreakdown:
    """Split a monthly gross into basic/HRA/allowances and compute statutory deductions.

    HRA is a percentage of basic. Fixed allowances are paid only up to what
    the gross leaves after basic and HRA; the remainder is the special allowance.
    """
    gross = quantize_money(require_non_negative(monthly_gross, "Monthly gross"))

    basic = quantize_money(gross * rule.basic_percentage / HUNDRED)
    hra = quantize_money(basic * rule.hra_percentage / HUNDRED)
    remaining = gross - basic - hra
    if remaining < 0:
        raise ConfigurationError("Basic and HRA percentages exceed the monthly gross")

    conveyance = min(rule.conveyance, remaining)
    remaining -= conveyance
    medical = min(rule.medical, remaining)
    remaining -= medical

    if rule.pf_calculation_method == PfCalculationMethod.PERCENTAGE:
        pf = quantize_money(basic * rule.pf_percentage / HUNDRED)
        employer_pf = quantize_money(basic * rule.employer_pf_percentage / HUNDRED)
    else:
        pf = rule.pf_fixed_amount_employee
        employer_pf = rule.pf_fixed_amount_employer

    return SalaryBreakdown(
        basic=basic,
        hra=hra,
        conveyance=quantize_money(conveyance),
        medical=quantize_money(medical),
        special=quantize_money(remaining),
        gross=gross,
        pf=quantize_money(pf),
        employer_pf=quantize_money(employer_pf),
        pt=quantize_money(professional_tax(gross, rule)),
    )
