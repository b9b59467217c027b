"""Progressive income tax and flat resident tax.

Income tax uses the quick-calculation form of a progressive table: find the
first bracket whose threshold covers taxable income, then
tax = taxable * rate - deduction. The deduction constant stands in for the
lower brackets, so the tax never has to be summed bracket by bracket.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..schemas import Deductions
from .schemas import IncomeTaxRate, TaxSchema

logger = logging.getLogger(__name__)


@dataclass
class IncomeTaxes:
    """Income and resident tax for a year (unrounded)."""

    taxable_income: float
    income_tax: float
    resident_tax: float


def calc_income_deductions(
    social_insurance_total: float,
    deductions: Deductions,
    tax_schema: TaxSchema,
) -> float:
    """Total amount deducted from gross income before tax.

    Social insurance + basic deduction + spouse deduction (if any) +
    per-dependent deduction + the scenario's other fixed deductions.
    """
    amounts = tax_schema.deductions
    total = amounts.basic + social_insurance_total
    if deductions.dependents.has_spouse:
        total += amounts.spouse
    total += deductions.dependents.number_of_dependents * amounts.dependent
    total += deductions.other_total
    return total


def find_tax_bracket(taxable_income: float, rates: List[IncomeTaxRate]) -> Optional[IncomeTaxRate]:
    """Find the first bracket (in table order) covering taxable income.

    A bracket with no threshold matches any income.

    Returns:
        Matching bracket, or None if the table has no covering row
    """
    for bracket in rates:
        if bracket.threshold is None or taxable_income <= bracket.threshold:
            return bracket
    return None


def calc_income_taxes(
    gross_annual_income: float,
    total_deductions: float,
    tax_schema: TaxSchema,
) -> IncomeTaxes:
    """Calculate income tax and resident tax for a year.

    Args:
        gross_annual_income: Gross income for the year
        total_deductions: Result of calc_income_deductions()
        tax_schema: Tax schema with bracket table and resident tax rate

    Returns:
        IncomeTaxes. If no bracket matches (malformed table), income tax
        is 0 rather than an error.
    """
    taxable = max(0, gross_annual_income - total_deductions)

    bracket = find_tax_bracket(taxable, tax_schema.income_tax_rates)
    if bracket is None:
        logger.warning(f"No income tax bracket covers taxable income {taxable:,.0f}; using 0")
        income_tax = 0
    else:
        income_tax = max(0, taxable * bracket.rate - bracket.deduction)

    resident_tax = taxable * tax_schema.resident_tax_rate

    return IncomeTaxes(
        taxable_income=taxable,
        income_tax=income_tax,
        resident_tax=resident_tax,
    )
