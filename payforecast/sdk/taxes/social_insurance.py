"""Social insurance contribution calculations.

Health insurance and pension are charged on a banded "standard
remuneration" (monthly gross rounded to the nearest 1,000) which is capped
before any rate is applied. Schema rates are combined employer + employee
rates; only the employee half is computed here. Employment insurance is a
flat employee rate on gross income with no band and no cap.
"""

import logging
from dataclasses import dataclass

from ..rounding import round_to_band
from .schemas import TaxSchema

logger = logging.getLogger(__name__)

STANDARD_REMUNERATION_BAND = 1000


@dataclass
class SocialInsurance:
    """Annual employee social insurance contributions (unrounded)."""

    standard_remuneration: float
    health_insurance: float
    pension_insurance: float
    employment_insurance: float

    @property
    def total(self) -> float:
        return self.health_insurance + self.pension_insurance + self.employment_insurance


def calc_standard_remuneration(gross_annual_income: float, tax_schema: TaxSchema) -> float:
    """Monthly standard remuneration, banded and capped at the health insurance maximum."""
    monthly_gross = gross_annual_income / 12
    band = round_to_band(monthly_gross, STANDARD_REMUNERATION_BAND)
    return min(band, tax_schema.social_insurance.health_insurance.max_standard_remuneration)


def calc_social_insurance(gross_annual_income: float, tax_schema: TaxSchema) -> SocialInsurance:
    """Calculate annual employee social insurance contributions.

    Args:
        gross_annual_income: Gross income for the year
        tax_schema: Tax schema with social insurance rates and caps

    Returns:
        SocialInsurance with health, pension, and employment contributions
    """
    rules = tax_schema.social_insurance
    standard = calc_standard_remuneration(gross_annual_income, tax_schema)

    health = standard * (rules.health_insurance.rate / 2) * 12
    pension_base = min(standard, rules.pension.max_standard_remuneration)
    pension = pension_base * (rules.pension.rate / 2) * 12
    employment = gross_annual_income * rules.employment_insurance.rate

    logger.debug(
        f"social insurance: standard={standard:,.0f} health={health:,.0f} "
        f"pension={pension:,.0f} employment={employment:,.0f}"
    )

    return SocialInsurance(
        standard_remuneration=standard,
        health_insurance=health,
        pension_insurance=pension,
        employment_insurance=employment,
    )
