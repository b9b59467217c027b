"""Pydantic schemas for tax schema validation.

These schemas validate the tax_schemas/*.yaml files and provide typed access
to income tax brackets, resident tax, and social insurance parameters.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IncomeTaxRate(BaseModel):
    """Single row of the income tax quick-calculation table."""
    model_config = ConfigDict(extra="forbid")

    threshold: Optional[float] = Field(default=None, description="Upper bound of taxable income (None = unbounded)")
    rate: float = Field(..., ge=0, le=1, description="Marginal rate as decimal")
    deduction: float = Field(default=0, ge=0, description="Flat amount subtracted from taxable * rate")


class RemunerationCappedRate(BaseModel):
    """Contribution rate applied to capped standard remuneration."""
    model_config = ConfigDict(extra="forbid")

    rate: float = Field(..., ge=0, le=1, description="Total rate (employer + employee)")
    max_standard_remuneration: float = Field(..., gt=0, description="Monthly standard remuneration cap")


class EmploymentInsuranceRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rate: float = Field(..., ge=0, le=1, description="Employee rate on gross income")


class SocialInsuranceRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    health_insurance: RemunerationCappedRate
    pension: RemunerationCappedRate
    employment_insurance: EmploymentInsuranceRules


class DeductionAmounts(BaseModel):
    """Fixed income deductions applied before tax."""
    model_config = ConfigDict(extra="forbid")

    basic: float = Field(default=0, ge=0)
    spouse: float = Field(default=0, ge=0)
    dependent: float = Field(default=0, ge=0, description="Per dependent")


class TaxSchema(BaseModel):
    """Complete tax schema for a version."""
    model_config = ConfigDict(extra="ignore")  # Allow unknown fields for forward compat

    version: str
    income_tax_rates: List[IncomeTaxRate]
    resident_tax_rate: float = Field(..., ge=0, le=1)
    social_insurance: SocialInsuranceRules
    deductions: DeductionAmounts = Field(default_factory=DeductionAmounts)

    def bracket_warnings(self) -> List[str]:
        """Describe problems with the bracket table without rejecting it.

        A malformed table degrades to zero income tax at projection time
        rather than failing to load.
        """
        warnings = []
        rates = self.income_tax_rates
        if not rates:
            return ["income_tax_rates is empty"]

        finite = [r.threshold for r in rates if r.threshold is not None]
        if finite != sorted(finite):
            warnings.append("income_tax_rates thresholds are not ascending")
        if rates[-1].threshold is not None:
            warnings.append("income_tax_rates has no final unbounded row")
        if any(r.threshold is None for r in rates[:-1]):
            warnings.append("income_tax_rates has an unbounded row before the last row")
        return warnings
