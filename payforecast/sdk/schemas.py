"""Pydantic schemas for scenarios and projection results.

Scenario schemas use extra='forbid' to reject unknown fields, ensuring
typos in scenario files cause clear errors rather than silent ignoring.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


# =============================================================================
# Scenario Schemas - user-defined compensation inputs
# =============================================================================


class Duration(BaseModel):
    """How long an allowance stays active across the projection horizon."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["unlimited", "years", "months"] = Field(
        default="unlimited", description="Duration policy"
    )
    value: Optional[float] = Field(
        default=None, ge=0, description="Number of years or months (unused for unlimited)"
    )


class Allowance(BaseModel):
    """A recurring allowance paid on top of base salary."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Allowance identifier")
    name: str = Field(..., min_length=1, description="Display name (e.g., 'Housing')")
    type: Literal["fixed", "percentage"] = Field(
        ..., description="fixed = monthly amount, percentage = percent of annual base salary"
    )
    amount: float = Field(..., ge=0, description="Monthly amount or percent")
    duration: Duration = Field(default_factory=Duration)


class FixedOvertime(BaseModel):
    """Fixed (deemed) overtime paid regardless of hours worked."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    amount: float = Field(default=0, ge=0, description="Monthly fixed overtime pay")
    hours: float = Field(default=0, ge=0, description="Hours covered by the fixed amount")


class VariableOvertime(BaseModel):
    """Variable overtime, computed from hourly wage and assumed hours."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    calculation_method: str = Field(default="", description="Reserved for future methods")


class Overtime(BaseModel):
    model_config = ConfigDict(extra="forbid")

    fixed_overtime: FixedOvertime = Field(default_factory=FixedOvertime)
    variable_overtime: VariableOvertime = Field(default_factory=VariableOvertime)


class Probation(BaseModel):
    """Reduced pay for the first months of year one."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    duration_months: int = Field(default=0, ge=0, le=12)
    basic_salary: float = Field(default=0, ge=0, description="Monthly base salary during probation")
    fixed_overtime: float = Field(default=0, ge=0, description="Monthly fixed overtime during probation")


class Dependents(BaseModel):
    model_config = ConfigDict(extra="forbid")

    has_spouse: bool = False
    number_of_dependents: int = Field(default=0, ge=0)


class OtherDeduction(BaseModel):
    """Fixed annual income deduction (e.g., pension plan, life insurance)."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0, description="Annual deduction amount")


class Deductions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dependents: Dependents = Field(default_factory=Dependents)
    other_deductions: List[OtherDeduction] = Field(default_factory=list)

    @property
    def other_total(self) -> float:
        """Sum of all other fixed deductions."""
        return sum(d.amount for d in self.other_deductions)


class Scenario(BaseModel):
    """A complete compensation scenario to project."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Scenario identifier")
    title: str = Field(..., min_length=1, description="Display title (e.g., 'Offer A')")
    initial_basic_salary: float = Field(..., ge=0, description="Monthly base salary in year 1")
    annual_bonus: float = Field(default=0, ge=0)
    salary_growth_rate: float = Field(default=0, ge=0, description="Percent per year")
    allowances: List[Allowance] = Field(default_factory=list)
    overtime: Overtime = Field(default_factory=Overtime)
    probation: Optional[Probation] = None
    deductions: Deductions = Field(default_factory=Deductions)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def has_probation(self) -> bool:
        return self.probation is not None and self.probation.enabled


class ProjectionSettings(BaseModel):
    """Per-call projection settings."""

    model_config = ConfigDict(extra="forbid")

    prediction_period: int = Field(default=10, ge=1, description="Number of years to project")
    average_overtime_hours: float = Field(
        default=0, ge=0, description="Assumed average monthly overtime hours"
    )


class ScenarioValidationError(ValueError):
    """Raised when scenario data fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("Invalid scenario: " + "; ".join(errors))


def validate_scenario(data: dict) -> Scenario:
    """Validate raw scenario data (from YAML/JSON) into a Scenario.

    Args:
        data: Scenario dict

    Returns:
        Validated Scenario

    Raises:
        ScenarioValidationError: If validation fails, with one readable
            message per failing field
    """
    try:
        return Scenario.model_validate(data)
    except ValidationError as e:
        errors = []
        for err in e.errors():
            path = ".".join(str(p) for p in err["loc"]) or "root"
            errors.append(f"{path}: {err['msg']}")
        raise ScenarioValidationError(errors) from e


# =============================================================================
# Result Schemas - engine output
# =============================================================================


class IncomeBreakdown(BaseModel):
    """Annual income components (rounded)."""

    model_config = ConfigDict(extra="forbid")

    annual_basic_salary: int
    annual_fixed_overtime: int
    annual_variable_overtime: int
    annual_allowances: int
    annual_bonus: int


class DeductionBreakdown(BaseModel):
    """Annual statutory deductions (rounded)."""

    model_config = ConfigDict(extra="forbid")

    health_insurance: int
    pension_insurance: int
    employment_insurance: int
    income_tax: int
    resident_tax: int

    @property
    def total(self) -> int:
        """Total of all deductions."""
        return (
            self.health_insurance
            + self.pension_insurance
            + self.employment_insurance
            + self.income_tax
            + self.resident_tax
        )


class SalaryBreakdown(BaseModel):
    model_config = ConfigDict(extra="forbid")

    income: IncomeBreakdown
    deductions: DeductionBreakdown


class AnnualSalaryDetail(BaseModel):
    """Projected figures for a single year."""

    model_config = ConfigDict(extra="forbid")

    year: int = Field(..., ge=1, description="Projection year (1-based)")
    gross_annual_income: int
    net_annual_income: int
    total_deductions: int
    breakdown: SalaryBreakdown

    @property
    def monthly_gross(self) -> float:
        return self.gross_annual_income / 12

    @property
    def monthly_net(self) -> float:
        return self.net_annual_income / 12


class PredictionResult(BaseModel):
    """Successful projection: one AnnualSalaryDetail per year, in order."""

    model_config = ConfigDict(extra="forbid")

    success: Literal[True] = True
    details: List[AnnualSalaryDetail] = Field(default_factory=list)


class PredictionFailure(BaseModel):
    """Failed projection, carrying a human-readable message."""

    model_config = ConfigDict(extra="forbid")

    success: Literal[False] = False
    error: str
