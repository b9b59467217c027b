"""Multi-year compensation and tax projection.

Projects gross income, statutory deductions, and net income for each year
of a scenario. Every call recomputes the full horizon from the scenario and
tax schema; nothing is cached or retained between calls.

Salary growth compounds on the nominal (post-probation) monthly salary.
Year 1 may display a probation-blended figure, but that figure never feeds
the growth recurrence.

Rounding: each output field is rounded once when recorded. Total deductions
is the sum of the rounded deduction fields, and net income is rounded gross
minus that total, so both identities hold exactly on the output.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from .comp import (
    AllowancePlan,
    calc_annual_fixed_overtime,
    calc_variable_overtime,
    get_fixed_overtime_hours,
    prorate_first_year,
)
from .rounding import round_half_up
from .schemas import (
    AnnualSalaryDetail,
    DeductionBreakdown,
    IncomeBreakdown,
    PredictionFailure,
    PredictionResult,
    ProjectionSettings,
    SalaryBreakdown,
    Scenario,
)
from .taxes import TaxSchema, calc_income_deductions, calc_income_taxes, calc_social_insurance

logger = logging.getLogger(__name__)


@dataclass
class YearIncome:
    """Unrounded income components for one projection year."""

    basic_salary: float
    fixed_overtime: float
    variable_overtime: float
    allowances: float
    bonus: float

    @property
    def gross(self) -> float:
        return (
            self.basic_salary
            + self.fixed_overtime
            + self.variable_overtime
            + self.allowances
            + self.bonus
        )


def calc_year_income(
    scenario: Scenario,
    year: int,
    nominal_salary: float,
    allowance_plan: AllowancePlan,
    average_overtime_hours: float,
) -> YearIncome:
    """Calculate income components for a projection year.

    Args:
        scenario: Scenario being projected
        year: Projection year (1-based)
        nominal_salary: Monthly base salary on the growth track for this year
        allowance_plan: Allowances split by AllowancePlan.from_allowances()
        average_overtime_hours: Assumed average monthly overtime hours

    Returns:
        YearIncome. Year 1 with probation enabled uses the month-by-month
        blend for basic salary, fixed overtime, and the overtime hourly wage.
    """
    overtime = scenario.overtime

    if year == 1 and scenario.has_probation:
        prorated = prorate_first_year(scenario.probation, nominal_salary, overtime)
        basic_salary = prorated.annual_basic_salary
        fixed_overtime = prorated.annual_fixed_overtime
        overtime_base = prorated.average_monthly_salary
        # Percentage allowances follow the nominal salary, not the blend
        allowance_base = nominal_salary * 12
    else:
        basic_salary = nominal_salary * 12
        fixed_overtime = calc_annual_fixed_overtime(overtime)
        overtime_base = nominal_salary
        allowance_base = basic_salary

    if overtime.variable_overtime.enabled:
        variable_overtime = calc_variable_overtime(
            overtime_base + allowance_plan.monthly_fixed(year),
            get_fixed_overtime_hours(overtime),
            average_overtime_hours,
        )
    else:
        variable_overtime = 0

    return YearIncome(
        basic_salary=basic_salary,
        fixed_overtime=fixed_overtime,
        variable_overtime=variable_overtime,
        allowances=allowance_plan.annual_total(year, allowance_base),
        bonus=scenario.annual_bonus or 0,
    )


def build_annual_detail(
    scenario: Scenario,
    year: int,
    income: YearIncome,
    tax_schema: TaxSchema,
) -> AnnualSalaryDetail:
    """Apply deductions to a year's income and record the rounded detail."""
    gross = income.gross

    insurance = calc_social_insurance(gross, tax_schema)
    income_deductions = calc_income_deductions(insurance.total, scenario.deductions, tax_schema)
    taxes = calc_income_taxes(gross, income_deductions, tax_schema)

    deductions = DeductionBreakdown(
        health_insurance=round_half_up(insurance.health_insurance),
        pension_insurance=round_half_up(insurance.pension_insurance),
        employment_insurance=round_half_up(insurance.employment_insurance),
        income_tax=round_half_up(taxes.income_tax),
        resident_tax=round_half_up(taxes.resident_tax),
    )
    gross_rounded = round_half_up(gross)
    total_deductions = deductions.total

    return AnnualSalaryDetail(
        year=year,
        gross_annual_income=gross_rounded,
        net_annual_income=gross_rounded - total_deductions,
        total_deductions=total_deductions,
        breakdown=SalaryBreakdown(
            income=IncomeBreakdown(
                annual_basic_salary=round_half_up(income.basic_salary),
                annual_fixed_overtime=round_half_up(income.fixed_overtime),
                annual_variable_overtime=round_half_up(income.variable_overtime),
                annual_allowances=round_half_up(income.allowances),
                annual_bonus=round_half_up(income.bonus),
            ),
            deductions=deductions,
        ),
    )


def project_years(
    scenario: Scenario,
    settings: ProjectionSettings,
    tax_schema: TaxSchema,
) -> List[AnnualSalaryDetail]:
    """Project every year of the horizon.

    Raises whatever the calculation raises; use predict() for the
    error-as-data entry point.
    """
    allowance_plan = AllowancePlan.from_allowances(scenario.allowances)
    growth_factor = 1 + (scenario.salary_growth_rate or 0) / 100
    nominal_salary = scenario.initial_basic_salary or 0

    details = []
    for year in range(1, settings.prediction_period + 1):
        income = calc_year_income(
            scenario,
            year,
            nominal_salary,
            allowance_plan,
            settings.average_overtime_hours,
        )
        detail = build_annual_detail(scenario, year, income, tax_schema)
        logger.debug(
            f"year {year}: salary={nominal_salary:,.0f}/mo gross={detail.gross_annual_income:,} "
            f"deductions={detail.total_deductions:,} net={detail.net_annual_income:,}"
        )
        details.append(detail)

        nominal_salary *= growth_factor

    return details


def predict(
    scenario: Scenario,
    settings: ProjectionSettings,
    tax_schema: Optional[TaxSchema],
) -> Union[PredictionResult, PredictionFailure]:
    """Project a scenario over settings.prediction_period years.

    Args:
        scenario: Validated scenario
        settings: Prediction period and average overtime hours
        tax_schema: Loaded tax schema, or None if loading failed

    Returns:
        PredictionResult with one AnnualSalaryDetail per year, or
        PredictionFailure with a message. Never raises.
    """
    if tax_schema is None:
        logger.error("Projection requested but tax schema is not loaded")
        return PredictionFailure(error="Tax schema is not loaded.")

    try:
        details = project_years(scenario, settings, tax_schema)
    except Exception as e:
        logger.error(f"Error projecting scenario '{getattr(scenario, 'title', '?')}': {e}")
        return PredictionFailure(error=str(e) or type(e).__name__)

    return PredictionResult(details=details)
