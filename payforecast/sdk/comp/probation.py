"""Probation-period proration for projection year 1.

During probation the employee is paid a reduced base salary and a reduced
fixed overtime amount. Year 1 figures are summed month by month so that a
probation of any length between 0 and 12 months blends correctly.
"""

from dataclasses import dataclass

from ..schemas import Overtime, Probation


@dataclass
class ProratedYear:
    """Year 1 pay blended across probation and standard months."""

    annual_basic_salary: float
    annual_fixed_overtime: float
    probation_months: int

    @property
    def average_monthly_salary(self) -> float:
        """Blended monthly base salary over the year."""
        return self.annual_basic_salary / 12


def prorate_first_year(
    probation: Probation,
    standard_monthly_salary: float,
    overtime: Overtime,
) -> ProratedYear:
    """Blend probation and standard pay over the 12 months of year 1.

    Args:
        probation: Probation settings (assumed enabled)
        standard_monthly_salary: Post-probation monthly base salary
        overtime: Scenario overtime settings; standard fixed overtime is
                  only paid after probation and only when enabled

    Returns:
        ProratedYear with year 1 basic salary and fixed overtime totals
    """
    fixed = overtime.fixed_overtime
    basic_total = 0
    fixed_overtime_total = 0

    for month in range(1, 13):
        if month <= probation.duration_months:
            basic_total += probation.basic_salary
            fixed_overtime_total += probation.fixed_overtime
        else:
            basic_total += standard_monthly_salary
            if fixed.enabled:
                fixed_overtime_total += fixed.amount

    return ProratedYear(
        annual_basic_salary=basic_total,
        annual_fixed_overtime=fixed_overtime_total,
        probation_months=min(probation.duration_months, 12),
    )
