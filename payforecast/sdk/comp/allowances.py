"""Allowance activity and totals per projection year.

Allowances are split once per projection into:
- a static contribution: unlimited fixed allowances, active every year, so
  their monthly sum is computed a single time
- a dynamic contribution: time-limited fixed allowances and all percentage
  allowances, evaluated year by year
"""

from dataclasses import dataclass, field
from typing import List

from ..schemas import Allowance, Duration


def is_allowance_active(duration: Duration, year: int) -> bool:
    """Check whether an allowance with this duration is paid in a projection year.

    Args:
        duration: Allowance duration policy
        year: Projection year (1-based)

    Returns:
        unlimited -> always True
        years:N   -> True while year <= N
        months:N  -> True while year * 12 <= N (evaluated per whole year,
                     so an allowance ending mid-year is dropped for that year)
        anything else -> False
    """
    value = duration.value or 0
    if duration.type == "unlimited":
        return True
    elif duration.type == "years":
        return year <= value
    elif duration.type == "months":
        return year * 12 <= value
    return False


@dataclass
class AllowancePlan:
    """Allowances split into static and per-year contributions."""

    static_monthly: float = 0
    dynamic: List[Allowance] = field(default_factory=list)

    @classmethod
    def from_allowances(cls, allowances: List[Allowance]) -> "AllowancePlan":
        static_monthly = 0
        dynamic = []
        for allowance in allowances:
            if allowance.type == "fixed" and allowance.duration.type == "unlimited":
                static_monthly += allowance.amount
            else:
                dynamic.append(allowance)
        return cls(static_monthly=static_monthly, dynamic=dynamic)

    def active_dynamic(self, year: int) -> List[Allowance]:
        return [a for a in self.dynamic if is_allowance_active(a.duration, year)]

    def monthly_fixed(self, year: int) -> float:
        """Monthly sum of fixed allowances active in a year (used for hourly wage)."""
        return self.static_monthly + sum(
            a.amount for a in self.active_dynamic(year) if a.type == "fixed"
        )

    def annual_total(self, year: int, annual_basic_salary: float) -> float:
        """Annual allowance income for a year.

        Percentage allowances are a percent of annual_basic_salary.
        """
        total = self.static_monthly * 12
        for allowance in self.active_dynamic(year):
            if allowance.type == "fixed":
                total += allowance.amount * 12
            else:
                total += annual_basic_salary * (allowance.amount / 100)
        return total
