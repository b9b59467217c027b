"""comp - Compensation components of a projection year.

Scope:
- Allowance duration policies and static/dynamic allowance totals (allowances.py)
- Fixed and variable overtime pay (overtime.py)
- Year 1 probation blending (probation.py)

Constraints:
- Pure calculation on scenario sub-models; no tax logic (that's in taxes/)
"""

from .allowances import AllowancePlan, is_allowance_active
from .overtime import (
    STANDARD_MONTHLY_HOURS,
    OVERTIME_PREMIUM,
    calc_hourly_wage,
    calc_annual_fixed_overtime,
    calc_variable_overtime,
    get_fixed_overtime_hours,
)
from .probation import ProratedYear, prorate_first_year

__all__ = [
    # Allowances
    "AllowancePlan",
    "is_allowance_active",
    # Overtime
    "STANDARD_MONTHLY_HOURS",
    "OVERTIME_PREMIUM",
    "calc_hourly_wage",
    "calc_annual_fixed_overtime",
    "calc_variable_overtime",
    "get_fixed_overtime_hours",
    # Probation
    "ProratedYear",
    "prorate_first_year",
]
