"""Overtime pay calculations.

Variable overtime is paid on hours beyond those already covered by fixed
(deemed) overtime, at the statutory 25% premium over the hourly wage.
"""

from ..schemas import Overtime

# Standard working hours per month used to derive the hourly wage
STANDARD_MONTHLY_HOURS = 160
OVERTIME_PREMIUM = 1.25


def calc_hourly_wage(effective_monthly_salary: float) -> float:
    """Hourly wage from monthly base salary plus active fixed allowances."""
    return effective_monthly_salary / STANDARD_MONTHLY_HOURS


def get_fixed_overtime_hours(overtime: Overtime) -> float:
    """Deemed hours covered by fixed overtime (0 when disabled)."""
    fixed = overtime.fixed_overtime
    return fixed.hours if fixed.enabled else 0


def calc_annual_fixed_overtime(overtime: Overtime) -> float:
    """Annual fixed overtime pay (0 when disabled)."""
    fixed = overtime.fixed_overtime
    return fixed.amount * 12 if fixed.enabled else 0


def calc_variable_overtime(
    effective_monthly_salary: float,
    fixed_hours: float,
    average_overtime_hours: float,
) -> float:
    """Calculate annual variable overtime pay.

    Args:
        effective_monthly_salary: Monthly base salary + active fixed allowances
        fixed_hours: Hours already paid through fixed overtime
        average_overtime_hours: Assumed average monthly overtime hours

    Returns:
        hourly wage * 1.25 * max(0, average - fixed hours) * 12
    """
    billable_hours = max(0, average_overtime_hours - fixed_hours)
    hourly_wage = calc_hourly_wage(effective_monthly_salary)
    return hourly_wage * OVERTIME_PREMIUM * billable_hours * 12
