"""Tests for year 1 probation blending."""

from payforecast.sdk import FixedOvertime, Overtime, Probation
from payforecast.sdk.comp import prorate_first_year


def test_blends_month_by_month():
    probation = Probation(enabled=True, duration_months=3, basic_salary=250000)
    result = prorate_first_year(probation, 300000, Overtime())

    assert result.annual_basic_salary == 250000 * 3 + 300000 * 9
    assert result.annual_fixed_overtime == 0
    assert result.probation_months == 3
    assert result.average_monthly_salary == (250000 * 3 + 300000 * 9) / 12


def test_fixed_overtime_switches_after_probation():
    probation = Probation(enabled=True, duration_months=6, basic_salary=250000, fixed_overtime=10000)
    overtime = Overtime(fixed_overtime=FixedOvertime(enabled=True, amount=30000, hours=20))

    result = prorate_first_year(probation, 300000, overtime)

    assert result.annual_fixed_overtime == 10000 * 6 + 30000 * 6


def test_standard_fixed_overtime_requires_enabled():
    probation = Probation(enabled=True, duration_months=6, basic_salary=250000, fixed_overtime=10000)
    overtime = Overtime(fixed_overtime=FixedOvertime(enabled=False, amount=30000, hours=20))

    result = prorate_first_year(probation, 300000, overtime)

    assert result.annual_fixed_overtime == 10000 * 6


def test_zero_months_is_standard_year():
    probation = Probation(enabled=True, duration_months=0, basic_salary=250000)
    result = prorate_first_year(probation, 300000, Overtime())
    assert result.annual_basic_salary == 3600000


def test_full_year_probation():
    probation = Probation(enabled=True, duration_months=12, basic_salary=250000)
    result = prorate_first_year(probation, 300000, Overtime())
    assert result.annual_basic_salary == 3000000
