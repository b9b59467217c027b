"""Tests for overtime pay calculations."""

import pytest

from payforecast.sdk import FixedOvertime, Overtime
from payforecast.sdk.comp import (
    calc_annual_fixed_overtime,
    calc_hourly_wage,
    calc_variable_overtime,
    get_fixed_overtime_hours,
)


def test_hourly_wage_uses_160_hours():
    assert calc_hourly_wage(320000) == 2000


def test_variable_overtime_all_hours_billable():
    """320,000 / 160 = 2,000/h; 2,000 * 1.25 * 20h * 12 = 600,000"""
    assert calc_variable_overtime(320000, fixed_hours=0, average_overtime_hours=20) == pytest.approx(600000)


def test_variable_overtime_excludes_fixed_hours():
    assert calc_variable_overtime(320000, fixed_hours=10, average_overtime_hours=20) == pytest.approx(300000)


def test_variable_overtime_never_negative():
    assert calc_variable_overtime(320000, fixed_hours=30, average_overtime_hours=20) == 0


def test_no_assumed_hours_no_overtime():
    assert calc_variable_overtime(320000, fixed_hours=0, average_overtime_hours=0) == 0


class TestFixedOvertime:

    def test_disabled_contributes_nothing(self):
        overtime = Overtime(fixed_overtime=FixedOvertime(enabled=False, amount=30000, hours=20))
        assert get_fixed_overtime_hours(overtime) == 0
        assert calc_annual_fixed_overtime(overtime) == 0

    def test_enabled(self):
        overtime = Overtime(fixed_overtime=FixedOvertime(enabled=True, amount=30000, hours=20))
        assert get_fixed_overtime_hours(overtime) == 20
        assert calc_annual_fixed_overtime(overtime) == 360000
