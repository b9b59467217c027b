"""Shared fixtures for projection tests.

The tax schema fixture mirrors payforecast/tax_schemas/2024.yaml so tests
don't depend on packaged data changing.
"""

import json

import pytest

from payforecast.sdk import ProjectionSettings, Scenario, TaxSchema


TAX_SCHEMA_DATA = {
    "version": "test-2024",
    "income_tax_rates": [
        {"threshold": 1950000, "rate": 0.05, "deduction": 0},
        {"threshold": 3300000, "rate": 0.10, "deduction": 97500},
        {"threshold": 6950000, "rate": 0.20, "deduction": 427500},
        {"threshold": 9000000, "rate": 0.23, "deduction": 636000},
        {"threshold": 18000000, "rate": 0.33, "deduction": 1536000},
        {"threshold": 40000000, "rate": 0.40, "deduction": 2796000},
        {"threshold": None, "rate": 0.45, "deduction": 4796000},
    ],
    "resident_tax_rate": 0.10,
    "social_insurance": {
        "health_insurance": {"rate": 0.10, "max_standard_remuneration": 1390000},
        "pension": {"rate": 0.183, "max_standard_remuneration": 650000},
        "employment_insurance": {"rate": 0.006},
    },
    "deductions": {"basic": 480000, "spouse": 380000, "dependent": 380000},
}


@pytest.fixture
def tax_schema():
    """Realistic tax schema with basic/spouse/dependent deductions."""
    return TaxSchema.model_validate(TAX_SCHEMA_DATA)


def make_scenario(**overrides) -> Scenario:
    """Build a scenario: 300,000/month, no allowances, no bonus, no growth."""
    data = {
        "id": "test-scenario-1",
        "title": "Base Scenario",
        "initial_basic_salary": 300000,
    }
    data.update(overrides)
    return Scenario.model_validate(data)


def make_settings(years: int = 1, overtime_hours: float = 0) -> ProjectionSettings:
    return ProjectionSettings(prediction_period=years, average_overtime_hours=overtime_hours)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point the SDK at an empty config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    monkeypatch.setenv("PAY_FORECAST_CONFIG_PATH", str(config_dir))
    (config_dir / "settings.json").write_text(json.dumps({}))

    return {"config_dir": config_dir, "tmp_path": tmp_path}
