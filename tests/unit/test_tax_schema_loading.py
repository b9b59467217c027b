"""Tests for tax schema loading and resolution.

Uses isolated directories via tmp_path and PAY_FORECAST_CONFIG_PATH
to avoid touching real settings.
"""

import json
import logging

import pytest
import yaml

from conftest import TAX_SCHEMA_DATA

from payforecast.sdk import (
    TaxSchemaNotFoundError,
    get_available_versions,
    load_tax_schema,
    load_tax_schema_file,
    resolve_tax_schema,
    set_setting,
)


def test_packaged_versions_newest_first():
    versions = get_available_versions()

    assert "2024" in versions
    assert "2025" in versions
    assert versions == sorted(versions, reverse=True)


def test_load_packaged_version():
    schema = load_tax_schema("2024")

    assert schema.version == "2024"
    assert schema.income_tax_rates[-1].threshold is None
    assert schema.social_insurance.pension.max_standard_remuneration == 650000
    assert schema.bracket_warnings() == []


def test_default_is_newest():
    assert load_tax_schema().version == get_available_versions()[0]


def test_unknown_version_raises():
    with pytest.raises(TaxSchemaNotFoundError, match="1999"):
        load_tax_schema("1999")


def test_load_json_file(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps(TAX_SCHEMA_DATA))

    schema = load_tax_schema_file(path)

    assert schema.version == "test-2024"
    assert len(schema.income_tax_rates) == 7


def test_missing_file_raises(tmp_path):
    with pytest.raises(TaxSchemaNotFoundError):
        load_tax_schema_file(tmp_path / "nope.yaml")


def test_invalid_schema_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.dump({"version": "bad", "income_tax_rates": []}))

    with pytest.raises(ValueError, match="Invalid tax schema"):
        load_tax_schema_file(path)


def test_broken_yaml_raises_value_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("income_tax_rates: [unclosed\n")

    with pytest.raises(ValueError, match="Invalid tax schema in broken.yaml"):
        load_tax_schema_file(path)


def test_broken_json_raises_value_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{\"version\": ")

    with pytest.raises(ValueError, match="Invalid tax schema in broken.json"):
        load_tax_schema_file(path)


def test_malformed_brackets_load_with_warning(tmp_path, caplog):
    data = dict(TAX_SCHEMA_DATA, income_tax_rates=[
        {"threshold": 3300000, "rate": 0.10, "deduction": 97500},
        {"threshold": 1950000, "rate": 0.05, "deduction": 0},
    ])
    path = tmp_path / "unsorted.yaml"
    path.write_text(yaml.dump(data))

    with caplog.at_level(logging.WARNING):
        schema = load_tax_schema_file(path)

    assert len(schema.income_tax_rates) == 2
    assert "not ascending" in caplog.text
    assert "no final unbounded row" in caplog.text


class TestResolve:

    def test_version_ref(self, isolated_env):
        assert resolve_tax_schema("2025").version == "2025"

    def test_path_ref(self, isolated_env, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.dump(TAX_SCHEMA_DATA))

        assert resolve_tax_schema(str(path)).version == "test-2024"

    def test_settings_ref(self, isolated_env):
        set_setting("tax_schema", "2024")
        assert resolve_tax_schema().version == "2024"

    def test_explicit_ref_overrides_settings(self, isolated_env):
        set_setting("tax_schema", "2024")
        assert resolve_tax_schema("2025").version == "2025"
