"""Tests for saved scenario storage and scenario validation.

Uses isolated directories via tmp_path and PAY_FORECAST_CONFIG_PATH
to avoid touching production data.
"""

import pytest
import yaml

from conftest import make_scenario

from payforecast.sdk import (
    ScenarioNotFoundError,
    ScenarioValidationError,
    delete_scenario,
    find_scenario,
    get_scenario,
    get_scenarios_path,
    list_scenarios,
    load_scenario_file,
    save_scenario,
    validate_scenario,
)


def test_empty_store(isolated_env):
    assert list_scenarios() == []


def test_save_and_get(isolated_env):
    saved = save_scenario(make_scenario(annual_bonus=600000))

    assert saved.created_at is not None
    assert saved.updated_at is not None
    assert get_scenarios_path().exists()

    loaded = get_scenario("test-scenario-1")
    assert loaded.annual_bonus == 600000
    assert loaded.title == "Base Scenario"


def test_update_replaces_and_keeps_created_at(isolated_env):
    first = save_scenario(make_scenario())
    save_scenario(make_scenario(title="Renamed"))

    scenarios = list_scenarios()
    assert len(scenarios) == 1
    assert scenarios[0].title == "Renamed"
    assert scenarios[0].created_at == first.created_at


def test_saved_order_preserved(isolated_env):
    save_scenario(make_scenario(id="b", title="Offer B"))
    save_scenario(make_scenario(id="a", title="Offer A"))

    assert [s.id for s in list_scenarios()] == ["b", "a"]


def test_delete(isolated_env):
    save_scenario(make_scenario())
    delete_scenario("test-scenario-1")

    assert list_scenarios() == []
    with pytest.raises(ScenarioNotFoundError):
        get_scenario("test-scenario-1")


def test_delete_missing_raises(isolated_env):
    with pytest.raises(ScenarioNotFoundError):
        delete_scenario("missing")


def test_find_by_prefix_and_title(isolated_env):
    save_scenario(make_scenario(id="5e868d28-aaaa", title="Offer A"))
    save_scenario(make_scenario(id="9f000000-bbbb", title="Offer B"))

    assert find_scenario("5e86").id == "5e868d28-aaaa"
    assert find_scenario("offer b").id == "9f000000-bbbb"
    assert find_scenario("zzz") is None


def test_load_scenario_file_assigns_id(tmp_path):
    path = tmp_path / "offer.yaml"
    path.write_text(yaml.dump({"title": "Offer", "initial_basic_salary": 280000}))

    scenario = load_scenario_file(path)

    assert scenario.title == "Offer"
    assert len(scenario.id) == 36


def test_load_scenario_file_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ScenarioValidationError, match="expected a mapping"):
        load_scenario_file(path)


def test_load_scenario_file_broken_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("title: [unclosed\n")

    with pytest.raises(ScenarioValidationError, match="broken.yaml"):
        load_scenario_file(path)


class TestValidation:

    def test_defaults(self):
        scenario = validate_scenario({"id": "x", "title": "Minimal", "initial_basic_salary": 250000})

        assert scenario.annual_bonus == 0
        assert scenario.salary_growth_rate == 0
        assert scenario.allowances == []
        assert scenario.probation is None
        assert scenario.has_probation is False
        assert scenario.overtime.fixed_overtime.enabled is False
        assert scenario.deductions.other_total == 0

    def test_negative_salary_rejected(self):
        with pytest.raises(ScenarioValidationError, match="initial_basic_salary"):
            validate_scenario({"id": "x", "title": "Bad", "initial_basic_salary": -1})

    def test_unknown_field_rejected(self):
        with pytest.raises(ScenarioValidationError, match="salary_growth"):
            validate_scenario({
                "id": "x", "title": "Typo", "initial_basic_salary": 250000, "salary_growth": 2,
            })

    def test_probation_months_bounded(self):
        with pytest.raises(ScenarioValidationError) as exc_info:
            validate_scenario({
                "id": "x", "title": "Bad", "initial_basic_salary": 250000,
                "probation": {"enabled": True, "duration_months": 13},
            })
        assert any("probation.duration_months" in e for e in exc_info.value.errors)

    def test_unknown_duration_type_rejected(self):
        with pytest.raises(ScenarioValidationError):
            validate_scenario({
                "id": "x", "title": "Bad", "initial_basic_salary": 250000,
                "allowances": [{
                    "id": "a", "name": "Housing", "type": "fixed", "amount": 1,
                    "duration": {"type": "weeks", "value": 3},
                }],
            })
