"""Pay Forecast SDK - Core functionality for compensation and tax projections."""

from .config import (
    get_config_dir,
    get_settings_path,
    get_scenarios_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
)

from .schemas import (
    Duration,
    Allowance,
    FixedOvertime,
    VariableOvertime,
    Overtime,
    Probation,
    Dependents,
    OtherDeduction,
    Deductions,
    Scenario,
    ProjectionSettings,
    ScenarioValidationError,
    validate_scenario,
    IncomeBreakdown,
    DeductionBreakdown,
    SalaryBreakdown,
    AnnualSalaryDetail,
    PredictionResult,
    PredictionFailure,
)

from .taxes import (
    TaxSchema,
    TaxSchemaNotFoundError,
    get_available_versions,
    load_tax_schema,
    load_tax_schema_file,
    resolve_tax_schema,
)

from .projection import predict, project_years

from .scenarios import (
    ScenarioNotFoundError,
    list_scenarios,
    get_scenario,
    find_scenario,
    load_scenario_file,
    save_scenario,
    delete_scenario,
)

from .cache import PredictionCache

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "get_scenarios_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    # Scenario schemas
    "Duration",
    "Allowance",
    "FixedOvertime",
    "VariableOvertime",
    "Overtime",
    "Probation",
    "Dependents",
    "OtherDeduction",
    "Deductions",
    "Scenario",
    "ProjectionSettings",
    "ScenarioValidationError",
    "validate_scenario",
    # Result schemas
    "IncomeBreakdown",
    "DeductionBreakdown",
    "SalaryBreakdown",
    "AnnualSalaryDetail",
    "PredictionResult",
    "PredictionFailure",
    # Tax schemas
    "TaxSchema",
    "TaxSchemaNotFoundError",
    "get_available_versions",
    "load_tax_schema",
    "load_tax_schema_file",
    "resolve_tax_schema",
    # Projection
    "predict",
    "project_years",
    # Scenario store
    "ScenarioNotFoundError",
    "list_scenarios",
    "get_scenario",
    "find_scenario",
    "load_scenario_file",
    "save_scenario",
    "delete_scenario",
    # Cache
    "PredictionCache",
]
