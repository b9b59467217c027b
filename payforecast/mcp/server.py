"""Pay Forecast MCP Server - FastMCP implementation for projection tools."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from payforecast.sdk import (
    PredictionCache,
    ProjectionSettings,
    ScenarioNotFoundError,
    TaxSchemaNotFoundError,
    get_scenario,
    get_setting,
    list_scenarios as sdk_list_scenarios,
    predict,
    resolve_tax_schema,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("pay-forecast")

# Results computed ahead of the first request, taken at most once
prediction_cache = PredictionCache()


def default_settings() -> ProjectionSettings:
    return ProjectionSettings(
        prediction_period=get_setting("prediction_period"),
        average_overtime_hours=get_setting("average_overtime_hours"),
    )


def warm_cache() -> None:
    """Project the first saved scenario with default settings and cache it."""
    try:
        scenarios = sdk_list_scenarios()
        if not scenarios:
            return
        tax_schema = resolve_tax_schema()
    except Exception as e:
        logger.error(f"Speculative projection skipped: {e}")
        return

    first = scenarios[0]
    settings = default_settings()
    logger.info(f"Speculative projection started for scenario: {first.title}")
    result = predict(first, settings, tax_schema)
    if result.success:
        prediction_cache.put(first.id, settings, result)
        logger.info(f"Speculative projection cached for scenario: {first.title}")
    else:
        logger.error(f"Speculative projection failed: {result.error}")


# --- Tools ---

@mcp.tool()
async def list_scenarios() -> dict[str, Any]:
    """List saved compensation scenarios. Returns ids, titles, and base salaries."""
    try:
        scenarios = sdk_list_scenarios()
        return {
            "scenarios": [
                {
                    "id": s.id,
                    "title": s.title,
                    "initial_basic_salary": s.initial_basic_salary,
                    "salary_growth_rate": s.salary_growth_rate,
                }
                for s in scenarios
            ],
            "count": len(scenarios),
        }
    except Exception as e:
        logger.error(f"Error listing scenarios: {e}")
        return {"error": str(e), "scenarios": [], "count": 0}


@mcp.tool()
async def project_scenario(
    scenario_id: str = Field(description="Saved scenario id (from list_scenarios)"),
    prediction_period: int | None = Field(default=None, description="Years to project (default from settings)"),
    average_overtime_hours: float | None = Field(
        default=None, description="Average monthly overtime hours (default from settings)"
    ),
    tax_schema: str | None = Field(default=None, description="Tax schema version (default: configured/newest)"),
) -> dict[str, Any]:
    """Project a saved scenario year by year. Returns gross, deductions breakdown, and net income per year."""
    try:
        scenario = get_scenario(scenario_id)
        defaults = default_settings()
        settings = ProjectionSettings(
            prediction_period=prediction_period if prediction_period is not None else defaults.prediction_period,
            average_overtime_hours=(
                average_overtime_hours if average_overtime_hours is not None
                else defaults.average_overtime_hours
            ),
        )
    except (ScenarioNotFoundError, ValueError) as e:
        return {"error": str(e)}

    if tax_schema is None:
        cached = prediction_cache.take(scenario.id, settings)
        if cached is not None:
            return {"scenario_id": scenario.id, "cached": True, **cached.model_dump()}

    try:
        schema = resolve_tax_schema(tax_schema)
    except (TaxSchemaNotFoundError, ValueError) as e:
        logger.error(f"Error loading tax schema: {e}")
        schema = None

    result = predict(scenario, settings, schema)
    if not result.success:
        return {"error": result.error}
    return {"scenario_id": scenario.id, "cached": False, **result.model_dump()}


def run_server():
    """Run the MCP server in stdio mode."""
    warm_cache()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
