"""Pay Forecast CLI - Command-line interface for compensation projections."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from payforecast import __version__
from payforecast.sdk import (
    ProjectionSettings,
    ScenarioValidationError,
    TaxSchemaNotFoundError,
    find_scenario,
    get_setting,
    load_scenario_file,
    predict,
    resolve_tax_schema,
)

from .scenarios_commands import scenarios as scenarios_group
from .settings_commands import settings as settings_group
from .schema_commands import schema as schema_group
from .renderers.projection_renderer import render_projection


@click.group()
@click.version_option(version=__version__, prog_name="pay-forecast")
def cli():
    """Pay Forecast - Multi-year compensation and tax projections.

    Define a scenario (salary, allowances, overtime, probation, bonus,
    dependents) and project gross income, deductions, and net income
    year by year.

    Configuration is loaded from (in order):

    \b
    1. PAY_FORECAST_CONFIG_PATH environment variable
    2. ~/.config/pay-forecast/ (XDG default)

    Set LOG_LEVEL=DEBUG to see per-year calculation details.
    """
    pass


cli.add_command(scenarios_group)
cli.add_command(settings_group)
cli.add_command(schema_group)


def _load_scenario_ref(ref: str):
    """Load a scenario from a file path or a saved scenario id/title."""
    path = Path(ref)
    if path.is_file():
        return load_scenario_file(path)

    scenario = find_scenario(ref)
    if scenario is None:
        raise click.ClickException(
            f"No scenario file or saved scenario matches '{ref}'. "
            "Run 'pay-forecast scenarios list' to see saved scenarios."
        )
    return scenario


@cli.command("project")
@click.argument("scenario_ref", metavar="<scenario-file|scenario-id>")
@click.option("--years", "-y", type=int, help="Years to project (default: settings prediction_period)")
@click.option("--overtime-hours", "-o", type=float,
              help="Average monthly overtime hours (default: settings average_overtime_hours)")
@click.option("--schema", "schema_ref", help="Tax schema version or YAML/JSON path")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def project(
    scenario_ref: str,
    years: Optional[int],
    overtime_hours: Optional[float],
    schema_ref: Optional[str],
    output_json: bool,
):
    """Project a scenario's income and deductions year by year.

    SCENARIO may be a YAML/JSON scenario file or the id (or unique id
    prefix, or title) of a saved scenario.

    \b
    Examples:
      pay-forecast project offer-a.yaml
      pay-forecast project offer-a.yaml --years 5 --overtime-hours 20
      pay-forecast project 5e868d28 --schema 2024 --json
    """
    try:
        scenario = _load_scenario_ref(scenario_ref)
    except (FileNotFoundError, ScenarioValidationError) as e:
        raise click.ClickException(str(e))

    try:
        settings = ProjectionSettings(
            prediction_period=years if years is not None else get_setting("prediction_period"),
            average_overtime_hours=(
                overtime_hours if overtime_hours is not None
                else get_setting("average_overtime_hours")
            ),
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    try:
        tax_schema = resolve_tax_schema(schema_ref)
    except (TaxSchemaNotFoundError, ValueError) as e:
        raise click.ClickException(str(e))

    result = predict(scenario, settings, tax_schema)
    if not result.success:
        raise click.ClickException(result.error)

    if output_json:
        output = {
            "scenario": {"id": scenario.id, "title": scenario.title},
            "tax_schema": tax_schema.version,
            "settings": settings.model_dump(),
            "details": [d.model_dump() for d in result.details],
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    render_projection(Console(), scenario, result, tax_schema)


def main():
    """Entry point for the CLI."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    cli()


if __name__ == "__main__":
    main()
