"""Scenario CLI commands for Pay Forecast.

Manages saved scenarios in scenarios.yaml.
"""

import json

import click

from payforecast.sdk import (
    ScenarioNotFoundError,
    ScenarioValidationError,
    delete_scenario,
    find_scenario,
    get_scenarios_path,
    list_scenarios,
    load_scenario_file,
    save_scenario,
)


@click.group()
def scenarios():
    """Manage saved scenarios (scenarios.yaml)."""
    pass


@scenarios.command("list")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def scenarios_list(output_json: bool):
    """List saved scenarios."""
    try:
        saved = list_scenarios()
    except ScenarioValidationError as e:
        raise click.ClickException(f"{get_scenarios_path()}: {e}")

    if output_json:
        click.echo(json.dumps(
            [{"id": s.id, "title": s.title, "initial_basic_salary": s.initial_basic_salary} for s in saved],
            indent=2,
            ensure_ascii=False,
        ))
        return

    if not saved:
        click.echo("No saved scenarios.")
        click.echo("Add one with: pay-forecast scenarios add <scenario-file>")
        return

    click.echo(f"{'ID':<10} {'Title':<30} {'Base Salary':>14} {'Growth':>8}")
    click.echo("-" * 65)
    for s in saved:
        click.echo(
            f"{s.id[:8]:<10} {s.title[:30]:<30} {s.initial_basic_salary:>14,.0f} "
            f"{s.salary_growth_rate:>7g}%"
        )


@scenarios.command("show")
@click.argument("scenario_ref", metavar="<scenario-id>")
def scenarios_show(scenario_ref: str):
    """Show a saved scenario as JSON."""
    scenario = find_scenario(scenario_ref)
    if scenario is None:
        raise click.ClickException(f"Scenario not found: {scenario_ref}")
    click.echo(json.dumps(scenario.model_dump(mode="json", exclude_none=True), indent=2, ensure_ascii=False))


@scenarios.command("add")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def scenarios_add(path: str):
    """Validate a scenario file and save it.

    A scenario with the same id as a saved one replaces it.
    """
    try:
        scenario = load_scenario_file(path)
    except ScenarioValidationError as e:
        raise click.ClickException(str(e))

    saved = save_scenario(scenario)
    click.echo(f"Saved scenario '{saved.title}' ({saved.id})")
    click.echo(f"Saved to: {get_scenarios_path()}")


@scenarios.command("remove")
@click.argument("scenario_ref", metavar="<scenario-id>")
def scenarios_remove(scenario_ref: str):
    """Delete a saved scenario."""
    scenario = find_scenario(scenario_ref)
    scenario_id = scenario.id if scenario else scenario_ref

    try:
        delete_scenario(scenario_id)
    except ScenarioNotFoundError as e:
        raise click.ClickException(str(e))

    click.echo(f"Removed scenario {scenario_id}")
