"""Tax schema CLI commands for Pay Forecast."""

import json
from typing import Optional

import click

from payforecast.sdk import (
    TaxSchemaNotFoundError,
    get_available_versions,
    resolve_tax_schema,
)


@click.group()
def schema():
    """Inspect tax schemas."""
    pass


@schema.command("list")
def schema_list():
    """List packaged tax schema versions."""
    versions = get_available_versions()
    if not versions:
        click.echo("No packaged tax schemas.")
        return
    for i, version in enumerate(versions):
        marker = " (newest)" if i == 0 else ""
        click.echo(f"{version}{marker}")


@schema.command("show")
@click.argument("schema_ref", required=False)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def schema_show(schema_ref: Optional[str], output_json: bool):
    """Show a tax schema (version or file path; default: configured/newest)."""
    try:
        tax_schema = resolve_tax_schema(schema_ref)
    except (TaxSchemaNotFoundError, ValueError) as e:
        raise click.ClickException(str(e))

    if output_json:
        click.echo(json.dumps(tax_schema.model_dump(), indent=2))
        return

    click.echo(f"Tax schema {tax_schema.version}")
    click.echo()
    click.echo("Income tax brackets:")
    lower = 0
    for bracket in tax_schema.income_tax_rates:
        upper = f"{bracket.threshold:>14,.0f}" if bracket.threshold is not None else f"{'and over':>14}"
        click.echo(
            f"  {lower:>14,.0f} - {upper}  {bracket.rate:>6.1%}  minus {bracket.deduction:,.0f}"
        )
        if bracket.threshold is not None:
            lower = bracket.threshold
    click.echo(f"Resident tax rate: {tax_schema.resident_tax_rate:.1%}")
    click.echo()

    insurance = tax_schema.social_insurance
    click.echo("Social insurance (combined rate, employee pays half):")
    click.echo(
        f"  Health:     {insurance.health_insurance.rate:.2%} "
        f"(cap {insurance.health_insurance.max_standard_remuneration:,.0f}/month)"
    )
    click.echo(
        f"  Pension:    {insurance.pension.rate:.2%} "
        f"(cap {insurance.pension.max_standard_remuneration:,.0f}/month)"
    )
    click.echo(f"  Employment: {insurance.employment_insurance.rate:.2%} (employee rate)")
    click.echo()

    deductions = tax_schema.deductions
    click.echo("Deductions:")
    click.echo(f"  Basic:     {deductions.basic:,.0f}")
    click.echo(f"  Spouse:    {deductions.spouse:,.0f}")
    click.echo(f"  Dependent: {deductions.dependent:,.0f}")

    for warning in tax_schema.bracket_warnings():
        click.echo(f"Warning: {warning}", err=True)
