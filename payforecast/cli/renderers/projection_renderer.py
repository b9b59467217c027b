"""Rich renderer for projection results.

Transforms SDK PredictionResult output into formatted Rich tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from payforecast.sdk import PredictionResult, Scenario, TaxSchema


def render_projection(
    console: Console,
    scenario: Scenario,
    result: PredictionResult,
    tax_schema: TaxSchema,
) -> None:
    """Render a projection as a summary panel plus a per-year table.

    Args:
        console: Rich Console instance
        scenario: Projected scenario
        result: Output of predict()
        tax_schema: Schema the projection was computed with
    """
    _render_inputs(console, scenario, tax_schema)
    _render_years_table(console, scenario, result)


def _render_inputs(console: Console, scenario: Scenario, tax_schema: TaxSchema) -> None:
    """Render scenario inputs panel."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    table.add_row("Base Salary", f"{_fmt(scenario.initial_basic_salary)} / month")
    table.add_row("Growth", f"{scenario.salary_growth_rate:g}% / year")
    if scenario.annual_bonus:
        table.add_row("Bonus", f"{_fmt(scenario.annual_bonus)} / year")
    if scenario.allowances:
        table.add_row("Allowances", ", ".join(a.name for a in scenario.allowances))
    if scenario.has_probation:
        probation = scenario.probation
        table.add_row(
            "Probation",
            f"{probation.duration_months} month(s) at {_fmt(probation.basic_salary)}",
        )
    table.add_row("Tax Schema", tax_schema.version)

    console.print(Panel(table, title=scenario.title, border_style="dim"))


def _render_years_table(console: Console, scenario: Scenario, result: PredictionResult) -> None:
    """Render main per-year table."""
    table = Table(title=f"Projection: {len(result.details)} year(s)", box=box.ROUNDED)
    table.add_column("Year", justify="right")
    table.add_column("Gross", justify="right")
    table.add_column("Health", justify="right")
    table.add_column("Pension", justify="right")
    table.add_column("Employment", justify="right")
    table.add_column("Income Tax", justify="right")
    table.add_column("Resident Tax", justify="right")
    table.add_column("Deductions", justify="right", style="dim")
    table.add_column("Net", justify="right", style="bold green")
    table.add_column("Net / Month", justify="right")

    for detail in result.details:
        deductions = detail.breakdown.deductions
        table.add_row(
            str(detail.year),
            _fmt(detail.gross_annual_income),
            _fmt(deductions.health_insurance),
            _fmt(deductions.pension_insurance),
            _fmt(deductions.employment_insurance),
            _fmt(deductions.income_tax),
            _fmt(deductions.resident_tax),
            _fmt(detail.total_deductions),
            _fmt(detail.net_annual_income),
            _fmt(detail.monthly_net),
        )

    console.print(table)


def _fmt(amount: float | None) -> str:
    """Format whole-unit currency amount."""
    if amount is None:
        return "-"
    return f"{amount:,.0f}"
