"""Settings CLI commands for Pay Forecast.

Manages settings.json - tax schema selection and projection defaults.
"""

import click

from payforecast.sdk import (
    get_setting,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
)
from payforecast.sdk.config import DEFAULT_SETTINGS, SETTING_TYPES


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - tax_schema: tax schema version (e.g. 2024) or path to a schema file
    - prediction_period: default years to project
    - average_overtime_hours: default monthly overtime hours
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and effective values."""
    settings_path = get_settings_path()
    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    current = load_settings()
    if current:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")
        click.echo()

    click.echo("Effective values:")
    for key in sorted(SETTING_TYPES):
        value = get_setting(key)
        if key in current:
            source = ""
        elif key in DEFAULT_SETTINGS:
            source = " (default)"
        else:
            value, source = "newest packaged", " (default)"
        click.echo(f"  {key}: {value}{source}")


@settings.command("set")
@click.argument("key", type=click.Choice(sorted(SETTING_TYPES)))
@click.argument("value")
def settings_set(key: str, value: str):
    """Set a setting value."""
    try:
        path = set_setting(key, value)
    except ValueError as e:
        raise click.BadParameter(f"Invalid value for {key}: {e}")

    click.echo(f"Set {key}: {get_setting(key)}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key", type=click.Choice(sorted(SETTING_TYPES)))
def settings_unset(key: str):
    """Remove a setting, reverting to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key}.")
    else:
        click.echo(f"{key} was not set.")
