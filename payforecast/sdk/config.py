"""Configuration management for Pay Forecast.

Configuration lives in the config directory:

1. settings.json - Machine-specific settings and projection defaults
   - tax_schema: tax schema version (e.g. "2024") or path to a YAML file
   - prediction_period: default number of years to project
   - average_overtime_hours: default assumed monthly overtime hours

2. scenarios.yaml - Saved compensation scenarios (see scenarios.py)

Config directory resolution:
1. PAY_FORECAST_CONFIG_PATH environment variable (if set)
2. ~/.config/pay-forecast/ (XDG_CONFIG_HOME fallback)
"""

import json
import os
from pathlib import Path
from typing import Any


APP_NAME = "pay-forecast"
SETTINGS_FILENAME = "settings.json"
SCENARIOS_FILENAME = "scenarios.yaml"

DEFAULT_SETTINGS = {
    "prediction_period": 10,
    "average_overtime_hours": 0,
}

# Keys accepted by 'settings set', with the type each value is coerced to
SETTING_TYPES = {
    "tax_schema": str,
    "prediction_period": int,
    "average_overtime_hours": float,
}


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. PAY_FORECAST_CONFIG_PATH environment variable
    2. ~/.config/pay-forecast/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("PAY_FORECAST_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def get_scenarios_path() -> Path:
    """Get the path to scenarios.yaml (may not exist yet)."""
    return get_config_dir() / SCENARIOS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value, falling back to built-in defaults.

    Args:
        key: Setting key (e.g., "tax_schema", "prediction_period")
        default: Value returned if neither settings.json nor the built-in
                 defaults define the key

    Returns:
        Setting value or default
    """
    settings = load_settings()
    if key in settings:
        return settings[key]
    return DEFAULT_SETTINGS.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    String values are coerced to the setting's declared type.

    Args:
        key: Setting key (must be one of SETTING_TYPES)
        value: Value to set

    Returns:
        Path to the saved settings file

    Raises:
        KeyError: If key is not a known setting
        ValueError: If value cannot be coerced to the setting's type
    """
    if key not in SETTING_TYPES:
        raise KeyError(f"Unknown setting '{key}'. Valid settings: {', '.join(sorted(SETTING_TYPES))}")

    settings = load_settings()
    settings[key] = SETTING_TYPES[key](value)
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting from settings.json.

    Returns:
        True if the key was present and removed
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True
