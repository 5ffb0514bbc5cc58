"""Settings management for Overtime Calc.

Settings live in settings.json and hold the calculator inputs that rarely
change between calculations:

- annual_salary: yearly salary in NOK
- table_code: tax table number (e.g. 8115)
- tax_year: tax year for rate lookup
- use_withholding_display: show the withholding figure instead of the
  actual-tax figure

Config directory resolution:
1. OVERTIME_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/overtime-calc/ (XDG_CONFIG_HOME fallback)

The withholding engine never reads settings; callers load them, validate
and build a scenario.
"""

import json
import os
from pathlib import Path
from typing import Any


APP_NAME = "overtime-calc"
SETTINGS_FILENAME = "settings.json"

SETTING_KEYS = ("annual_salary", "table_code", "tax_year", "use_withholding_display")

DEFAULT_SETTINGS = {
    "tax_year": 2026,
    "use_withholding_display": False,
}


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. OVERTIME_CALC_CONFIG_PATH environment variable
    2. ~/.config/overtime-calc/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("OVERTIME_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


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
    """Get a single setting value, or default if not set."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a single setting value.

    Raises:
        KeyError: If key is not a known setting
    """
    if key not in SETTING_KEYS:
        raise KeyError(f"Unknown setting '{key}'. Known settings: {', '.join(SETTING_KEYS)}")
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def clear_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was set."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def load_calculator_settings() -> dict:
    """Load calculator settings merged over defaults.

    Keys that are not set (annual_salary, table_code) come back as None.
    """
    merged = {key: None for key in SETTING_KEYS}
    merged.update(DEFAULT_SETTINGS)
    stored = load_settings()
    merged.update({k: v for k, v in stored.items() if k in SETTING_KEYS})
    return merged
