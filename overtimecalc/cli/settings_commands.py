"""Settings CLI commands for Overtime Calc.

Manages settings.json - salary, table number, tax year, display preference.
"""

import click

from overtimecalc.sdk import (
    SETTING_KEYS,
    clear_setting,
    default_registry,
    get_settings_path,
    load_calculator_settings,
    load_settings,
    parse_table_code,
    set_setting,
)
from overtimecalc.sdk.validation import MAX_ANNUAL_SALARY, MIN_ANNUAL_SALARY


def _parse_setting_value(key: str, raw: str):
    """Convert and validate a raw CLI value for a setting key."""
    if key == "use_withholding_display":
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off"):
            return False
        raise click.BadParameter(f"Expected true/false, got '{raw}'", param_hint=key)

    try:
        number = float(raw) if key == "annual_salary" else int(raw)
    except ValueError:
        raise click.BadParameter(f"Expected a number, got '{raw}'", param_hint=key)

    if key == "annual_salary":
        if number.is_integer():
            number = int(number)
        if not MIN_ANNUAL_SALARY <= number <= MAX_ANNUAL_SALARY:
            raise click.BadParameter(
                f"Yearly salary must be between {MIN_ANNUAL_SALARY:,} and {MAX_ANNUAL_SALARY:,} NOK",
                param_hint=key,
            )
    elif key == "table_code":
        if parse_table_code(number) is None:
            raise click.BadParameter("Table number must be 8000-8400 or 9010-9400", param_hint=key)
    elif key == "tax_year":
        if number not in default_registry():
            available = ", ".join(str(y) for y in default_registry().years())
            raise click.BadParameter(f"No rate table for {number}. Available: {available}", param_hint=key)

    return number


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - annual_salary: yearly salary in NOK
    - table_code: tax table number (8000-8400 or 9010-9400)
    - tax_year: tax year for rate lookup
    - use_withholding_display: show withholding instead of actual tax
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their effective values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
        click.echo()

    click.echo("Effective settings:")
    for key, value in load_calculator_settings().items():
        source = "" if key in current else " (default)"
        shown = "not set" if value is None else value
        click.echo(f"  {key}: {shown}{source}")


@settings.command("set")
@click.argument("key", type=click.Choice(SETTING_KEYS))
@click.argument("value")
def settings_set(key, value):
    """Set a setting value.

    Examples:
        overtime-calc settings set annual_salary 900000
        overtime-calc settings set table_code 8115
        overtime-calc settings set use_withholding_display true
    """
    parsed = _parse_setting_value(key, value)
    path = set_setting(key, parsed)
    click.echo(f"Set {key}: {parsed}")
    click.echo(f"Saved to: {path}")


@settings.command("clear")
@click.argument("key", type=click.Choice(SETTING_KEYS))
def settings_clear(key):
    """Clear a setting, reverting to its default."""
    if clear_setting(key):
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")
