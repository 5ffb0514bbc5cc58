"""Overtime Calc CLI - Command-line interface for overtime take-home estimates."""

import json
import logging
import os

import click
from rich.console import Console
from rich.table import Table
from rich import box

from overtimecalc import __version__
from overtimecalc.sdk import (
    OvertimeCalcError,
    OvertimeScenario,
    WithholdingEngine,
    default_registry,
    format_nok,
    load_calculator_settings,
    validate_parameters,
)
from overtimecalc.sdk.reference import (
    REFERENCE_CASES,
    reference_breakdown,
    table_effect_matrix,
    table_effect_threshold,
)

from .renderers.result_renderer import render_overtime, render_warnings, render_withholding
from .settings_commands import settings as settings_group

logger = logging.getLogger(__name__)


def _configure_logging():
    """Configure logging from the LOG_LEVEL environment variable."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )


@click.group()
@click.version_option(version=__version__, prog_name="overtime-calc")
def cli():
    """Overtime Calc - Take-home pay on overtime under Norwegian tabelltrekk.

    Salary, table number and tax year are read from settings.json when not
    given as options. Settings are loaded from (in order):

    \b
    1. OVERTIME_CALC_CONFIG_PATH environment variable
    2. ~/.config/overtime-calc/settings.json (XDG default)

    Run 'overtime-calc settings show' to see current settings.
    """
    pass


cli.add_command(settings_group)


def _resolve(option_value, settings: dict, key: str):
    return option_value if option_value is not None else settings.get(key)


@cli.command("calc")
@click.argument("hours", type=float)
@click.option("--salary", "-s", type=float, help="Yearly salary in NOK (default: settings)")
@click.option("--table", "-t", "table_code", type=int, help="Tax table number, e.g. 8115 (default: settings)")
@click.option("--year", "-y", "tax_year", type=int, help="Tax year (default: settings or 2026)")
@click.option("--display", "-d", type=click.Choice(["actual", "withholding"]),
              help="Take-home figure to show: actual tax or payslip withholding (default: settings)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def calc(hours, salary, table_code, tax_year, display, as_json):
    """Calculate take-home pay for HOURS of overtime.

    Examples:
        overtime-calc calc 10 --salary 900000 --table 8115
        overtime-calc calc 7.5 --json
    """
    settings = load_calculator_settings()
    salary = _resolve(salary, settings, "annual_salary")
    table_code = _resolve(table_code, settings, "table_code")
    tax_year = _resolve(tax_year, settings, "tax_year")
    if display is None:
        use_withholding = bool(settings.get("use_withholding_display"))
    else:
        use_withholding = display == "withholding"

    validation = validate_parameters(salary, hours, table_code, tax_year)
    if not validation.valid:
        raise click.ClickException(
            "Cannot calculate:\n" + "\n".join(f"  - {e}" for e in validation.errors)
            + "\n\nSet defaults with: overtime-calc settings set KEY VALUE"
        )

    scenario = OvertimeScenario(
        annual_salary=salary,
        overtime_hours=hours,
        table_code=table_code,
        tax_year=tax_year,
    )
    logger.debug(f"calc: {scenario}")
    try:
        result = WithholdingEngine().compute_overtime(scenario)
    except OvertimeCalcError as e:
        raise click.ClickException(str(e))

    if as_json:
        output = {
            "input": {
                "annual_salary": salary,
                "overtime_hours": hours,
                "table_code": table_code,
                "tax_year": tax_year,
            },
            "result": result.to_dict(),
            "take_home": result.take_home(use_withholding),
            "warnings": validation.warnings,
        }
        click.echo(json.dumps(output, indent=2))
        return

    console = Console()
    render_warnings(console, validation.warnings)
    render_overtime(console, scenario, result, use_withholding=use_withholding)


@cli.command("withholding")
@click.argument("monthly_gross", type=float)
@click.option("--table", "-t", "table_code", type=int, help="Tax table number (default: settings)")
@click.option("--year", "-y", "tax_year", type=int, help="Tax year (default: settings or 2026)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def withholding(monthly_gross, table_code, tax_year, as_json):
    """Calculate monthly withholding for MONTHLY_GROSS pay."""
    settings = load_calculator_settings()
    table_code = _resolve(table_code, settings, "table_code")
    tax_year = _resolve(tax_year, settings, "tax_year")

    if table_code is None:
        raise click.ClickException("No table number. Use --table or: overtime-calc settings set table_code 8115")
    if monthly_gross < 0:
        raise click.BadParameter("Monthly gross must be zero or positive", param_hint="MONTHLY_GROSS")

    engine = WithholdingEngine()
    try:
        amount = engine.monthly_withholding(monthly_gross, table_code, tax_year)
        breakdown = engine.annual_tax_breakdown(monthly_gross * 12, table_code, tax_year).to_dict()
    except OvertimeCalcError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps({
            "monthly_gross": monthly_gross,
            "table_code": table_code,
            "tax_year": tax_year,
            "monthly_withholding": round(amount, 2),
            "annual_breakdown": {k: round(v, 2) for k, v in breakdown.items()},
        }, indent=2))
        return

    render_withholding(Console(), monthly_gross, amount, breakdown)


@cli.command("years")
def years():
    """List tax years with rate tables."""
    for year in default_registry().years():
        click.echo(year)


@cli.command("reference")
@click.option("--year", "-y", "tax_year", type=int, default=2026, show_default=True, help="Tax year")
def reference(tax_year):
    """Print cases to compare against Skatteetaten's calculator.

    Enter the monthly gross and table number of each case at
    https://tabellkort.app.skatteetaten.no/ ("Månedslønn") and compare the
    withholding. Expect agreement within about 2%.
    """
    engine = WithholdingEngine()
    for number, case in enumerate(REFERENCE_CASES, start=1):
        try:
            data = reference_breakdown(case, tax_year, engine=engine)
        except OvertimeCalcError as e:
            raise click.ClickException(str(e))

        normal = data["normal"]
        combined = data["with_overtime"]
        overtime = data["overtime"]
        click.echo(f"TEST CASE {number}: {case.description}")
        click.echo(f"  Yearly salary {format_nok(case.annual_salary)}, table {case.table_code}, "
                   f"{case.overtime_hours:g} hours")
        click.echo(f"  Normal month:   gross {format_nok(normal['monthly_gross'], True)}, "
                   f"withholding {format_nok(normal['withholding'], True)}")
        click.echo(f"  With overtime:  gross {format_nok(combined['monthly_gross'], True)}, "
                   f"withholding {format_nok(combined['withholding'], True)}")
        click.echo(f"  Overtime:       gross {format_nok(overtime['gross_overtime_pay'], True)}, "
                   f"take-home {format_nok(overtime['take_home_actual'], True)} actual / "
                   f"{format_nok(overtime['take_home_withholding'], True)} withheld")
        click.echo()


@cli.command("table-effect")
@click.option("--hours", type=float, default=10, show_default=True, help="Overtime hours")
@click.option("--year", "-y", "tax_year", type=int, default=2026, show_default=True, help="Tax year")
def table_effect(hours, tax_year):
    """Show where the table number changes take-home pay on overtime.

    The table adjustment cancels out of the marginal calculation unless
    taxable general income is floored at zero, so for most salaries every
    table number gives the same take-home.
    """
    try:
        rows = table_effect_matrix(overtime_hours=hours, tax_year=tax_year)
    except OvertimeCalcError as e:
        raise click.ClickException(str(e))

    console = Console()
    table = Table(title=f"Take-home on {hours:g} hours by salary", box=box.SIMPLE_HEAD)
    table.add_column("Salary", justify="right")
    table.add_column("Tables agree")
    table.add_column("Take-home range", justify="right")
    for row in rows:
        low, high = row["distinct"][0], row["distinct"][-1]
        span = format_nok(low, True) if row["uniform"] else f"{format_nok(low)} - {format_nok(high)}"
        table.add_row(
            format_nok(row["annual_salary"]),
            "[green]yes[/green]" if row["uniform"] else "[yellow]no[/yellow]",
            span,
        )
    console.print(table)

    thresholds = Table(title="Salary below which the table matters", box=box.SIMPLE_HEAD)
    thresholds.add_column("Table")
    thresholds.add_column("Threshold", justify="right")
    for code in (8000, 8100, 8200, 8300, 8400, 9050, 9400):
        thresholds.add_row(str(code), format_nok(table_effect_threshold(code, tax_year)))
    console.print(thresholds)


def main():
    """Entry point for the CLI."""
    _configure_logging()
    cli()


if __name__ == "__main__":
    main()
