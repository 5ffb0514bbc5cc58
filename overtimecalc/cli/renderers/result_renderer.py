"""Rich renderers for overtime and withholding results.

Transforms SDK output into formatted Rich tables.
"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from overtimecalc.sdk import OvertimeResult, OvertimeScenario, format_nok, format_rate


def render_warnings(console: Console, warnings: list) -> None:
    for warning in warnings:
        console.print(Panel(
            f"[yellow]{warning}[/yellow]",
            title="Note",
            border_style="yellow"
        ))


def render_overtime(
    console: Console,
    scenario: OvertimeScenario,
    result: OvertimeResult,
    use_withholding: bool = False,
) -> None:
    """Render an overtime result as a Rich table.

    Args:
        console: Rich Console instance
        scenario: Inputs the result was computed from
        result: compute_overtime() output
        use_withholding: Highlight the withholding column instead of actual
    """
    inputs = Table(show_header=False, box=None, padding=(0, 2))
    inputs.add_column("key", style="dim")
    inputs.add_column("value")
    inputs.add_row("Yearly salary", format_nok(scenario.annual_salary))
    inputs.add_row("Table number", str(scenario.table_code))
    inputs.add_row("Tax year", str(scenario.tax_year))
    inputs.add_row("Overtime hours", f"{scenario.overtime_hours:g}")
    inputs.add_row("Hourly rate", format_nok(result.base_hourly_rate, include_decimals=True))
    inputs.add_row("Overtime rate", format_nok(result.overtime_hourly_rate, include_decimals=True) + " (x1.4)")
    console.print(Panel(inputs, title="Inputs", border_style="dim"))

    actual_style = "dim" if use_withholding else "bold"
    withholding_style = "bold" if use_withholding else "dim"

    table = Table(title="Overtime", box=box.SIMPLE_HEAD)
    table.add_column("", style="dim")
    table.add_column("Actual tax", justify="right", style=actual_style)
    table.add_column("Withholding", justify="right", style=withholding_style)

    gross = format_nok(result.gross_overtime_pay, include_decimals=True)
    table.add_row("Gross", gross, gross)
    table.add_row(
        "Tax",
        format_nok(result.tax_on_overtime_actual, include_decimals=True),
        format_nok(result.tax_on_overtime_withholding, include_decimals=True),
    )
    table.add_row(
        "Take-home",
        format_nok(result.take_home_actual, include_decimals=True),
        format_nok(result.take_home_withholding, include_decimals=True),
    )
    table.add_row(
        "Effective rate",
        format_rate(result.effective_rate_actual),
        format_rate(result.effective_rate_withholding),
    )
    console.print(table)

    refund_color = "green" if result.estimated_refund >= 0 else "red"
    console.print(
        f"Estimated refund at settlement: "
        f"[{refund_color}]{format_nok(result.estimated_refund, include_decimals=True)}[/{refund_color}]"
    )


def render_withholding(console: Console, monthly_gross: float, withholding: float, breakdown: dict) -> None:
    """Render monthly withholding and the annualized components behind it."""
    table = Table(title="Monthly withholding", box=box.SIMPLE_HEAD)
    table.add_column("Component", style="dim")
    table.add_column("Annual", justify="right")

    table.add_row("Gross income (x12)", format_nok(breakdown["gross_income"]))
    table.add_row("Minstefradrag", format_nok(breakdown["standard_deduction"]))
    table.add_row("Table adjustment", format_nok(breakdown["table_adjustment"]))
    table.add_row("Alminnelig inntekt", format_nok(breakdown["taxable_general_income"]))
    table.add_row("Trinnskatt", format_nok(breakdown["bracket_tax"], include_decimals=True))
    table.add_row("Trygdeavgift", format_nok(breakdown["national_insurance"], include_decimals=True))
    table.add_row("Inntektsskatt", format_nok(breakdown["general_income_tax"], include_decimals=True))
    table.add_row("[bold]Total[/bold]", format_nok(breakdown["total"], include_decimals=True))
    console.print(table)

    console.print(f"Monthly gross:       {format_nok(monthly_gross, include_decimals=True)}")
    console.print(f"Monthly withholding: [bold]{format_nok(withholding, include_decimals=True)}[/bold]")
    if monthly_gross > 0:
        console.print(f"Effective rate:      {format_rate(withholding / monthly_gross)}")
