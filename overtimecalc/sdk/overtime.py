"""Take-home pay on overtime.

Two views of the tax on an overtime payment:

- Withholding: what the employer deducts. Tabelltrekk assumes the month's
  pay recurs every month, so the overtime is taxed as if it were earned
  twelve times and spread over the withholding periods.
- Actual: the true marginal tax if the overtime is a one-off, taken as the
  difference in annual tax with and without it.

Withholding is normally higher; the gap is refunded at year-end settlement.
If similar overtime is worked every month the two converge.

Table number adjustments are a constant offset to taxable general income,
so they cancel out of both differences unless taxable general income hits
zero for one of the terms.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Optional

from .taxes.rates import RateRegistry
from .taxes.withholding import WithholdingEngine

logger = logging.getLogger(__name__)

STANDARD_ANNUAL_HOURS = 1950  # Standard Norwegian work year (37.5 h/week)
OVERTIME_PREMIUM = 1.4  # 40% overtime supplement
DEFAULT_TAX_YEAR = 2026


@dataclass(frozen=True)
class OvertimeScenario:
    """Inputs for one overtime calculation."""

    annual_salary: float
    overtime_hours: float
    table_code: int
    tax_year: int = DEFAULT_TAX_YEAR


@dataclass(frozen=True)
class OvertimeResult:
    """Overtime breakdown. NOK rounded to 2 decimals, rates to 3."""

    gross_overtime_pay: float
    base_hourly_rate: float
    overtime_hourly_rate: float

    # Actual tax: overtime as an occasional event
    tax_on_overtime_actual: float
    take_home_actual: float
    effective_rate_actual: float

    # Withholding: what the payslip shows
    tax_on_overtime_withholding: float
    take_home_withholding: float
    effective_rate_withholding: float

    # Can be negative at modeling edge cases; not clamped.
    estimated_refund: float

    def take_home(self, use_withholding: bool = False) -> float:
        """Take-home figure to display, per the use_withholding_display setting."""
        return self.take_home_withholding if use_withholding else self.take_home_actual

    def to_dict(self) -> dict:
        return asdict(self)


def _round_currency(amount: float) -> float:
    return round(amount, 2)


def _round_rate(rate: float) -> float:
    return round(rate, 3)


def compute_overtime(scenario: OvertimeScenario, engine: Optional[WithholdingEngine] = None) -> OvertimeResult:
    """Calculate gross, tax and take-home pay for overtime hours.

    Args:
        scenario: Salary, hours, table number and tax year
        engine: Engine to use (defaults to one over the packaged rate tables)

    Returns:
        OvertimeResult with all amounts rounded at this boundary only

    Raises:
        UnsupportedYearError: If the tax year has no rate table
        InvalidTableCodeError: If the table number is unsupported
    """
    engine = engine or WithholdingEngine()
    salary = scenario.annual_salary
    table = scenario.table_code
    year = scenario.tax_year

    base_hourly = salary / STANDARD_ANNUAL_HOURS
    overtime_hourly = base_hourly * OVERTIME_PREMIUM
    gross = scenario.overtime_hours * overtime_hourly

    # Withholding: marginal monthly deduction with the overtime in the month
    normal_monthly = salary / 12
    combined_monthly = normal_monthly + gross
    withholding_tax = (
        engine.monthly_withholding(combined_monthly, table, year)
        - engine.monthly_withholding(normal_monthly, table, year)
    )

    # Actual: marginal annual tax
    actual_tax = (
        engine.annual_tax(salary + gross, table, year)
        - engine.annual_tax(salary, table, year)
    )

    if gross == 0:
        actual_tax = withholding_tax = 0.0
        rate_actual = rate_withholding = 0.0
    else:
        rate_actual = actual_tax / gross
        rate_withholding = withholding_tax / gross

    result = OvertimeResult(
        gross_overtime_pay=_round_currency(gross),
        base_hourly_rate=_round_currency(base_hourly),
        overtime_hourly_rate=_round_currency(overtime_hourly),
        tax_on_overtime_actual=_round_currency(actual_tax),
        take_home_actual=_round_currency(gross - actual_tax),
        effective_rate_actual=_round_rate(rate_actual),
        tax_on_overtime_withholding=_round_currency(withholding_tax),
        take_home_withholding=_round_currency(gross - withholding_tax),
        effective_rate_withholding=_round_rate(rate_withholding),
        estimated_refund=_round_currency(withholding_tax - actual_tax),
    )
    logger.debug(
        f"overtime {scenario}: gross={result.gross_overtime_pay} "
        f"actual={result.tax_on_overtime_actual} withholding={result.tax_on_overtime_withholding}"
    )
    return result


def calculate_overtime(
    annual_salary: float,
    overtime_hours: float,
    table_code: int,
    tax_year: int = DEFAULT_TAX_YEAR,
    registry: Optional[RateRegistry] = None,
) -> OvertimeResult:
    """Convenience wrapper around compute_overtime for plain arguments."""
    scenario = OvertimeScenario(
        annual_salary=annual_salary,
        overtime_hours=overtime_hours,
        table_code=table_code,
        tax_year=tax_year,
    )
    return compute_overtime(scenario, engine=WithholdingEngine(registry))
