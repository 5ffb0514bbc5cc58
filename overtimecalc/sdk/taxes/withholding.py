"""Norwegian income tax withholding (tabelltrekk) calculations.

Implements the algorithmic form of Skatteetaten's withholding tables:

- Trinnskatt (bracket tax) on gross personal income
- Trygdeavgift (national insurance) on gross personal income
- Inntektsskatt (22% general income tax) on alminnelig inntekt, after
  minstefradrag, personfradrag and the table number adjustment

This is an estimate. Actual withholding may differ slightly due to rounding
in the published tables.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Optional, Sequence

from .rates import RateRegistry, default_registry
from .schemas import StandardDeductionRules, TaxBracket, TaxYearRates
from .tables import require_table_code

logger = logging.getLogger(__name__)


def bracket_tax(annual_income: float, brackets: Sequence[TaxBracket]) -> float:
    """Calculate trinnskatt using progressive brackets.

    Only the slice of income inside each bracket is taxed at that bracket's
    rate. Income exactly at a threshold is taxed entirely in the brackets
    below it.
    """
    tax = 0.0
    previous_threshold = 0.0
    for bracket in brackets:
        if annual_income <= previous_threshold:
            break
        if bracket.is_open_ended:
            upper = annual_income
        else:
            upper = min(annual_income, bracket.threshold)
        tax += max(0.0, upper - previous_threshold) * bracket.rate
        if bracket.is_open_ended:
            break
        previous_threshold = bracket.threshold
    return tax


def standard_deduction(annual_income: float, rules: StandardDeductionRules) -> float:
    """Minstefradrag: rate x income clamped to [floor, ceiling]."""
    return min(max(annual_income * rules.rate, rules.floor), rules.ceiling)


@dataclass(frozen=True)
class AnnualTaxBreakdown:
    """Components of an annual tax calculation (unrounded NOK)."""

    gross_income: float
    standard_deduction: float
    table_adjustment: int
    taxable_general_income: float
    bracket_tax: float
    national_insurance: float
    general_income_tax: float

    @property
    def total(self) -> float:
        return self.bracket_tax + self.national_insurance + self.general_income_tax

    def to_dict(self) -> dict:
        data = asdict(self)
        data["total"] = self.total
        return data


class WithholdingEngine:
    """Applies a rate registry to income scenarios.

    Stateless apart from the read-only registry, so a single engine can be
    shared freely between threads.
    """

    def __init__(self, registry: Optional[RateRegistry] = None):
        self.registry = registry if registry is not None else default_registry()

    def rates_for(self, year: int) -> TaxYearRates:
        return self.registry.rates_for(year)

    def annual_tax_breakdown(self, annual_gross: float, table_code: int, year: int) -> AnnualTaxBreakdown:
        """Calculate the annual tax components for a gross income.

        Raises:
            UnsupportedYearError: If the year has no rate table
            InvalidTableCodeError: If the table number is unsupported
        """
        rates = self.rates_for(year)
        table = require_table_code(table_code)

        deduction = standard_deduction(annual_gross, rates.standard_deduction)
        taxable_general = max(
            0.0,
            annual_gross - deduction - rates.personal_allowance + table.adjustment,
        )

        ni = rates.national_insurance
        national_insurance = annual_gross * ni.rate if annual_gross > ni.exemption_threshold else 0.0

        breakdown = AnnualTaxBreakdown(
            gross_income=annual_gross,
            standard_deduction=deduction,
            table_adjustment=table.adjustment,
            taxable_general_income=taxable_general,
            bracket_tax=bracket_tax(annual_gross, rates.bracket_tax),
            national_insurance=national_insurance,
            general_income_tax=taxable_general * rates.general_income_tax.rate,
        )
        logger.debug(
            f"annual tax {year}/{table_code}: gross={annual_gross:.2f} "
            f"general={taxable_general:.2f} total={breakdown.total:.2f}"
        )
        return breakdown

    def annual_tax(self, annual_gross: float, table_code: int, year: int) -> float:
        """Calculate the annual tax owed on a gross income (unrounded)."""
        return self.annual_tax_breakdown(annual_gross, table_code, year).total

    def monthly_withholding(self, monthly_gross: float, table_code: int, year: int) -> float:
        """Calculate the withholding for one month's gross pay.

        The month is annualized (x12), taxed, then spread over the year's
        withholding periods (10.5 for 2026: no withholding in June, half in
        December).
        """
        rates = self.rates_for(year)
        return self.annual_tax(monthly_gross * 12, table_code, year) / rates.withholding_periods

    def compute_overtime(self, scenario):
        """Calculate the take-home breakdown for an OvertimeScenario."""
        from ..overtime import compute_overtime
        return compute_overtime(scenario, engine=self)
