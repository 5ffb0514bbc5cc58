"""Reference cases and table number analysis.

REFERENCE_CASES are scenarios to compare by hand against Skatteetaten's
official withholding calculator (https://tabellkort.app.skatteetaten.no/,
"Månedslønn"). Expected agreement is within about 2%.

The table effect helpers document when a table number changes the marginal
tax on overtime. The table adjustment is a constant offset in taxable
general income, so it cancels in the marginal difference unless taxable
general income is floored at zero for the base salary.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .overtime import OvertimeScenario, compute_overtime
from .taxes.rates import RateRegistry, default_registry
from .taxes.tables import require_table_code
from .taxes.withholding import WithholdingEngine


@dataclass(frozen=True)
class ReferenceCase:
    description: str
    annual_salary: float
    table_code: int
    overtime_hours: float


REFERENCE_CASES = (
    ReferenceCase("Low salary, standard deduction table", 400_000, 8100, 8),
    ReferenceCase("Medium salary, standard deduction table", 600_000, 8100, 10),
    ReferenceCase("Medium-high salary, moderate deduction", 750_000, 8115, 12),
    ReferenceCase("High salary, moderate deduction", 900_000, 8115, 10),
    ReferenceCase("Very high salary, high deduction", 1_200_000, 8150, 15),
    ReferenceCase("Medium salary, addition table (extra income)", 700_000, 9050, 10),
    ReferenceCase("High salary, addition table", 1_000_000, 9100, 10),
)

SALARY_RANGE = (450_000, 500_000, 600_000, 700_000, 750_000, 800_000, 900_000, 1_000_000, 1_200_000, 1_500_000)
DEDUCTION_SAMPLE = (8000, 8050, 8100, 8150, 8200, 8250, 8300, 8350, 8400)
ADDITION_SAMPLE = (9010, 9050, 9100, 9150, 9200, 9250, 9300, 9350, 9400)


def reference_breakdown(case: ReferenceCase, tax_year: int = 2026, engine: Optional[WithholdingEngine] = None) -> dict:
    """Monthly withholding with and without overtime for a reference case."""
    engine = engine or WithholdingEngine()
    result = compute_overtime(
        OvertimeScenario(case.annual_salary, case.overtime_hours, case.table_code, tax_year),
        engine=engine,
    )

    monthly_gross = case.annual_salary / 12
    combined_gross = monthly_gross + result.gross_overtime_pay
    normal = engine.monthly_withholding(monthly_gross, case.table_code, tax_year)
    combined = engine.monthly_withholding(combined_gross, case.table_code, tax_year)

    return {
        "description": case.description,
        "annual_salary": case.annual_salary,
        "table_code": case.table_code,
        "overtime_hours": case.overtime_hours,
        "tax_year": tax_year,
        "normal": {
            "monthly_gross": round(monthly_gross, 2),
            "withholding": round(normal, 2),
            "effective_rate": round(normal / monthly_gross, 3),
            "net_pay": round(monthly_gross - normal, 2),
        },
        "with_overtime": {
            "monthly_gross": round(combined_gross, 2),
            "withholding": round(combined, 2),
            "effective_rate": round(combined / combined_gross, 3),
            "net_pay": round(combined_gross - combined, 2),
        },
        "overtime": result.to_dict(),
    }


def table_effect_threshold(table_code: int, tax_year: int = 2026, registry: Optional[RateRegistry] = None) -> float:
    """Annual income below which a table number affects marginal overtime tax.

    Assumes the standard deduction is at its ceiling, which holds for any
    salary in the supported range.
    """
    registry = registry if registry is not None else default_registry()
    rates = registry.rates_for(tax_year)
    table = require_table_code(table_code)
    return rates.standard_deduction.ceiling + rates.personal_allowance - table.adjustment


def table_effect_matrix(
    salaries: Iterable[float] = SALARY_RANGE,
    table_codes: Iterable[int] = DEDUCTION_SAMPLE + ADDITION_SAMPLE,
    overtime_hours: float = 10,
    tax_year: int = 2026,
    engine: Optional[WithholdingEngine] = None,
) -> list[dict]:
    """Take-home pay per salary across table numbers.

    Returns:
        One dict per salary with the take-home per table number, the
        distinct values, and whether every table agreed
    """
    engine = engine or WithholdingEngine()
    table_codes = list(table_codes)
    rows = []
    for salary in salaries:
        take_home = {}
        for code in table_codes:
            result = compute_overtime(OvertimeScenario(salary, overtime_hours, code, tax_year), engine=engine)
            take_home[code] = result.take_home_actual
        distinct = sorted(set(take_home.values()))
        rows.append({
            "annual_salary": salary,
            "take_home": take_home,
            "distinct": distinct,
            "uniform": len(distinct) == 1,
        })
    return rows
