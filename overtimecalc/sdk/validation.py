"""Input validation for overtime calculations.

Runs before the engine is called. The engine itself only fails on an
unknown year or table number; softer checks (salary range, negative or
suspicious hour counts) live here.
"""

from numbers import Real
from typing import Optional

from .errors import OvertimeCalcError
from .taxes.rates import RateRegistry, default_registry
from .taxes.tables import ADDITION_RANGE, DEDUCTION_RANGE, parse_table_code

MIN_ANNUAL_SALARY = 100_000
MAX_ANNUAL_SALARY = 5_000_000
HIGH_OVERTIME_HOURS = 200


class InvalidInputError(OvertimeCalcError):
    """Raised when calculation parameters fail validation."""

    def __init__(self, errors: list):
        self.errors = list(errors)
        super().__init__("Invalid input:\n" + "\n".join(f"  - {e}" for e in self.errors))


class ParameterValidationResult:
    """Result of parameter validation.

    Errors block the calculation; warnings are suspicious but allowed.
    """

    def __init__(self, errors: list = None, warnings: list = None):
        self.errors = errors or []
        self.warnings = warnings or []

    @property
    def valid(self) -> bool:
        return not self.errors

    def raise_if_invalid(self) -> None:
        """Raise InvalidInputError if there are any errors."""
        if self.errors:
            raise InvalidInputError(self.errors)

    def to_dict(self) -> dict:
        return {"valid": self.valid, "errors": list(self.errors), "warnings": list(self.warnings)}

    def __repr__(self) -> str:
        return f"ParameterValidationResult(valid={self.valid}, errors={self.errors}, warnings={self.warnings})"


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_parameters(
    annual_salary,
    overtime_hours,
    table_code,
    tax_year,
    registry: Optional[RateRegistry] = None,
) -> ParameterValidationResult:
    """Validate calculation parameters.

    Args:
        annual_salary: Yearly salary in NOK
        overtime_hours: Overtime hours worked
        table_code: Tax table number (e.g. 8115)
        tax_year: Tax year
        registry: Registry to check the year against (defaults to packaged)

    Returns:
        ParameterValidationResult with errors and warnings
    """
    registry = registry if registry is not None else default_registry()
    errors = []
    warnings = []

    if not _is_number(annual_salary):
        errors.append("Yearly salary must be provided as a number")
    elif not MIN_ANNUAL_SALARY <= annual_salary <= MAX_ANNUAL_SALARY:
        errors.append(
            f"Yearly salary must be between {MIN_ANNUAL_SALARY:,} and {MAX_ANNUAL_SALARY:,} NOK"
        )

    if not _is_number(overtime_hours) or overtime_hours < 0:
        errors.append("Overtime hours must be zero or a positive number")
    elif overtime_hours > HIGH_OVERTIME_HOURS:
        warnings.append(f"Overtime hours seems unusually high (>{HIGH_OVERTIME_HOURS} hours)")

    if parse_table_code(table_code) is None:
        errors.append(
            f"Invalid table number. Must be {DEDUCTION_RANGE[0]}-{DEDUCTION_RANGE[1]} "
            f"or {ADDITION_RANGE[0]}-{ADDITION_RANGE[1]}"
        )

    if tax_year not in registry:
        errors.append(f"Tax rates for year {tax_year} are not available")

    return ParameterValidationResult(errors=errors, warnings=warnings)
