"""Tax table number (tabellnummer) parsing.

Table numbers from 2025 on:
- 8000-8400: fradragstabeller (deduction tables). Last three digits x 1000
  is a deduction in NOK, e.g. 8115 = 115,000 NOK.
- 9010-9400: tilleggstabeller (addition tables). Last three digits x 1000
  is an addition in NOK, e.g. 9050 = 50,000 NOK. The band starts at 9010,
  not 9000.

Special tables (7100-series pension tables, 7150, 7160, ...) are not
supported.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from ..errors import OvertimeCalcError

DEDUCTION_RANGE = (8000, 8400)
ADDITION_RANGE = (9010, 9400)
ADDITION_BASE = 9000
AMOUNT_PER_STEP = 1000

TableKind = Literal["deduction", "addition"]


class InvalidTableCodeError(OvertimeCalcError):
    """Raised when a table number is outside both supported bands."""

    def __init__(self, code):
        self.code = code
        super().__init__(
            f"Invalid or unsupported table number: {code}. "
            f"Must be {DEDUCTION_RANGE[0]}-{DEDUCTION_RANGE[1]} or {ADDITION_RANGE[0]}-{ADDITION_RANGE[1]}"
        )


@dataclass(frozen=True)
class TableCode:
    """A parsed table number."""

    code: int
    kind: TableKind
    amount: int  # NOK, always >= 0

    @property
    def adjustment(self) -> int:
        """Signed change to taxable general income (deductions reduce it)."""
        return -self.amount if self.kind == "deduction" else self.amount


def parse_table_code(code) -> Optional[TableCode]:
    """Parse a table number.

    Returns:
        TableCode, or None if the number is not a supported deduction or
        addition table (including non-integer input)
    """
    if isinstance(code, bool) or not isinstance(code, int):
        return None

    if DEDUCTION_RANGE[0] <= code <= DEDUCTION_RANGE[1]:
        return TableCode(code, "deduction", (code - DEDUCTION_RANGE[0]) * AMOUNT_PER_STEP)
    if ADDITION_RANGE[0] <= code <= ADDITION_RANGE[1]:
        return TableCode(code, "addition", (code - ADDITION_BASE) * AMOUNT_PER_STEP)
    return None


def require_table_code(code) -> TableCode:
    """Parse a table number, raising InvalidTableCodeError if unsupported."""
    table = parse_table_code(code)
    if table is None:
        raise InvalidTableCodeError(code)
    return table


def supported_table_codes() -> list[int]:
    """All supported table numbers, deduction band first."""
    return (
        list(range(DEDUCTION_RANGE[0], DEDUCTION_RANGE[1] + 1))
        + list(range(ADDITION_RANGE[0], ADDITION_RANGE[1] + 1))
    )
