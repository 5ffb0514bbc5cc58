"""Display formatting for NOK amounts and rates."""

from decimal import Decimal, ROUND_HALF_UP


def format_nok(amount: float, include_decimals: bool = False) -> str:
    """Format an amount as Norwegian currency.

    Uses a space as thousands separator and a comma for decimals, rounding
    half up: 1234.5 -> 'kr 1 235', with decimals 'kr 1 234,50'.
    """
    quantum = Decimal("0.01") if include_decimals else Decimal("1")
    rounded = Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP)

    sign = "-" if rounded < 0 else ""
    text = f"{abs(rounded):,.{2 if include_decimals else 0}f}"
    text = text.replace(",", " ").replace(".", ",")
    return f"kr {sign}{text}"


def format_rate(rate: float) -> str:
    """Format a fractional rate as a percentage with one decimal."""
    return f"{rate * 100:.1f} %"
