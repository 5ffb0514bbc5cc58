"""Tax rate registry.

Rate tables are loaded from tax_rules/YYYY.yaml once and wrapped in a
read-only registry. Engines receive a registry at construction; nothing
mutates it afterwards. New tax years are added by shipping a new YAML file.
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Union

import yaml

from ..errors import OvertimeCalcError
from .schemas import TaxYearRates

logger = logging.getLogger(__name__)


class UnsupportedYearError(OvertimeCalcError):
    """Raised when no rate table is registered for the requested tax year."""

    def __init__(self, year, available=()):
        self.year = year
        self.available = tuple(available)
        available_text = ", ".join(str(y) for y in self.available) or "none"
        super().__init__(
            f"Tax rates for year {year} are not available. Available years: {available_text}"
        )


def get_tax_rules_dir() -> Path:
    """Get the packaged tax_rules directory path."""
    return Path(__file__).parent / "tax_rules"


def load_rate_file(path: Union[str, Path]) -> TaxYearRates:
    """Load and validate a single rate table YAML file."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return TaxYearRates.model_validate(data)


def load_rate_tables(directory: Union[str, Path, None] = None) -> dict[int, TaxYearRates]:
    """Load every YYYY.yaml rate table in a directory.

    Args:
        directory: Directory to scan (defaults to the packaged tax_rules/)

    Returns:
        Dict of year -> validated TaxYearRates

    Raises:
        FileNotFoundError: If the directory does not exist
        pydantic.ValidationError: If a file does not match the schema
    """
    rules_dir = Path(directory) if directory is not None else get_tax_rules_dir()
    if not rules_dir.is_dir():
        raise FileNotFoundError(f"Tax rules directory not found: {rules_dir}")

    tables = {}
    for path in sorted(rules_dir.glob("*.yaml")):
        if not path.stem.isdigit():
            continue
        tables[int(path.stem)] = load_rate_file(path)

    logger.debug(f"Loaded rate tables for years {sorted(tables)} from {rules_dir}")
    return tables


class RateRegistry:
    """Read-only lookup of rate tables by tax year."""

    def __init__(self, tables: Mapping[int, TaxYearRates]):
        self._tables = MappingProxyType(dict(tables))

    @property
    def tables(self) -> Mapping[int, TaxYearRates]:
        return self._tables

    def rates_for(self, year: int) -> TaxYearRates:
        """Return the rate table for a year.

        Raises:
            UnsupportedYearError: If the year is not registered
        """
        try:
            return self._tables[year]
        except (KeyError, TypeError):
            raise UnsupportedYearError(year, self.years()) from None

    def years(self) -> list[int]:
        return sorted(self._tables)

    def __contains__(self, year) -> bool:
        try:
            return year in self._tables
        except TypeError:
            return False

    def __iter__(self) -> Iterator[int]:
        return iter(self.years())

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"RateRegistry(years={self.years()})"


@lru_cache(maxsize=1)
def default_registry() -> RateRegistry:
    """Registry built from the packaged rate tables (loaded once per process)."""
    return RateRegistry(load_rate_tables())
