"""taxes - Norwegian withholding (tabelltrekk) engine.

Scope:
- Per-year rate tables (trinnskatt, trygdeavgift, minstefradrag, ...)
- Table number parsing (fradrag/tillegg bands)
- Annual tax and monthly withholding calculations

Constraints:
- Pure calculation - no settings or I/O beyond loading rate tables
- Year-specific rates loaded from tax_rules/{year}.yaml at registry creation

Usage:
    from overtimecalc.sdk.taxes import WithholdingEngine

    engine = WithholdingEngine()
    engine.monthly_withholding(75000, 8115, 2026)
"""

from .schemas import (
    TaxBracket,
    NationalInsuranceRules,
    GeneralIncomeTaxRules,
    StandardDeductionRules,
    TaxYearRates,
)

from .rates import (
    RateRegistry,
    UnsupportedYearError,
    default_registry,
    get_tax_rules_dir,
    load_rate_file,
    load_rate_tables,
)

from .tables import (
    TableCode,
    InvalidTableCodeError,
    parse_table_code,
    require_table_code,
    supported_table_codes,
)

from .withholding import (
    AnnualTaxBreakdown,
    WithholdingEngine,
    bracket_tax,
    standard_deduction,
)

__all__ = [
    # Schemas
    "TaxBracket",
    "NationalInsuranceRules",
    "GeneralIncomeTaxRules",
    "StandardDeductionRules",
    "TaxYearRates",
    # Registry
    "RateRegistry",
    "UnsupportedYearError",
    "default_registry",
    "get_tax_rules_dir",
    "load_rate_file",
    "load_rate_tables",
    # Table numbers
    "TableCode",
    "InvalidTableCodeError",
    "parse_table_code",
    "require_table_code",
    "supported_table_codes",
    # Engine
    "AnnualTaxBreakdown",
    "WithholdingEngine",
    "bracket_tax",
    "standard_deduction",
]
