"""Overtime Calc SDK - Core functionality for overtime take-home estimates."""

from .errors import OvertimeCalcError

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
    load_calculator_settings,
    SETTING_KEYS,
    DEFAULT_SETTINGS,
)

from .taxes import (
    RateRegistry,
    TaxYearRates,
    UnsupportedYearError,
    default_registry,
    load_rate_tables,
    TableCode,
    InvalidTableCodeError,
    parse_table_code,
    WithholdingEngine,
    bracket_tax,
)

from .overtime import (
    OvertimeScenario,
    OvertimeResult,
    compute_overtime,
    calculate_overtime,
    STANDARD_ANNUAL_HOURS,
    OVERTIME_PREMIUM,
    DEFAULT_TAX_YEAR,
)

from .validation import (
    InvalidInputError,
    ParameterValidationResult,
    validate_parameters,
)

from .formatting import (
    format_nok,
    format_rate,
)

__all__ = [
    "OvertimeCalcError",
    # Settings
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    "load_calculator_settings",
    "SETTING_KEYS",
    "DEFAULT_SETTINGS",
    # Rates and engine
    "RateRegistry",
    "TaxYearRates",
    "UnsupportedYearError",
    "default_registry",
    "load_rate_tables",
    "TableCode",
    "InvalidTableCodeError",
    "parse_table_code",
    "WithholdingEngine",
    "bracket_tax",
    # Overtime
    "OvertimeScenario",
    "OvertimeResult",
    "compute_overtime",
    "calculate_overtime",
    "STANDARD_ANNUAL_HOURS",
    "OVERTIME_PREMIUM",
    "DEFAULT_TAX_YEAR",
    # Validation
    "InvalidInputError",
    "ParameterValidationResult",
    "validate_parameters",
    # Formatting
    "format_nok",
    "format_rate",
]
