"""Overtime Calc - Norwegian withholding (tabelltrekk) estimates for overtime pay."""

__version__ = "0.1.0"
