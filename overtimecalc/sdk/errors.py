"""Base exception shared by all Overtime Calc errors."""


class OvertimeCalcError(Exception):
    """Base class for errors raised by the SDK."""
    pass
