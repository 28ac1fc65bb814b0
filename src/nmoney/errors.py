"""Errors raised by the `nmoney` package.

Each error also derives from the matching built-in family (`ValueError`,
`OverflowError`), so callers can catch either the specific class or the
generic one.
"""


class MoneyError(Exception):
    """Base class for all errors raised by `nmoney`."""

    pass


class InvalidFractionalUnitsError(MoneyError, ValueError):
    """Raised when fractional units are outside the range [0, 99]."""

    pass


class InvalidSymbolError(MoneyError, ValueError):
    """Raised when a display symbol is not a single non-digit character."""

    pass


class MoneyOverflowError(MoneyError, OverflowError):
    """Raised when a total of fractional units exceeds the maximum signed 64-bit value."""

    pass


class MoneyUnderflowError(MoneyError, OverflowError):
    """Raised when a total of fractional units falls below the minimum signed 64-bit value."""

    pass
