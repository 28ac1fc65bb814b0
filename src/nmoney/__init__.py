"""Precision-safe monetary amounts.

`Money` keeps whole units, fractional units and a `Sign` as separate integers,
so amounts never pick up floating-point noise. Display is controlled per
instance through `Options`.
"""

__version__ = "0.1.0"

from nmoney.errors import (
    InvalidFractionalUnitsError,
    InvalidSymbolError,
    MoneyError,
    MoneyOverflowError,
    MoneyUnderflowError,
)
from nmoney.money import Money
from nmoney.options import NegativeView, Options
from nmoney.sign import Sign

__all__ = [
    "InvalidFractionalUnitsError",
    "InvalidSymbolError",
    "Money",
    "MoneyError",
    "MoneyOverflowError",
    "MoneyUnderflowError",
    "NegativeView",
    "Options",
    "Sign",
]
