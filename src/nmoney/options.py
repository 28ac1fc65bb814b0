from __future__ import annotations

import logging
from enum import Enum

from nmoney.errors import InvalidSymbolError

logger = logging.getLogger(__name__)


class NegativeView(Enum):
    """Represents how a negative amount is rendered."""

    MINUS = "MINUS"  # -$5.25
    PAREN = "PAREN"  # ($5.25)
    HIDE = "HIDE"  # $5.25


DEFAULT_SYMBOL = "$"
DEFAULT_SHOW_SYMBOL = True
DEFAULT_NEGATIVE_VIEW = NegativeView.MINUS

_DIGITS = frozenset("0123456789")


class Options:
    """Display configuration of a single `Money` instance.

    Every `Money` owns its own `Options`, so changing the display settings of
    one amount never affects another.

    Attributes:
        symbol (str): Currency symbol, a single non-digit character.
        show_symbol (bool): Whether the symbol is included in the rendered string.
        negative_view (NegativeView): How negative amounts are rendered.
    """

    def __init__(self):
        self._symbol = DEFAULT_SYMBOL
        self._show_symbol = DEFAULT_SHOW_SYMBOL
        self._negative_view = DEFAULT_NEGATIVE_VIEW

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    @property
    def show_symbol(self) -> bool:
        """Get whether the symbol is shown."""
        return self._show_symbol

    @property
    def negative_view(self) -> NegativeView:
        """Get the negative view."""
        return self._negative_view

    def set_symbol(self, symbol: str) -> None:
        """Set the currency symbol. Default: '$'.

        Args:
            symbol (str): A single character that is not a decimal digit.

        Raises:
            InvalidSymbolError: If $symbol is not a single character or is a digit.
                The previous symbol is kept.
        """
        # Raise: symbol must be exactly one character
        if not isinstance(symbol, str) or len(symbol) != 1:
            logger.debug(f"Rejected $symbol {symbol!r}: not a single character")
            raise InvalidSymbolError(f"$symbol must be a single character, but provided value is: {symbol!r}")

        # Raise: digits would be indistinguishable from the amount
        if symbol in _DIGITS:
            logger.debug(f"Rejected $symbol {symbol!r}: digit")
            raise InvalidSymbolError(f"$symbol cannot be a digit, but provided value is: '{symbol}'")

        self._symbol = symbol

    def set_show_symbol(self, show_symbol: bool) -> None:
        """Set whether the symbol is included in the string. Default: True."""
        self._show_symbol = bool(show_symbol)

    def set_negative_view(self, negative_view: NegativeView) -> None:
        """Set the negative representation. Default: `NegativeView.MINUS`.

        Raises:
            TypeError: If $negative_view is not a `NegativeView`.
        """
        if not isinstance(negative_view, NegativeView):
            raise TypeError(f"$negative_view must be a NegativeView instance, but provided value is: {negative_view}")

        self._negative_view = negative_view

    def copy(self) -> Options:
        """Return an independent copy of these options."""
        result = Options()
        result._symbol = self._symbol
        result._show_symbol = self._show_symbol
        result._negative_view = self._negative_view
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return (self.symbol, self.show_symbol, self.negative_view) == (other.symbol, other.show_symbol, other.negative_view)

    # Options are mutable, so they must not be used as dict keys
    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(symbol='{self.symbol}', show_symbol={self.show_symbol}, negative_view={self.negative_view})"
