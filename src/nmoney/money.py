from __future__ import annotations

import logging
from decimal import Decimal
from functools import total_ordering

from nmoney.errors import InvalidFractionalUnitsError, MoneyOverflowError, MoneyUnderflowError
from nmoney.options import NegativeView, Options
from nmoney.sign import Sign

logger = logging.getLogger(__name__)

FRACTIONAL_UNITS_PER_WHOLE_UNIT = 100


@total_ordering
class Money:
    """Represents a monetary amount as whole units, fractional units and a sign.

    Magnitudes are plain integers, so there is no floating-point rounding.
    Arithmetic and comparison work on the signed total of fractional units,
    which must fit into the signed 64-bit range. Leaving that range raises
    `MoneyOverflowError` or `MoneyUnderflowError`.

    Each instance owns its own `Options`, which only affect rendering.

    Attributes:
        whole_units (int): Major denomination (e.g. dollars), 0 to `MAX_WHOLE_UNITS`.
        fractional_units (int): Minor denomination (e.g. cents), 0 to 99.
        sign (Sign): Polarity of the amount.
        options (Options): Display configuration of this instance.
    """

    # Value limits
    MAX_WHOLE_UNITS = 2**64 - 1
    MAX_FRACTIONAL_UNITS = FRACTIONAL_UNITS_PER_WHOLE_UNIT - 1
    MAX_TOTAL_FRACTIONAL_UNITS = 2**63 - 1
    MIN_TOTAL_FRACTIONAL_UNITS = -(2**63)

    def __init__(self, whole_units: int, fractional_units: int, sign: Sign = Sign.POSITIVE):
        """Initialize Money from its components.

        Args:
            whole_units (int): Non-negative whole units.
            fractional_units (int): Fractional units in range [0, 99].
            sign (Sign): Polarity of the amount. Stored as given, also for zero.

        Raises:
            InvalidFractionalUnitsError: If $fractional_units is outside [0, 99].
            ValueError: If $whole_units is negative or above `MAX_WHOLE_UNITS`.
            TypeError: If a component has the wrong type.
        """
        # Raise: components must be plain integers
        if isinstance(whole_units, bool) or not isinstance(whole_units, int):
            raise TypeError(f"$whole_units must be an int, but provided value is: {whole_units!r}")
        if isinstance(fractional_units, bool) or not isinstance(fractional_units, int):
            raise TypeError(f"$fractional_units must be an int, but provided value is: {fractional_units!r}")
        if not isinstance(sign, Sign):
            raise TypeError(f"$sign must be a Sign instance, but provided value is: {sign!r}")

        # Raise: whole units must fit the unsigned 64-bit range
        if whole_units < 0 or whole_units > self.MAX_WHOLE_UNITS:
            raise ValueError(f"$whole_units must be between 0 and {self.MAX_WHOLE_UNITS}, but provided value is: {whole_units}")

        # Raise: fractional units must be hundredths of a whole unit
        if fractional_units < 0 or fractional_units > self.MAX_FRACTIONAL_UNITS:
            raise InvalidFractionalUnitsError(f"$fractional_units must be between 0 and {self.MAX_FRACTIONAL_UNITS}, but provided value is: {fractional_units}")

        self._whole_units = whole_units
        self._fractional_units = fractional_units
        self._sign = sign
        self._options = Options()

    @classmethod
    def zero(cls) -> Money:
        """Create a positive zero amount."""
        return cls(0, 0, Sign.POSITIVE)

    @classmethod
    def from_total_fractional_units(cls, total: int) -> Money:
        """Create Money from a signed total of fractional units.

        Zero is always `Sign.POSITIVE`. The result has default options.

        Args:
            total (int): Signed amount in fractional units, e.g. -525 for -5.25.

        Returns:
            Money: New instance with default options.

        Raises:
            MoneyOverflowError: If $total is above `MAX_TOTAL_FRACTIONAL_UNITS`.
            MoneyUnderflowError: If $total is below `MIN_TOTAL_FRACTIONAL_UNITS`.
        """
        if isinstance(total, bool) or not isinstance(total, int):
            raise TypeError(f"$total must be an int, but provided value is: {total!r}")

        _check_total(total, "from_total_fractional_units")
        whole_units, fractional_units, sign = _decompose(total)
        return cls(whole_units, fractional_units, sign)

    @property
    def whole_units(self) -> int:
        """Get the whole units."""
        return self._whole_units

    @property
    def fractional_units(self) -> int:
        """Get the fractional units."""
        return self._fractional_units

    @property
    def sign(self) -> Sign:
        """Get the sign."""
        return self._sign

    @property
    def options(self) -> Options:
        """Get the display options owned by this instance.

        The returned object is live: its setters change how this instance renders.
        """
        return self._options

    @property
    def is_positive(self) -> bool:
        return self._sign is Sign.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return self._whole_units == 0 and self._fractional_units == 0

    def as_total_fractional_units(self) -> int:
        """Return the amount as a signed total of fractional units.

        Returns:
            int: `whole_units * 100 + fractional_units`, negated for negative amounts.

        Raises:
            MoneyOverflowError: If a positive total exceeds `MAX_TOTAL_FRACTIONAL_UNITS`.
            MoneyUnderflowError: If a negative total is below `MIN_TOTAL_FRACTIONAL_UNITS`.
        """
        magnitude = self._whole_units * FRACTIONAL_UNITS_PER_WHOLE_UNIT + self._fractional_units
        total = -magnitude if self._sign is Sign.NEGATIVE else magnitude
        _check_total(total, "as_total_fractional_units")
        return total

    def as_decimal(self) -> Decimal:
        """Return the signed amount as a Decimal with two decimal places."""
        prefix = "-" if self._sign is Sign.NEGATIVE else ""
        return Decimal(f"{prefix}{self._whole_units}.{self._fractional_units:02d}")

    def copy_options(self, source: Money) -> None:
        """Replace the options of this instance with a copy of $source's options.

        Raises:
            TypeError: If $source is not Money.
        """
        if not isinstance(source, Money):
            raise TypeError(f"$source must be a Money instance, but provided value is: {source!r}")
        self._options = source.options.copy()

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Return the sum of this amount and $other with default options.

        Raises:
            TypeError: If $other is not Money.
            MoneyOverflowError: If an operand or the sum is above the signed 64-bit range.
            MoneyUnderflowError: If an operand or the sum is below the signed 64-bit range.
        """
        self._check_operand(other, "add")
        return Money.from_total_fractional_units(self.as_total_fractional_units() + other.as_total_fractional_units())

    def subtract(self, other: Money) -> Money:
        """Return this amount minus $other with default options.

        Raises:
            TypeError: If $other is not Money.
            MoneyOverflowError: If an operand or the difference is above the signed 64-bit range.
            MoneyUnderflowError: If an operand or the difference is below the signed 64-bit range.
        """
        self._check_operand(other, "subtract")
        return Money.from_total_fractional_units(self.as_total_fractional_units() - other.as_total_fractional_units())

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __iadd__(self, other):
        # In-place forms keep the receiver's own options
        if not isinstance(other, Money):
            return NotImplemented
        self._assign_amount(self.add(other))
        return self

    def __isub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        self._assign_amount(self.subtract(other))
        return self

    def __neg__(self) -> Money:
        sign = Sign.POSITIVE if self.is_zero else self._sign.opposite()
        return self._copy_with_sign(sign)

    def __pos__(self) -> Money:
        return self._copy_with_sign(self._sign)

    def __abs__(self) -> Money:
        return self._copy_with_sign(Sign.POSITIVE)

    # endregion

    # region Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.as_total_fractional_units() == other.as_total_fractional_units()

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.as_total_fractional_units() < other.as_total_fractional_units()

    # Amounts change in place through `+=` and `-=`
    __hash__ = None

    # endregion

    # region String representations

    def to_string(self) -> str:
        """Render the amount using this instance's options.

        Examples: '$5.25', '5.25', '-$12.96', '($5.25)'.
        """
        result = f"{self._whole_units}.{self._fractional_units:02d}"

        if self._options.show_symbol:
            result = self._options.symbol + result

        if self._sign is Sign.NEGATIVE:
            # NegativeView.HIDE adds no indicator
            if self._options.negative_view is NegativeView.MINUS:
                result = "-" + result
            elif self._options.negative_view is NegativeView.PAREN:
                result = f"({result})"

        return result

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        """Return string like 'Money(5, 25, Sign.POSITIVE)'."""
        return f"{self.__class__.__name__}({self._whole_units}, {self._fractional_units}, {self._sign})"

    # endregion

    # region Helpers

    def _check_operand(self, other: Money, operation: str) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `{operation}` because $other must be a Money instance, but provided value is: {other!r}")

    def _assign_amount(self, source: Money) -> None:
        self._whole_units = source._whole_units
        self._fractional_units = source._fractional_units
        self._sign = source._sign

    def _copy_with_sign(self, sign: Sign) -> Money:
        result = Money(self._whole_units, self._fractional_units, sign)
        result._options = self._options.copy()
        return result

    # endregion


def _check_total(total: int, operation: str) -> None:
    """Raise when $total leaves the signed 64-bit range."""
    if total > Money.MAX_TOTAL_FRACTIONAL_UNITS:
        logger.debug(f"Overflow in `{operation}`: total {total} > {Money.MAX_TOTAL_FRACTIONAL_UNITS}")
        raise MoneyOverflowError(f"Cannot call `{operation}` because total fractional units {total} exceed maximum {Money.MAX_TOTAL_FRACTIONAL_UNITS}")
    if total < Money.MIN_TOTAL_FRACTIONAL_UNITS:
        logger.debug(f"Underflow in `{operation}`: total {total} < {Money.MIN_TOTAL_FRACTIONAL_UNITS}")
        raise MoneyUnderflowError(f"Cannot call `{operation}` because total fractional units {total} are below minimum {Money.MIN_TOTAL_FRACTIONAL_UNITS}")


def _decompose(total: int) -> tuple[int, int, Sign]:
    """Split a signed total into (whole_units, fractional_units, sign); zero is positive."""
    sign = Sign.NEGATIVE if total < 0 else Sign.POSITIVE
    whole_units, fractional_units = divmod(abs(total), FRACTIONAL_UNITS_PER_WHOLE_UNIT)
    return whole_units, fractional_units, sign
