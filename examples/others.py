from __future__ import annotations

from nmoney import Money, MoneyOverflowError, NegativeView, Sign


def main() -> None:
    # To and from total fractional units
    m = Money(109, 85, Sign.NEGATIVE)
    print(f"original: {m}")

    cents = m.as_total_fractional_units()
    print(f"in pennies: {cents}")

    cents += 20000
    print(f"pennies + 20000: {cents}")

    m = Money.from_total_fractional_units(cents)
    print(f"last pennies as Money: {m}")
    print()

    # Copy options
    m1 = Money(59, 99, Sign.NEGATIVE)
    m1.options.set_symbol("#")
    m1.options.set_negative_view(NegativeView.PAREN)
    print(f"m1: {m1}")

    m2 = Money(1098, 54, Sign.NEGATIVE)
    print(f"m2 before `copy_options`: {m2}")

    m2.copy_options(m1)
    print(f"m2 after `copy_options`: {m2}")
    print()

    # Overflow is reported, not wrapped
    largest = Money.from_total_fractional_units(Money.MAX_TOTAL_FRACTIONAL_UNITS)
    try:
        largest + Money(1, 0, Sign.POSITIVE)
    except MoneyOverflowError as e:
        print(f"{largest} + $1.00 failed: {e}")


if __name__ == "__main__":
    main()
