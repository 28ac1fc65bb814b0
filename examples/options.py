from __future__ import annotations

from nmoney import Money, NegativeView, Sign


def main() -> None:
    m = Money(10, 25, Sign.POSITIVE)
    print(f"Default    : {m}")

    m.options.set_symbol("£")
    print(f"New symbol : {m}")

    m.options.set_show_symbol(False)
    print(f"Hide symbol: {m}")

    # Negation keeps a copy of the options
    m = -m

    m.options.set_negative_view(NegativeView.PAREN)
    print(f"Negative Parenthesis: {m}")

    m.options.set_negative_view(NegativeView.MINUS)
    print(f"Negative Minus Sign : {m}")

    m.options.set_negative_view(NegativeView.HIDE)
    print(f"Negative Hidden Sign: {m}")


if __name__ == "__main__":
    main()
