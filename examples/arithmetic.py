from __future__ import annotations

from nmoney import Money, Sign


def main() -> None:
    m1 = Money(10, 25, Sign.POSITIVE)
    m2 = Money(21, 33, Sign.POSITIVE)

    total = m1 + m2
    print(f"Testing '+' operator : {m1} + {m2} = {total}")

    total = +m2
    total += m1
    print(f"Testing '+=' operator: {m2} + {m1} = {total}")

    diff = m1 - m2
    print(f"Testing '-' operator : {m1} - {m2} = {diff}")

    diff = +m2
    diff -= m1
    print(f"Testing '-=' operator: {m2} - {m1} = {diff}")


if __name__ == "__main__":
    main()
