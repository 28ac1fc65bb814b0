from __future__ import annotations

from nmoney import Money, Sign


def print_comparisons(a: Money, b: Money) -> None:
    print(f"{a} >  {b}?  {a > b}")
    print(f"{a} <  {b}?  {a < b}")
    print(f"{a} >= {b}?  {a >= b}")
    print(f"{a} <= {b}?  {a <= b}")
    print(f"{a} == {b}?  {a == b}")


def main() -> None:
    m1 = Money(21, 33, Sign.POSITIVE)
    m2 = Money(10, 25, Sign.POSITIVE)
    m3 = Money(10, 25, Sign.POSITIVE)

    for a, b in [(m1, m2), (m2, m1), (m2, m3)]:
        print_comparisons(a, b)
        print()


if __name__ == "__main__":
    main()
