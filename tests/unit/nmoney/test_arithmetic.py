import pytest

from nmoney import Money, MoneyOverflowError, MoneyUnderflowError, NegativeView, Options, Sign
from tests.helpers.helper_money import create_largest_money, create_smallest_money

# Constants
POS_SMALL = (4, 56, Sign.POSITIVE)
NEG_SMALL = (4, 56, Sign.NEGATIVE)
POS_LARGE = (12, 49, Sign.POSITIVE)
NEG_LARGE = (12, 49, Sign.NEGATIVE)


def components(m: Money) -> tuple:
    return m.whole_units, m.fractional_units, m.sign


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (POS_SMALL, POS_LARGE, (17, 5, Sign.POSITIVE)),
        (POS_SMALL, NEG_LARGE, (7, 93, Sign.NEGATIVE)),
        (NEG_SMALL, POS_LARGE, (7, 93, Sign.POSITIVE)),
        (NEG_SMALL, NEG_LARGE, (17, 5, Sign.NEGATIVE)),
    ],
)
def test_add(left, right, expected):
    assert components(Money(*left) + Money(*right)) == expected
    assert components(Money(*left).add(Money(*right))) == expected


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (POS_SMALL, POS_LARGE, (7, 93, Sign.NEGATIVE)),
        (POS_SMALL, NEG_LARGE, (17, 5, Sign.POSITIVE)),
        (NEG_SMALL, POS_LARGE, (17, 5, Sign.NEGATIVE)),
        (NEG_SMALL, NEG_LARGE, (7, 93, Sign.POSITIVE)),
    ],
)
def test_subtract(left, right, expected):
    assert components(Money(*left) - Money(*right)) == expected
    assert components(Money(*left).subtract(Money(*right))) == expected


def test_zero_result_is_positive():
    result = Money(5, 25, Sign.NEGATIVE) + Money(5, 25, Sign.POSITIVE)
    assert components(result) == (0, 0, Sign.POSITIVE)
    assert str(result) == "$0.00"


def test_add_is_commutative_and_associative():
    a = Money(10, 25)
    b = Money(21, 33, Sign.NEGATIVE)
    c = Money(0, 99)
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)


def test_zero_is_identity():
    x = Money(109, 85, Sign.NEGATIVE)
    assert Money(0, 0, Sign.POSITIVE) + x == x
    assert components(x + Money.zero()) == components(x)


def test_subtract_is_inverse_of_add():
    a = Money(59, 99, Sign.NEGATIVE)
    b = Money(1098, 54)
    assert (a + b) - b == a
    assert components((a + b) - b) == components(a)


def test_result_has_default_options():
    a = Money(5, 25, Sign.NEGATIVE)
    b = Money(1, 0, Sign.NEGATIVE)
    a.options.set_symbol("#")
    a.options.set_negative_view(NegativeView.PAREN)
    b.options.set_show_symbol(False)

    result = a + b
    assert result.options == Options()
    assert str(result) == "-$6.25"


def test_add_assign():
    m1 = Money(4, 56, Sign.POSITIVE)
    m2 = Money(12, 49, Sign.POSITIVE)
    m2.options.set_symbol("£")
    options_before = m2.options

    m2 += m1

    assert components(m2) == (17, 5, Sign.POSITIVE)
    assert m2.options is options_before
    assert str(m2) == "£17.05"


def test_sub_assign():
    m1 = Money(4, 56, Sign.POSITIVE)
    m2 = Money(12, 49, Sign.POSITIVE)
    alias = m2

    m2 -= m1

    assert components(m2) == (7, 93, Sign.POSITIVE)
    assert alias is m2


def test_add_overflow():
    with pytest.raises(MoneyOverflowError):
        create_largest_money() + Money(1, 0)
    with pytest.raises(MoneyOverflowError):
        create_largest_money().add(Money(0, 1))


def test_add_overflow_from_operand_conversion():
    with pytest.raises(MoneyOverflowError):
        Money(Money.MAX_WHOLE_UNITS, 0) + Money(0, 0)
    with pytest.raises(MoneyOverflowError):
        Money(0, 0) + Money(Money.MAX_WHOLE_UNITS, 0)


def test_subtract_overflow_and_underflow():
    with pytest.raises(MoneyUnderflowError):
        create_smallest_money() - Money(0, 1)
    with pytest.raises(MoneyOverflowError):
        create_largest_money() - Money(0, 1, Sign.NEGATIVE)


def test_in_place_failure_leaves_receiver_unchanged():
    m = create_largest_money()
    m.options.set_symbol("#")

    with pytest.raises(MoneyOverflowError):
        m += Money(1, 0)

    assert components(m) == (92233720368547758, 7, Sign.POSITIVE)
    assert m.options.symbol == "#"

    m = create_smallest_money()
    with pytest.raises(MoneyUnderflowError):
        m -= Money(1, 0)
    assert components(m) == (92233720368547758, 8, Sign.NEGATIVE)


def test_non_money_operands():
    m = Money(1, 0)
    with pytest.raises(TypeError):
        m + 1
    with pytest.raises(TypeError):
        m - 1.5
    with pytest.raises(TypeError, match="Cannot call `add`"):
        m.add(100)
    with pytest.raises(TypeError, match="Cannot call `subtract`"):
        m.subtract("1.00")


def test_negate_keeps_options():
    m = Money(15, 30, Sign.POSITIVE)
    m.options.set_symbol("#")

    negated = -m

    assert components(negated) == (15, 30, Sign.NEGATIVE)
    assert str(negated) == "-#15.30"
    assert negated.options is not m.options
    assert components(-negated) == (15, 30, Sign.POSITIVE)


def test_negate_zero_stays_positive():
    assert (-Money.zero()).sign == Sign.POSITIVE


def test_abs_and_pos():
    m = Money(3, 7, Sign.NEGATIVE)
    assert components(abs(m)) == (3, 7, Sign.POSITIVE)
    assert components(+m) == (3, 7, Sign.NEGATIVE)
    assert +m is not m
