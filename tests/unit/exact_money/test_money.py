from __future__ import annotations

from decimal import Decimal

import pytest

from exact_money.currency.crypto import ETH
from exact_money.currency.iso import BHD, GBP, USD
from exact_money.errors import InvariantViolation, MoneyError
from exact_money.money import Money, Round


# region Construction


def test_major_and_minor_units_describe_the_same_amount():
    assert Money.from_major(10, USD) == Money.from_minor(1000, USD)
    assert Money.from_minor(1000, USD).amount == Decimal("10.00")


def test_from_minor_handles_amounts_beyond_64_bits():
    minor = 40891626854930000000000
    expected = Money.from_decimal(Decimal("40891.62685493"), ETH)

    assert Money.from_minor(minor, ETH) == expected


def test_from_decimal_keeps_precision():
    testee = Money.from_decimal(Decimal("1.23456789"), USD)

    assert testee.amount == Decimal("1.23456789")
    assert testee.currency is USD


def test_float_amount_is_converted_via_string():
    assert Money(0.1, USD).amount == Decimal("0.1")


@pytest.mark.parametrize("amount", ["abc", "NaN", "Infinity"])
def test_init_rejects_non_amounts(amount):
    with pytest.raises(ValueError):
        Money(amount, USD)


def test_init_rejects_non_currency():
    with pytest.raises(TypeError):
        Money(1, "USD")


def test_factories_reject_non_int_units():
    with pytest.raises(TypeError):
        Money.from_minor(10.5, USD)
    with pytest.raises(TypeError):
        Money.from_major(True, USD)


# endregion

# region Arithmetic


def test_addition_and_subtraction():
    assert Money.from_major(1, USD) + Money.from_major(1, USD) == Money.from_major(2, USD)
    assert Money.from_decimal(Decimal("1.11111111111"), ETH) + Money.from_decimal(Decimal("2.22222222222"), ETH) == Money.from_decimal(Decimal("3.33333333333"), ETH)

    assert Money.from_major(1, USD) - Money.from_major(1, USD) == Money.from_major(0, USD)
    assert Money.from_decimal(Decimal("1.11111111111"), ETH) - Money.from_decimal(Decimal("2.22222222222"), ETH) == Money.from_decimal(Decimal("-1.11111111111"), ETH)


def test_operations_return_new_instances():
    money = Money.from_major(1, USD)
    first = money * 3
    second = money * 3

    assert first == second == Money.from_major(3, USD)
    assert money == Money.from_major(1, USD)


def test_in_place_addition_and_subtraction():
    testee = Money.from_minor(100, USD)
    testee += Money.from_minor(50, USD)
    assert testee == Money.from_minor(150, USD)

    testee -= Money.from_minor(200, USD)
    assert testee == Money.from_minor(-50, USD)


def test_in_place_operators_leave_other_references_unchanged():
    price = Money.from_minor(100, USD)
    total = price
    total += Money.from_minor(50, USD)
    total *= 2

    assert price == Money.from_minor(100, USD)
    assert total == Money.from_minor(300, USD)


def test_money_stays_usable_as_dict_key_after_aliased_update():
    key = Money.from_minor(100, USD)
    book = {key: "x"}
    alias = key
    alias -= Money.from_minor(1, USD)
    alias /= 3

    assert key in book
    assert alias not in book


def test_addition_is_exact_beyond_context_precision():
    big = Money.from_major(10_000_000_000, ETH)
    one_wei = Money.from_minor(1, ETH)

    total = big + one_wei

    assert total != big
    assert total.amount == Decimal("10000000000.000000000000000001")
    assert total - one_wei == big
    assert Money.sum([big, one_wei, one_wei]).amount == Decimal("10000000000.000000000000000002")


@pytest.mark.parametrize(
    "result, expected_minor",
    [
        (lambda: Money.from_minor(100, USD) * 2, 200),
        (lambda: Money.from_minor(-100, USD) * -2, 200),
        (lambda: -2 * Money.from_minor(-100, USD), 200),
        (lambda: Money.from_minor(100, USD) * Decimal(2), 200),
        (lambda: Decimal(-2) * Money.from_minor(-100, USD), 200),
        (lambda: Money.from_minor(400, USD) * Decimal("0.5"), 200),
        (lambda: Money.from_minor(400, USD) / 2, 200),
        (lambda: Money.from_minor(-400, USD) / -2, 200),
        (lambda: -1 / Money.from_minor(-200, USD), 50),
        (lambda: Money.from_minor(-200, USD) / Decimal(-1), 200),
        (lambda: Decimal(-1) / Money.from_minor(-200, USD), 50),
        (lambda: Money.from_minor(-200, USD) / Decimal("-0.5"), 400),
    ],
)
def test_scalar_multiplication_and_division(result, expected_minor):
    assert result() == Money.from_minor(expected_minor, USD)


def test_scalar_multiplication_is_commutative():
    money = Money.from_decimal(Decimal("12.34"), USD)

    for scalar in (3, -7, Decimal("1.5"), "2"):
        assert money * scalar == scalar * money


def test_in_place_scalar_operations():
    testee = Money.from_minor(100, USD)
    testee *= 2
    assert testee == Money.from_minor(200, USD)

    testee = Money.from_minor(100, USD)
    testee *= Decimal(2)
    assert testee == Money.from_minor(200, USD)

    testee = Money.from_minor(100, USD)
    testee /= -2
    assert testee == Money.from_minor(-50, USD)

    testee = Money.from_minor(100, USD)
    testee /= Decimal(-2)
    assert testee == Money.from_minor(-50, USD)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Money.from_minor(100, USD) / 0
    with pytest.raises(ZeroDivisionError):
        1 / Money.from_minor(0, USD)


def test_money_times_money_is_not_supported():
    with pytest.raises(TypeError):
        Money.from_minor(100, USD) * Money.from_minor(100, USD)
    with pytest.raises(TypeError):
        Money.from_minor(100, USD) * True


def test_negation():
    assert -Money.from_minor(100, USD) == Money.from_minor(-100, USD)
    assert abs(Money.from_minor(-100, USD)) == Money.from_minor(100, USD)


def test_sum_folds_same_currency():
    monies = [Money.from_minor(100, USD), Money.from_minor(250, USD), Money.from_minor(-50, USD)]

    assert Money.sum(monies) == Money.from_minor(300, USD)
    assert Money.sum(iter(monies)) == Money.from_minor(300, USD)


def test_sum_of_single_value_is_a_copy():
    money = Money.from_minor(100, USD)
    total = Money.sum([money])
    total += Money.from_minor(1, USD)

    assert money == Money.from_minor(100, USD)


# endregion

# region Currency mismatch


@pytest.mark.parametrize(
    "operation",
    [
        lambda a, b: a + b,
        lambda a, b: a - b,
        lambda a, b: a < b,
        lambda a, b: a <= b,
        lambda a, b: a > b,
        lambda a, b: a >= b,
    ],
)
def test_binary_operations_abort_on_different_currencies(operation):
    with pytest.raises(InvariantViolation, match="different currencies"):
        operation(Money.from_minor(100, USD), Money.from_minor(100, GBP))


def test_in_place_operations_abort_on_different_currencies():
    testee = Money.from_minor(100, USD)
    with pytest.raises(InvariantViolation):
        testee += Money.from_minor(100, GBP)
    with pytest.raises(InvariantViolation):
        testee -= Money.from_minor(100, GBP)

    assert testee == Money.from_minor(100, USD)


def test_sum_aborts_on_empty_or_mixed_input():
    with pytest.raises(InvariantViolation, match="empty"):
        Money.sum([])
    with pytest.raises(InvariantViolation):
        Money.sum([Money.from_minor(100, USD), Money.from_minor(100, GBP)])


def test_invariant_violation_is_not_a_recoverable_error():
    assert not issubclass(InvariantViolation, MoneyError)


# endregion

# region Comparison and predicates


def test_comparison():
    assert Money.from_minor(200, USD) > Money.from_minor(100, USD)
    assert Money.from_minor(100, USD) < Money.from_minor(200, USD)
    assert Money.from_minor(100, USD) <= Money.from_minor(100, USD)
    assert Money.from_minor(100, USD) >= Money.from_minor(100, USD)
    assert Money.from_minor(100, USD) == Money.from_minor(100, USD)
    assert Money.from_minor(100, USD) != Money.from_minor(100, GBP)
    assert Money.from_minor(100, USD) != Decimal("1.00")


def test_equal_values_hash_equally():
    assert len({Money.from_minor(1000, USD), Money.from_major(10, USD), Money.from_major(10, GBP)}) == 2


@pytest.mark.parametrize(
    "minor, is_zero, is_positive, is_negative",
    [
        (100, False, True, False),
        (0, True, False, False),
        (-100, False, False, True),
    ],
)
def test_sign_predicates(minor, is_zero, is_positive, is_negative):
    testee = Money.from_minor(minor, USD)

    assert testee.is_zero() is is_zero
    assert testee.is_positive() is is_positive
    assert testee.is_negative() is is_negative


def test_negative_zero_is_zero():
    testee = Money.from_decimal(Decimal("-0.00"), USD)

    assert testee.is_zero()
    assert not testee.is_negative()


# endregion

# region Rounding


@pytest.mark.parametrize(
    "strategy, expected",
    [
        (Round.HALF_UP, "0.13"),
        (Round.HALF_DOWN, "0.12"),
        (Round.HALF_EVEN, "0.12"),
    ],
)
def test_rounding_strategies_at_midpoint(strategy, expected):
    testee = Money.from_decimal(Decimal("0.125"), USD)

    assert testee.round(2, strategy).amount == Decimal(expected)
    assert testee.amount == Decimal("0.125")


def test_rounding_strategies_for_negative_midpoint():
    testee = Money.from_decimal(Decimal("-0.135"), USD)

    assert testee.round(2, Round.HALF_UP).amount == Decimal("-0.14")
    assert testee.round(2, Round.HALF_DOWN).amount == Decimal("-0.13")
    assert testee.round(2, Round.HALF_EVEN).amount == Decimal("-0.14")


def test_precision_and_rounding_after_division():
    money = Money.from_minor(2_000, USD)
    money /= 3
    assert money.round(2, Round.HALF_EVEN) == Money.from_minor(667, USD)

    money = Money.from_minor(20_000, BHD)
    money /= 3
    assert money.round(3, Round.HALF_EVEN) == Money.from_minor(6_667, BHD)


def test_builtin_round_uses_half_even():
    assert round(Money.from_decimal(Decimal("2.5"), USD)) == Money.from_major(2, USD)
    assert round(Money.from_decimal(Decimal("2.675"), USD), 2) == Money.from_minor(268, USD)
    assert isinstance(round(Money.from_minor(150, USD)), Money)


def test_round_rejects_negative_digits():
    with pytest.raises(ValueError):
        Money.from_minor(100, USD).round(-1)


# endregion


def test_repr():
    assert repr(Money.from_minor(100050, USD)) == "Money(1000.50, USD)"
