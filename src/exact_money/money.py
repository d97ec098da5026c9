from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, getcontext
from enum import Enum
from typing import Iterable, Sequence

from exact_money.currency.protocol import FormattableCurrency
from exact_money.errors import InvalidRatio, InvariantViolation
from exact_money.format import Formatter, Params
from exact_money.parsing import parse_amount
from exact_money.utils.decimal_tools import DecimalLike, as_decimal, exact_context, round_to_digits, scale_minor_units

# Significant digits kept by scalar multiplication and division; `+`, `-` and `allocate` are exact
getcontext().prec = 28


class Round(Enum):
    """Strategies that decide what happens to a value exactly halfway between two results."""

    HALF_UP = ROUND_HALF_UP  # Away from zero: 0.125 -> 0.13
    HALF_DOWN = ROUND_HALF_DOWN  # Toward zero: 0.125 -> 0.12
    HALF_EVEN = ROUND_HALF_EVEN  # To the even neighbour: 0.125 -> 0.12, 0.135 -> 0.14


class Money:
    """Represents an exact amount of one currency.

    The amount is a `Decimal` kept at full precision; it is only rounded by `round` or when
    rendered with `str`. Money is immutable: every operation creates a new instance, and
    `+=`, `-=`, `*=`, `/=` rebind the name to the result.

    Operations between two Money values (`+`, `-`, `<`, ...) require the same currency.
    A mismatch is a bug in the caller and raises `InvariantViolation`, never a `MoneyError`.
    Equality does not have this requirement: Money values of different currencies are
    simply not equal.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: FormattableCurrency):
        """Initialize Money with amount and currency.

        Args:
            amount: Decimal-like scalar, stored without quantization.
            currency: Currency the amount is denominated in.

        Raises:
            ValueError: If $amount cannot be converted to a finite Decimal.
            TypeError: If $currency does not satisfy `FormattableCurrency`.
        """
        # Raise: currency must provide code, symbol, exponent and locale
        if not isinstance(currency, FormattableCurrency):
            raise TypeError(f"$currency must satisfy FormattableCurrency, but provided value is: {currency!r}")

        # Raise: $amount must be convertible to Decimal
        try:
            decimal_amount = as_decimal(amount)
        except InvalidOperation as e:
            raise ValueError(f"Cannot init `Money` because $amount ({amount}) cannot be converted to Decimal") from e

        # Raise: NaN and infinities are not amounts
        if not decimal_amount.is_finite():
            raise ValueError(f"Cannot init `Money` because $amount ({amount}) is not finite")

        self._amount = decimal_amount
        self._currency = currency

    # region Factories

    @classmethod
    def from_decimal(cls, amount: Decimal, currency: FormattableCurrency) -> Money:
        """Creates Money from a Decimal amount, stored as is."""
        return cls(amount, currency)

    @classmethod
    def from_minor(cls, amount: int, currency: FormattableCurrency) -> Money:
        """Creates Money from an integer count of minor units (e.g. 1000 -> 10.00 USD)."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"$amount must be an int, but provided value is: {amount!r}")
        return cls(scale_minor_units(amount, currency.exponent), currency)

    @classmethod
    def from_major(cls, amount: int, currency: FormattableCurrency) -> Money:
        """Creates Money from an integer count of major units (e.g. 1000 -> 1,000 USD)."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"$amount must be an int, but provided value is: {amount!r}")
        return cls(Decimal(amount), currency)

    @classmethod
    def from_str(cls, amount: str, currency: FormattableCurrency) -> Money:
        """Creates Money by parsing a locale formatted amount like "1,000.50" or "-3".

        See `exact_money.parsing.parse_amount` for the accepted syntax.

        Raises:
            InvalidAmount: If $amount is malformed for the locale of $currency.
        """
        return cls(parse_amount(amount, currency), currency)

    @classmethod
    def sum(cls, monies: Iterable[Money]) -> Money:
        """Adds up $monies, which must be non-empty and share one currency.

        Raises:
            InvariantViolation: If $monies is empty or mixes currencies.
        """
        iterator = iter(monies)
        first = next(iterator, None)
        if first is None:
            raise InvariantViolation("Cannot call `Money.sum` because $monies is empty")

        total = cls(first.amount, first.currency)
        for money in iterator:
            total = total + money
        return total

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> FormattableCurrency:
        """Get the currency."""
        return self._currency

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    # endregion

    # region Rounding and allocation

    def round(self, digits: int, strategy: Round = Round.HALF_EVEN) -> Money:
        """Returns a new Money rounded to $digits fractional places.

        Args:
            digits: Number of fractional digits to keep (>= 0).
            strategy: How to resolve amounts exactly halfway between two results.
        """
        if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
            raise ValueError(f"Cannot call `round` because $digits ({digits!r}) is not a non-negative int")
        if not isinstance(strategy, Round):
            raise TypeError(f"$strategy must be a Round instance, but provided value is: {strategy!r}")

        return Money(round_to_digits(self._amount, digits, strategy.value), self._currency)

    def __round__(self, ndigits: int | None = None) -> Money:
        """Rounds half to even; `round(money)` keeps the currency and returns Money, not an int."""
        return self.round(0 if ndigits is None else ndigits)

    def allocate_to(self, number: int) -> list[Money]:
        """Divides this Money into $number equal shares, see `allocate`."""
        return self.allocate([1] * number)

    def allocate(self, ratios: Sequence[int]) -> list[Money]:
        """Divides this Money into shares proportional to $ratios without losing anything.

        Each share starts as `floor(amount * ratio / sum(ratios))`. The remainder that the
        flooring leaves behind is handed out one whole unit at a time to the shares in
        their original order. The shares always add up to the original amount.

        Example: 11.00 USD with ratios [1, 1, 1] -> [4.00, 4.00, 3.00].

        Args:
            ratios: Positive integer weights, one per share.

        Returns:
            Shares in the order of $ratios.

        Raises:
            InvalidRatio: If $ratios is empty or contains a non-positive or non-int value.
            InvariantViolation: If the remainder is negative or not a whole number, which
                happens for amounts whose fractional part does not divide evenly.
        """
        ratios = list(ratios)

        # Raise: at least one share is needed
        if not ratios:
            raise InvalidRatio("Cannot call `allocate` because $ratios is empty")

        for ratio in ratios:
            # Raise: every ratio must be a positive int
            if isinstance(ratio, bool) or not isinstance(ratio, int) or ratio <= 0:
                raise InvalidRatio(f"Cannot call `allocate` because $ratios ({ratios}) contains {ratio!r}, which is not a positive int")

        ratio_total = sum(ratios)
        # Flooring the quotient keeps the integer part exact, since it fits the precision
        context = exact_context(self._amount, extra_digits=len(str(ratio_total)), rounding=ROUND_FLOOR)
        shares: list[Decimal] = []
        remainder = self._amount
        for ratio in ratios:
            quotient = context.divide(context.multiply(self._amount, ratio), ratio_total)
            share = quotient.to_integral_value(rounding=ROUND_FLOOR)
            shares.append(share)
            remainder = context.subtract(remainder, share)

        if remainder < 0:
            raise InvariantViolation(f"Cannot finish `allocate` because remainder ({remainder}) is negative")
        if remainder != remainder.to_integral_value(rounding=ROUND_FLOOR):
            raise InvariantViolation(f"Cannot finish `allocate` because remainder ({remainder}) is not a whole number")

        index = 0
        while remainder > 0:
            shares[index % len(shares)] = context.add(shares[index % len(shares)], 1)
            remainder = context.subtract(remainder, 1)
            index += 1

        return [Money(share, self._currency) for share in shares]

    # endregion

    # region Comparison

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Raises `InvariantViolation` if $other is in a different currency."""
        if self._currency != other._currency:
            raise InvariantViolation(f"Cannot apply `{operation}` to different currencies: {self._currency.code} and {other._currency.code}")

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        return self._currency == other._currency and self._amount == other._amount

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "<")
        return self._amount < other._amount

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "<=")
        return self._amount <= other._amount

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, ">")
        return self._amount > other._amount

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, ">=")
        return self._amount >= other._amount

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    # endregion

    # region Arithmetic

    def __add__(self, other):
        """Add two Money objects of the same currency."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "+")
        context = exact_context(self._amount, other._amount)
        return Money(context.add(self._amount, other._amount), self._currency)

    def __sub__(self, other):
        """Subtract two Money objects of the same currency."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "-")
        context = exact_context(self._amount, other._amount)
        return Money(context.subtract(self._amount, other._amount), self._currency)

    def __mul__(self, other):
        """Multiply Money by a scalar (returns Money)."""
        factor = _scalar_or_none(other)
        if factor is None:
            return NotImplemented
        return Money(self._amount * factor, self._currency)

    def __rmul__(self, other):
        """Right multiplication: scalar * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by a scalar (returns Money)."""
        divisor = _scalar_or_none(other)
        if divisor is None:
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide Money by zero")
        return Money(self._amount / divisor, self._currency)

    def __rtruediv__(self, other):
        """Right division: scalar / Money (returns Money in the same currency)."""
        dividend = _scalar_or_none(other)
        if dividend is None:
            return NotImplemented
        if self._amount == 0:
            raise ZeroDivisionError("Cannot divide by zero Money")
        return Money(dividend / self._amount, self._currency)

    def __neg__(self):
        return Money(self._amount.copy_negate(), self._currency)

    def __pos__(self):
        return Money(self._amount, self._currency)

    def __abs__(self):
        return Money(self._amount.copy_abs(), self._currency)

    # endregion

    # String representations
    def __str__(self) -> str:
        """Return the locale formatted amount, e.g. '$1,000.50' or '€1.000,50'."""
        return Formatter.money(self, Params.from_currency(self._currency))

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"


def _scalar_or_none(value) -> Decimal | None:
    """Converts a scalar operand to Decimal; None for operands Money cannot be scaled by."""
    if isinstance(value, Money):
        return None
    try:
        return as_decimal(value)
    except (TypeError, InvalidOperation):
        return None
