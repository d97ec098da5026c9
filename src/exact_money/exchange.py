from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Iterator

from exact_money.currency.protocol import FormattableCurrency
from exact_money.errors import InvalidCurrency
from exact_money.money import Money
from exact_money.utils.decimal_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)


class ExchangeRate:
    """Rate of conversion from one currency to another.

    Immutable. The rate is applied as is: it is not validated for sign, and converted
    amounts are not rounded.

    Attributes:
        from_currency: Currency the rate converts from.
        to_currency: Currency the rate converts to.
        rate: Amount of $to_currency per one unit of $from_currency.
    """

    __slots__ = ("_from_currency", "_to_currency", "_rate")

    def __init__(self, from_currency: FormattableCurrency, to_currency: FormattableCurrency, rate: DecimalLike):
        """Initialize an ExchangeRate.

        Raises:
            TypeError: If a currency does not satisfy `FormattableCurrency`.
            ValueError: If $rate cannot be converted to a finite Decimal.
        """
        for name, currency in (("from_currency", from_currency), ("to_currency", to_currency)):
            if not isinstance(currency, FormattableCurrency):
                raise TypeError(f"${name} must satisfy FormattableCurrency, but provided value is: {currency!r}")

        try:
            decimal_rate = as_decimal(rate)
        except InvalidOperation as e:
            raise ValueError(f"Cannot init `ExchangeRate` because $rate ({rate}) cannot be converted to Decimal") from e

        if not decimal_rate.is_finite():
            raise ValueError(f"Cannot init `ExchangeRate` because $rate ({rate}) is not finite")

        self._from_currency = from_currency
        self._to_currency = to_currency
        self._rate = decimal_rate

    @property
    def from_currency(self) -> FormattableCurrency:
        return self._from_currency

    @property
    def to_currency(self) -> FormattableCurrency:
        return self._to_currency

    @property
    def rate(self) -> Decimal:
        return self._rate

    def convert(self, money: Money) -> Money:
        """Converts $money into $to_currency at full precision.

        Raises:
            InvalidCurrency: If $money is not denominated in $from_currency.
        """
        if money.currency != self._from_currency:
            raise InvalidCurrency(f"Cannot call `convert` because $money is in {money.currency.code}, but the rate converts from {self._from_currency.code}")

        return Money(money.amount * self._rate, self._to_currency)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExchangeRate):
            return NotImplemented
        return (self._from_currency, self._to_currency, self._rate) == (other._from_currency, other._to_currency, other._rate)

    def __hash__(self) -> int:
        return hash((self._from_currency.code, self._to_currency.code, self._rate))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._from_currency.code} -> {self._to_currency.code}, {self._rate})"


class Exchange:
    """Caller-owned store of the latest `ExchangeRate` per ordered currency pair.

    Pairs are directional: a rate for USD -> EUR says nothing about EUR -> USD, and no
    inverse or cross rate is ever derived. Not thread-safe; serialize writers externally.
    """

    __slots__ = ("_rates",)

    def __init__(self) -> None:
        self._rates: dict[tuple[str, str], ExchangeRate] = {}

    @staticmethod
    def _key(from_currency: FormattableCurrency, to_currency: FormattableCurrency) -> tuple[str, str]:
        return from_currency.code, to_currency.code

    def set_rate(self, rate: ExchangeRate) -> None:
        """Stores $rate, replacing any previous rate for the same ordered pair."""
        if not isinstance(rate, ExchangeRate):
            raise TypeError(f"$rate must be an ExchangeRate instance, but provided value is: {rate!r}")

        key = self._key(rate.from_currency, rate.to_currency)
        previous = self._rates.get(key)
        self._rates[key] = rate

        if previous is None:
            logger.debug(f"Added ExchangeRate {key[0]} -> {key[1]} at {rate.rate}")
        else:
            logger.debug(f"Updated ExchangeRate {key[0]} -> {key[1]} from {previous.rate} to {rate.rate}")

    def get_rate(self, from_currency: FormattableCurrency, to_currency: FormattableCurrency) -> ExchangeRate | None:
        """Returns the rate stored for the ordered pair, or None if there is none."""
        return self._rates.get(self._key(from_currency, to_currency))

    def convert(self, money: Money, to_currency: FormattableCurrency) -> Money:
        """Converts $money into $to_currency using the stored rate for that pair.

        Raises:
            InvalidCurrency: If no rate is stored from the currency of $money to $to_currency.
        """
        rate = self.get_rate(money.currency, to_currency)
        if rate is None:
            raise InvalidCurrency(f"Cannot call `convert` because there is no ExchangeRate for {money.currency.code} -> {to_currency.code}")
        return rate.convert(money)

    def rates(self) -> Iterator[ExchangeRate]:
        """Iterates over stored rates in insertion order of their pairs."""
        return iter(list(self._rates.values()))

    def __contains__(self, pair) -> bool:
        try:
            from_currency, to_currency = pair
        except (TypeError, ValueError):
            return False
        return self.get_rate(from_currency, to_currency) is not None

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._rates)} rate(s))"
