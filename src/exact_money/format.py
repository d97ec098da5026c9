from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from enum import Enum
from typing import TYPE_CHECKING

from exact_money.currency.protocol import FormattableCurrency
from exact_money.locale import LocalFormat
from exact_money.utils.decimal_tools import round_to_digits

if TYPE_CHECKING:
    from exact_money.money import Money


class Position(Enum):
    """Elements a formatted money string is assembled from."""

    SPACE = "SPACE"
    AMOUNT = "AMOUNT"
    CODE = "CODE"
    SYMBOL = "SYMBOL"
    SIGN = "SIGN"


@dataclass(frozen=True)
class Params:
    """Everything `Formatter` needs to render an amount.

    Attributes:
        digit_separator: Placed between digit groups of the integer part.
        exponent_separator: Placed between the integer part and the fraction.
        separator_pattern: Group sizes from the decimal point leftwards; the last one repeats.
        positions: Order in which the elements are written.
        rounding: Fractional digits to round (half to even) and pad to; None keeps the amount as is.
        symbol: Text written for `Position.SYMBOL`.
        code: Text written for `Position.CODE`.
    """

    digit_separator: str = ","
    exponent_separator: str = "."
    separator_pattern: tuple[int, ...] = (3, 3, 3)
    positions: tuple[Position, ...] = (Position.SIGN, Position.SYMBOL, Position.AMOUNT)
    rounding: int | None = None
    symbol: str | None = None
    code: str | None = None

    @classmethod
    def from_currency(cls, currency: FormattableCurrency) -> Params:
        """Resolves the display parameters of $currency from its own metadata and its locale.

        Amounts are rounded to the currency exponent, and the symbol goes before or after
        the amount depending on `currency.symbol_first`. The sign always leads.
        """
        local_format = LocalFormat.from_locale(currency.locale)
        if currency.symbol_first:
            positions = (Position.SIGN, Position.SYMBOL, Position.AMOUNT)
        else:
            positions = (Position.SIGN, Position.AMOUNT, Position.SYMBOL)

        return cls(
            digit_separator=local_format.digit_separator,
            exponent_separator=local_format.exponent_separator,
            separator_pattern=local_format.digit_separator_pattern,
            positions=positions,
            rounding=currency.exponent,
            symbol=currency.symbol,
            code=currency.code,
        )


class Formatter:
    """Assembles display strings out of already resolved `Params`."""

    @staticmethod
    def money(money: Money, params: Params) -> str:
        """Renders $money with $params.

        The sign is taken from the amount after rounding, so an amount that rounds to zero is
        never written with a minus sign.
        """
        value = money.amount
        if params.rounding is not None:
            value = round_to_digits(value, params.rounding, ROUND_HALF_EVEN)

        amount = Formatter.amount(value.copy_abs(), params)
        is_negative = value < 0

        parts: list[str] = []
        for position in params.positions:
            if position is Position.SPACE:
                parts.append(" ")
            elif position is Position.AMOUNT:
                parts.append(amount)
            elif position is Position.CODE:
                parts.append(params.code or "")
            elif position is Position.SYMBOL:
                parts.append(params.symbol or "")
            elif position is Position.SIGN:
                if is_negative:
                    parts.append("-")
        return "".join(parts)

    @staticmethod
    def amount(value: Decimal, params: Params) -> str:
        """Renders the non-negative $value with digit grouping and the exponent separator."""
        integer, _, fraction = format(value, "f").partition(".")
        if params.rounding is not None:
            fraction = fraction.ljust(params.rounding, "0")

        grouped = params.digit_separator.join(_split_groups(integer, params.separator_pattern))
        if fraction:
            return f"{grouped}{params.exponent_separator}{fraction}"
        return grouped


def _split_groups(digits: str, pattern: tuple[int, ...]) -> list[str]:
    """Splits $digits into groups sized by $pattern, counted from the right."""
    groups: list[str] = []
    end = len(digits)
    index = 0
    while end > 0:
        size = pattern[index] if index < len(pattern) else pattern[-1]
        start = max(0, end - size)
        groups.append(digits[start:end])
        end = start
        index += 1
    groups.reverse()
    return groups
