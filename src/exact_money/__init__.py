__version__ = "0.1.0"

from exact_money.currency import Currency, CurrencyType, FormattableCurrency, crypto, iso
from exact_money.errors import InvalidAmount, InvalidCurrency, InvalidRatio, InvariantViolation, MoneyError
from exact_money.exchange import Exchange, ExchangeRate
from exact_money.format import Formatter, Params, Position
from exact_money.locale import LocalFormat, Locale
from exact_money.money import Money, Round

__all__ = [
    "Currency",
    "CurrencyType",
    "FormattableCurrency",
    "crypto",
    "iso",
    "InvalidAmount",
    "InvalidCurrency",
    "InvalidRatio",
    "InvariantViolation",
    "MoneyError",
    "Exchange",
    "ExchangeRate",
    "Formatter",
    "Params",
    "Position",
    "LocalFormat",
    "Locale",
    "Money",
    "Round",
]
