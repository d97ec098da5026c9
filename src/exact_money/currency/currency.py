from __future__ import annotations

import logging
from enum import Enum
from typing import ClassVar

from bidict import bidict

from exact_money.locale import Locale

logger = logging.getLogger(__name__)


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"


class Currency:
    """Represents a currency with code, display metadata and minor-unit exponent.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC").
        name (str): Full currency name.
        symbol (str): Display symbol (e.g., "$", "₹").
        symbol_first (bool): Whether the symbol is written before the amount.
        exponent (int): Number of fractional digits of the minor unit (0-18).
        locale (Locale): Numeral conventions for parsing and formatting.
        minor_units (int): Smallest circulating denomination, in minor units.
        iso_numeric_code (int | None): ISO 4217 numeric code, if the currency has one.
        currency_type (CurrencyType): FIAT or CRYPTO.
    """

    __slots__ = (
        "_code",
        "_name",
        "_symbol",
        "_symbol_first",
        "_exponent",
        "_locale",
        "_minor_units",
        "_iso_numeric_code",
        "_currency_type",
    )

    # Class-level registry for predefined currencies
    _registry: ClassVar[dict[str, Currency]] = {}
    # Alpha code <-> ISO numeric code, for currencies that have one
    _numeric_codes: ClassVar[bidict[str, int]] = bidict()

    def __init__(
        self,
        code: str,
        name: str,
        symbol: str,
        exponent: int,
        locale: Locale = Locale.EN_US,
        symbol_first: bool = True,
        minor_units: int = 1,
        iso_numeric_code: int | None = None,
        currency_type: CurrencyType = CurrencyType.FIAT,
    ):
        """Initialize a Currency instance.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If $locale or $currency_type have the wrong type.
        """
        # Raise: $code is the identity of the currency
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(symbol, str) or not symbol:
            raise ValueError(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

        if isinstance(exponent, bool) or not isinstance(exponent, int) or exponent < 0 or exponent > 18:
            raise ValueError(f"$exponent must be an integer between 0 and 18, but provided value is: {exponent}")

        if not isinstance(locale, Locale):
            raise TypeError(f"$locale must be a Locale instance, but provided value is: {locale}")

        if not isinstance(minor_units, int) or minor_units < 1:
            raise ValueError(f"$minor_units must be a positive integer, but provided value is: {minor_units}")

        if iso_numeric_code is not None and (not isinstance(iso_numeric_code, int) or iso_numeric_code <= 0):
            raise ValueError(f"$iso_numeric_code must be a positive integer or None, but provided value is: {iso_numeric_code}")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code.upper().strip()
        self._name = name.strip()
        self._symbol = symbol
        self._symbol_first = bool(symbol_first)
        self._exponent = exponent
        self._locale = locale
        self._minor_units = minor_units
        self._iso_numeric_code = iso_numeric_code
        self._currency_type = currency_type

    # region Properties

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def symbol(self) -> str:
        """Get the display symbol."""
        return self._symbol

    @property
    def symbol_first(self) -> bool:
        """Get whether the symbol precedes the amount."""
        return self._symbol_first

    @property
    def exponent(self) -> int:
        """Get the number of fractional digits of the minor unit."""
        return self._exponent

    @property
    def locale(self) -> Locale:
        """Get the locale."""
        return self._locale

    @property
    def minor_units(self) -> int:
        """Get the smallest circulating denomination in minor units."""
        return self._minor_units

    @property
    def iso_numeric_code(self) -> int | None:
        """Get the ISO 4217 numeric code."""
        return self._iso_numeric_code

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def is_fiat(self) -> bool:
        return self._currency_type == CurrencyType.FIAT

    @property
    def is_crypto(self) -> bool:
        return self._currency_type == CurrencyType.CRYPTO

    # endregion

    # region Registry

    @classmethod
    def register(cls, currency: Currency, overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False, or if its numeric
                code is already taken by a different currency.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        number = currency.iso_numeric_code
        if number is not None:
            owner = cls._numeric_codes.inverse.get(number)
            # Raise: numeric codes must stay unique across registered currencies
            if owner is not None and owner != currency.code:
                raise ValueError(f"Cannot register Currency '{currency.code}' because $iso_numeric_code ({number}) already belongs to '{owner}'")

        cls._numeric_codes.pop(currency.code, None)
        if number is not None:
            cls._numeric_codes[currency.code] = number
        cls._registry[currency.code] = currency
        logger.debug(f"Registered Currency '{currency.code}' (exponent {currency.exponent}, locale {currency.locale.value})")

    @classmethod
    def find(cls, code: str) -> Currency | None:
        """Get currency from registry by code, or None if it is not registered."""
        if not isinstance(code, str):
            return None
        return cls._registry.get(code.upper().strip())

    @classmethod
    def find_by_numeric_code(cls, number: int) -> Currency | None:
        """Get currency from registry by ISO 4217 numeric code, or None."""
        code = cls._numeric_codes.inverse.get(number)
        return cls._registry.get(code) if code is not None else None

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Get currency from registry by code.

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The currency instance.

        Raises:
            ValueError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        currency = cls.find(code)
        if currency is None:
            raise ValueError(f"Currency with code '{code.upper().strip()}' not found in registry. Available currencies: {cls.registered_codes()}")

        return currency

    @classmethod
    def registered_codes(cls) -> list[str]:
        """Codes of all registered currencies, sorted."""
        return sorted(cls._registry)

    # endregion

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', '{self.name}', '{self.symbol}', {self.exponent}, {self.locale}, {self.currency_type})"
