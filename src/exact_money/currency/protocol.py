from __future__ import annotations

from typing import Protocol, runtime_checkable

from exact_money.locale import Locale


# region Interface


@runtime_checkable
class FormattableCurrency(Protocol):
    """What `Money` needs to know about the currency it is denominated in.

    Implementations must be small immutable values with `__eq__` and `__hash__`, because
    they are compared on every arithmetic operation and used as `Exchange` keys.
    """

    @property
    def code(self) -> str:
        """ISO-like code, e.g. "USD"."""
        ...

    @property
    def symbol(self) -> str:
        """Display symbol, e.g. "$"."""
        ...

    @property
    def symbol_first(self) -> bool:
        """True if the symbol is written before the amount."""
        ...

    @property
    def exponent(self) -> int:
        """Number of fractional digits of the minor unit."""
        ...

    @property
    def locale(self) -> Locale:
        """Numeral conventions used to parse and format amounts."""
        ...


# endregion
