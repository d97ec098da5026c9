"""Exception types raised by the money engine.

Two families exist and they are intentionally unrelated:

- `MoneyError` and its subclasses signal bad external data (a malformed amount string,
  unusable allocation ratios, a conversion with the wrong source currency). Callers are
  expected to catch them.
- `InvariantViolation` signals a programming error in the calling code, such as mixing
  currencies in arithmetic. It is not a `MoneyError`, so `except MoneyError` never hides it.
"""


class MoneyError(ValueError):
    """Base class for recoverable money errors."""


class InvalidAmount(MoneyError):
    """Amount string could not be parsed for the target currency."""


class InvalidRatio(MoneyError):
    """Allocation ratios are empty or contain a non-positive value."""


class InvalidCurrency(MoneyError):
    """Money currency does not match the source currency of an exchange rate."""


class InvariantViolation(AssertionError):
    """Contract of a Money operation was broken by the caller."""
