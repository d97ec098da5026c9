"""Currency definitions.

`Currency` is the concrete currency value shipped with the package; `iso` and `crypto`
hold predefined instances and register them on import. Any object satisfying
`FormattableCurrency` can be used with `Money` instead.
"""

from exact_money.currency.currency import Currency, CurrencyType
from exact_money.currency.protocol import FormattableCurrency
from exact_money.currency import crypto, iso

__all__ = ["Currency", "CurrencyType", "FormattableCurrency", "crypto", "iso"]
