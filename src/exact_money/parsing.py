from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation

from exact_money.currency.protocol import FormattableCurrency
from exact_money.errors import InvalidAmount
from exact_money.locale import LocalFormat

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


def parse_amount(text: str, currency: FormattableCurrency) -> Decimal:
    """Parses a locale formatted amount like "1,000,000.50" into an exact `Decimal`.

    Separators and digit grouping come from the locale of $currency. The integer part may
    start with "+" or "-". Digit separators are optional, but when present every group
    except the leftmost must have exactly the size the locale expects, and the leftmost
    must not be longer than that. Without a fraction, the result carries
    `currency.exponent` zero digits (e.g. "3" -> Decimal("3.00") for USD).

    Args:
        text: Amount string.
        currency: Currency whose locale defines the separators.

    Returns:
        The parsed amount, not quantized beyond the digits given in $text.

    Raises:
        InvalidAmount: If $text is not a well-formed amount for the locale of $currency.
        TypeError: If $text is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"$text must be a string, but provided value is: {text!r}")

    local_format = LocalFormat.from_locale(currency.locale)
    parts = text.strip().split(local_format.exponent_separator)

    # Reject: at most one exponent separator
    if len(parts) > 2:
        _reject(text, currency, f"it contains more than one exponent separator '{local_format.exponent_separator}'")

    integer_part = parts[0]
    sign = ""
    if integer_part[:1] in ("+", "-"):
        sign, integer_part = integer_part[0], integer_part[1:]

    groups = integer_part.split(local_format.digit_separator)
    _check_groups(text, currency, groups, local_format)
    integer_digits = "".join(groups)

    if len(parts) == 1:
        # Reject: there must be at least one digit somewhere
        if not integer_digits:
            _reject(text, currency, "it contains no digits")
        fraction = "0" * currency.exponent
    else:
        fraction = parts[1]
        try:
            int(fraction)
        except ValueError as e:
            _reject(text, currency, f"fraction '{fraction}' is not an integer", cause=e)
        # Reject: int() also accepts signs, underscores and non-ASCII digits
        if not _DIGITS.fullmatch(fraction):
            _reject(text, currency, f"fraction '{fraction}' is not a non-negative integer")

    literal = f"{sign}{integer_digits or '0'}.{fraction}" if fraction else f"{sign}{integer_digits}"
    try:
        return Decimal(literal)
    except InvalidOperation as e:
        raise InvalidAmount(f"Cannot parse $text ('{text}') for Currency '{currency.code}' because '{literal}' is not a decimal number") from e


def _check_groups(text: str, currency: FormattableCurrency, groups: list[str], local_format: LocalFormat) -> None:
    """Validates the digit groups of the integer part, compared from the right."""
    for group in groups:
        # Reject: only digits are allowed between digit separators
        if group and not _DIGITS.fullmatch(group):
            _reject(text, currency, f"'{group}' is not a group of digits")

    if len(groups) <= 1:
        return

    for index, group in enumerate(reversed(groups[1:])):
        expected = local_format.group_size(index)
        # Reject: inner groups must match the locale pattern exactly
        if len(group) != expected:
            _reject(text, currency, f"digit group '{group}' has {len(group)} digit(s), but {expected} are expected")

    leftmost = groups[0]
    limit = local_format.group_size(len(groups) - 1)
    # Reject: the leftmost group may be shorter than the pattern, but not empty or longer
    if not 1 <= len(leftmost) <= limit:
        _reject(text, currency, f"leading digit group '{leftmost}' must have 1 to {limit} digit(s)")


def _reject(text: str, currency: FormattableCurrency, reason: str, cause: Exception | None = None) -> None:
    logger.debug(f"Rejected amount $text ('{text}') for Currency '{currency.code}': {reason}")
    raise InvalidAmount(f"Cannot parse $text ('{text}') for Currency '{currency.code}' because {reason}") from cause
