from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Locale(Enum):
    """Numeral conventions a currency is written in."""

    EN_US = "en-us"
    EN_IN = "en-in"
    EN_EU = "en-eu"
    EN_BY = "en-by"


@dataclass(frozen=True)
class LocalFormat:
    """Separator characters and digit grouping of one `Locale`.

    Attributes:
        name: Locale tag, e.g. "en-us".
        digit_separator: Character between digit groups of the integer part.
        exponent_separator: Character between the integer part and the fraction.
        digit_separator_pattern: Expected group sizes, starting at the group nearest to the
            exponent separator and moving left. The last size repeats for longer numbers.
    """

    name: str
    digit_separator: str
    exponent_separator: str
    digit_separator_pattern: tuple[int, ...]

    def group_size(self, index: int) -> int:
        """Returns the expected size of the $index-th group counted from the right (0-based)."""
        pattern = self.digit_separator_pattern
        return pattern[index] if index < len(pattern) else pattern[-1]

    @classmethod
    def from_locale(cls, locale: Locale) -> LocalFormat:
        """Looks up the format of $locale.

        Raises:
            TypeError: If $locale is not a `Locale`.
        """
        if not isinstance(locale, Locale):
            raise TypeError(f"$locale must be a Locale instance, but provided value is: {locale!r}")

        return _FORMATS[locale]


_FORMATS: dict[Locale, LocalFormat] = {
    Locale.EN_US: LocalFormat("en-us", ",", ".", (3, 3, 3)),
    Locale.EN_IN: LocalFormat("en-in", ",", ".", (3, 2, 2)),
    Locale.EN_EU: LocalFormat("en-eu", ".", ",", (3, 3, 3)),
    Locale.EN_BY: LocalFormat("en-by", " ", ",", (3, 3, 3)),
}
