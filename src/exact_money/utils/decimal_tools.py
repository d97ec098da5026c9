from __future__ import annotations

from decimal import Context, Decimal, getcontext
from typing import TypeAlias


# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise. Booleans are
    rejected because `True * money` is almost always a bug.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool or not a supported scalar type.
    """
    if isinstance(value, Decimal):
        return value

    # Raise: bool is an int subclass, but never a meaningful scalar here
    if isinstance(value, bool) or not isinstance(value, (int, str, float)):
        raise TypeError(f"Cannot convert $value ({value!r}) of type '{type(value).__name__}' to Decimal")

    return Decimal(str(value))


def scale_minor_units(minor_units: int, exponent: int) -> Decimal:
    """Returns $minor_units shifted right by $exponent decimal places, without rounding.

    Examples:
        >>> scale_minor_units(1000, 2)
        Decimal('10.00')
        >>> scale_minor_units(-5, 0)
        Decimal('-5')
    """
    # String construction is exact and ignores the context precision
    return Decimal(f"{minor_units}E-{exponent}")


def quantum(digits: int) -> Decimal:
    """Returns the `Decimal` step used to quantize to $digits fractional places."""
    return Decimal(f"1E-{digits}")


def round_to_digits(value: Decimal, digits: int, rounding: str) -> Decimal:
    """Rounds $value to $digits fractional places using $rounding (a `decimal` ROUND_* constant).

    The quantization runs in a context wide enough for the result, so values with more
    significant digits than the current context precision are not rejected.
    """
    if digits < 0:
        raise ValueError(f"Cannot call `round_to_digits` because $digits ({digits}) < 0")

    required_precision = max(getcontext().prec, value.adjusted() + digits + 2)
    context = Context(prec=required_precision, rounding=rounding)
    return value.quantize(quantum(digits), context=context)


def exact_context(*values: Decimal, extra_digits: int = 0, rounding: str | None = None) -> Context:
    """Returns a context in which sums and differences of $values are computed without rounding.

    The precision covers every digit position used by $values (the units digit included),
    one carry digit and $extra_digits more. It never drops below the current context precision.

    Args:
        values: Finite decimals the context must hold exactly.
        extra_digits: Additional digits, e.g. for the digits of a factor the values get multiplied by.
        rounding: `decimal` ROUND_* constant; defaults to the rounding of the current context.
    """
    most_significant = max(0, *(value.adjusted() for value in values))
    least_significant = min(0, *(value.as_tuple().exponent for value in values))
    required_precision = most_significant - least_significant + 2 + extra_digits

    context = getcontext()
    return Context(prec=max(context.prec, required_precision), rounding=rounding or context.rounding)
