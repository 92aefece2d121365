"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, localcontext


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through their shortest text form so ``2.005`` becomes
    ``Decimal("2.005")`` rather than its binary expansion.

    Args:
        value: Raw numeric value from SQL, JSON or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def is_positive(value: Decimal) -> bool:
    """Return True when the value is a number strictly greater than zero."""
    if value.is_nan():
        return False
    return value > 0


def round_half_up(value: Decimal, exponent: int) -> Decimal:
    """Round a finite value to ``10 ** exponent``, halves away from zero.

    The working precision grows with the magnitude of the value so that
    amounts wider than the default 28 digits keep every integer digit.

    Args:
        value: Finite value to round.
        exponent: Exponent of the last kept digit (e.g., -2 for cents).

    Returns:
        Decimal: Rounded value.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() - exponent + 1)
        return value.quantize(
            Decimal(1).scaleb(exponent),
            rounding=ROUND_HALF_UP,
        )


__all__ = ["coerce_decimal", "is_positive", "round_half_up"]
