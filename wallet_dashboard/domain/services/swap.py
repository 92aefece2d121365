"""Domain services for currency swap quotes."""

from collections.abc import Mapping
from decimal import Decimal

from wallet_dashboard.domain.models import SwapQuote
from wallet_dashboard.utils.decimal_utils import (
    coerce_decimal,
    is_positive,
    round_half_up,
)


def compute_swap_quote(
    from_currency: str,
    to_currency: str,
    from_amount: Decimal | float | None,
    prices: Mapping[str, Decimal | float],
) -> SwapQuote | None:
    """Convert an amount between two currencies through their unit prices.

    Args:
        from_currency: Currency being sold.
        to_currency: Currency being bought.
        from_amount: Amount of from_currency to convert.
        prices: Unit price per currency in a common quote currency.

    Returns:
        SwapQuote | None: The quote, or None when the amount is not strictly
        positive or either price is missing or zero.
    """
    if from_amount is None:
        return None
    amount = coerce_decimal(from_amount)
    if not is_positive(amount):
        return None
    from_price = coerce_decimal(prices.get(from_currency))
    to_price = coerce_decimal(prices.get(to_currency))
    if not is_positive(from_price) or not is_positive(to_price):
        return None
    rate = from_price / to_price
    return SwapQuote(
        from_currency=from_currency,
        to_currency=to_currency,
        from_amount=amount,
        to_amount=amount * rate,
        rate=rate,
    )


def _format_significant(value: Decimal, digits: int) -> str:
    if value == 0:
        return "0"
    rounded = round_half_up(value, value.adjusted() - (digits - 1))
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_grouped(value: Decimal, min_places: int, max_places: int) -> str:
    text = f"{round_half_up(value, -max_places):,.{max_places}f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0").ljust(min_places, "0")
    return f"{whole}.{fraction}" if fraction else whole


def format_swap_amount(value: Decimal | float) -> str:
    """Format a swap amount for display.

    Values of at least 1 use thousands separators and 2 to 6 decimals;
    smaller values keep 8 significant digits. Non-finite values render
    as their text form.
    """
    amount = coerce_decimal(value)
    if not amount.is_finite():
        return str(amount)
    if amount >= 1:
        return _format_grouped(amount, 2, 6)
    return _format_significant(amount, 8)


def format_price(value: Decimal | float) -> str:
    """Format a unit price for display.

    Values of at least 1 use thousands separators and exactly 2 decimals;
    smaller values keep 6 significant digits. Non-finite values render
    as their text form.
    """
    price = coerce_decimal(value)
    if not price.is_finite():
        return str(price)
    if price >= 1:
        return _format_grouped(price, 2, 2)
    return _format_significant(price, 6)


__all__ = ["compute_swap_quote", "format_swap_amount", "format_price"]
