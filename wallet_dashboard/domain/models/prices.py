"""Domain models for token prices and swap quotes."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class PriceQuote:
    """Row representing a currency price observed at a point in time."""

    currency: str
    price: Decimal
    date: datetime


@dataclass(frozen=True)
class SwapQuote:
    """Conversion of an amount from one currency into another.

    Attributes:
        from_currency: Currency being sold.
        to_currency: Currency being bought.
        from_amount: Amount of from_currency.
        to_amount: Resulting amount of to_currency.
        rate: Units of to_currency received per unit of from_currency.
    """

    from_currency: str
    to_currency: str
    from_amount: Decimal
    to_amount: Decimal
    rate: Decimal


__all__ = ["PriceQuote", "SwapQuote"]
