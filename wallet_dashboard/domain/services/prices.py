"""Domain services for price list normalization."""

from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from logging import Logger

from wallet_dashboard.domain.models import PriceQuote
from wallet_dashboard.domain.services.normalization import normalize_currency
from wallet_dashboard.utils.decimal_utils import coerce_decimal, is_positive


class PriceListFormatError(ValueError):
    """Raised when a price list document does not have the expected shape."""


def parse_quote_date(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Args:
        raw: Timestamp such as ``2023-08-29T07:10:40.000Z``.

    Returns:
        datetime: Parsed timestamp; naive values are treated as UTC.
    """
    cleaned = raw.strip()
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    parsed = datetime.fromisoformat(cleaned)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_price_quotes(payload, logger: Logger | None = None) -> list[PriceQuote]:
    """Convert a decoded price list document into PriceQuote rows.

    Args:
        payload: Decoded JSON list of ``{"currency", "date", "price"}`` items.
        logger: Optional logger used to report skipped entries.

    Returns:
        list[PriceQuote]: Parsed quotes in document order.

    Raises:
        PriceListFormatError: If the payload is not a list.
    """
    if not isinstance(payload, list):
        raise PriceListFormatError(
            f"Expected a list of price entries, got {type(payload).__name__}"
        )
    quotes: list[PriceQuote] = []
    for index, item in enumerate(payload):
        try:
            currency = normalize_currency(item.get("currency"))
            if currency is None:
                raise ValueError("missing currency")
            quotes.append(
                PriceQuote(
                    currency=currency,
                    price=coerce_decimal(item["price"]),
                    date=parse_quote_date(item["date"]),
                )
            )
        except (AttributeError, KeyError, TypeError, ValueError,
                InvalidOperation) as exc:
            if logger is not None:
                logger.warning(f"Skipping price entry #{index}: {exc!r}")
    return quotes


def build_price_table(
    quotes: Iterable[PriceQuote],
    logger: Logger | None = None,
) -> dict[str, Decimal]:
    """Build a currency to price mapping from the latest quote per currency.

    Args:
        quotes: Price quotes in any order.
        logger: Optional logger used to report discarded prices.

    Returns:
        dict[str, Decimal]: Latest strictly positive price per currency,
        keyed in alphabetical order.
    """
    latest: dict[str, PriceQuote] = {}
    for quote in quotes:
        current = latest.get(quote.currency)
        if current is None or quote.date > current.date:
            latest[quote.currency] = quote

    table: dict[str, Decimal] = {}
    for currency in sorted(latest):
        price = coerce_decimal(latest[currency].price)
        if not is_positive(price):
            if logger is not None:
                logger.warning(
                    f"Ignoring non-positive price for {currency}: {price}"
                )
            continue
        table[currency] = price
    return table


__all__ = [
    "PriceListFormatError",
    "build_price_table",
    "parse_price_quotes",
    "parse_quote_date",
]
