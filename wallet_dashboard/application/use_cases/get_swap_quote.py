"""Use case to quote a currency swap from the latest prices."""

from decimal import Decimal

from wallet_dashboard.application.ports.wallet_sources import PriceSourcePort
from wallet_dashboard.domain.models import SwapQuote
from wallet_dashboard.domain.services.prices import build_price_table
from wallet_dashboard.domain.services.swap import compute_swap_quote
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


class GetSwapQuoteUseCase:
    """Quote conversions between currencies with a known price."""

    def __init__(
        self,
        price_source: PriceSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            price_source: Port providing raw price quotes.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._price_source = price_source
        self._logger = logger or get_app_logger()

    def _load_prices(self) -> dict[str, Decimal]:
        quotes = self._price_source.fetch_price_quotes()
        return build_price_table(quotes, logger=self._logger)

    def list_prices(self) -> dict[str, Decimal]:
        """Return the latest usable price per currency, alphabetically."""
        return self._load_prices()

    def list_currencies(self) -> list[str]:
        """Return tradeable currencies in alphabetical order."""
        return list(self._load_prices())

    def execute(
        self,
        from_currency: str,
        to_currency: str,
        from_amount: Decimal | float | None,
    ) -> SwapQuote | None:
        """Return the swap quote, or None when it cannot be computed.

        Args:
            from_currency: Currency being sold.
            to_currency: Currency being bought.
            from_amount: Amount of from_currency to convert.

        Returns:
            SwapQuote | None: Quote for the requested conversion.
        """
        prices = self._load_prices()
        for currency in (from_currency, to_currency):
            if currency not in prices:
                self._logger.warning(f"Missing price for {currency}")
        quote = compute_swap_quote(
            from_currency,
            to_currency,
            from_amount,
            prices,
        )
        if quote is not None:
            self._logger.info(
                f"Quoted {quote.from_amount} {from_currency} -> "
                f"{quote.to_amount} {to_currency}"
            )
        return quote


__all__ = ["GetSwapQuoteUseCase", "SwapQuote"]
