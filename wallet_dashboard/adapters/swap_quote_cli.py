"""CLI adapter to quote a currency swap from the configured price source."""

from decimal import Decimal, InvalidOperation
import os

from wallet_dashboard.application.use_cases.get_swap_quote import (
    GetSwapQuoteUseCase,
)
from wallet_dashboard.domain.services.swap import format_swap_amount
from wallet_dashboard.infrastructure.container import build_price_source
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


def _parse_amount(value: str | None, logger) -> Decimal | None:
    """Parse a decimal amount string.

    Args:
        value: Raw amount string.
        logger: Logger used for warnings.

    Returns:
        Decimal | None: Parsed amount or None when invalid.
    """
    if not value:
        return None
    try:
        return Decimal(value.strip())
    except InvalidOperation:
        logger.warning(f"Invalid amount '{value}'. Expected a number.")
        return None


def main() -> None:
    """Quote SWAP_AMOUNT of SWAP_FROM into SWAP_TO."""
    logger = get_app_logger()
    from_currency = os.getenv("SWAP_FROM", "").strip()
    to_currency = os.getenv("SWAP_TO", "").strip()
    if not from_currency or not to_currency:
        logger.warning("SWAP_FROM and SWAP_TO are required to quote a swap.")
        return
    amount = _parse_amount(os.getenv("SWAP_AMOUNT"), logger)

    try:
        price_source = build_price_source()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    use_case = GetSwapQuoteUseCase(price_source=price_source, logger=logger)
    quote = use_case.execute(from_currency, to_currency, amount)
    if quote is None:
        print(f"No quote available for {from_currency} -> {to_currency}.")
        return

    print(
        f"{format_swap_amount(quote.from_amount)} {quote.from_currency} = "
        f"{format_swap_amount(quote.to_amount)} {quote.to_currency}"
    )
    print(
        f"1 {quote.from_currency} = "
        f"{format_swap_amount(quote.rate)} {quote.to_currency}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
