"""Use case to list wallet balances ready for display."""

from wallet_dashboard.application.ports.wallet_sources import (
    PriceSourcePort,
    WalletBalancesSourcePort,
)
from wallet_dashboard.domain.models import (
    BalanceProcessingResult,
    DisplayBalance,
)
from wallet_dashboard.domain.services.balances import partition_balances
from wallet_dashboard.domain.services.prices import build_price_table
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


class GetWalletBalancesUseCase:
    """Filter, order and price wallet balances for the UI."""

    def __init__(
        self,
        balances_source: WalletBalancesSourcePort,
        price_source: PriceSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            balances_source: Port providing wallet balances.
            price_source: Port providing raw price quotes.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balances_source = balances_source
        self._price_source = price_source
        self._logger = logger or get_app_logger()

    def execute(self) -> list[DisplayBalance]:
        """Return display-ready balances.

        Returns:
            list[DisplayBalance]: Balances sorted by chain priority and amount.
        """
        return self.execute_with_dropped().displayed

    def execute_with_dropped(self) -> BalanceProcessingResult:
        """Return display-ready balances along with the dropped entries.

        Returns:
            BalanceProcessingResult: Displayed and dropped balances.
        """
        balances = self._balances_source.fetch_wallet_balances()
        quotes = self._price_source.fetch_price_quotes()
        prices = build_price_table(quotes, logger=self._logger)

        result = partition_balances(balances, prices)
        for entry in result.dropped:
            self._logger.debug(
                f"Dropped {entry.balance.currency} on {entry.balance.chain}: "
                f"{entry.reason}"
            )
        self._logger.info(
            f"Prepared {len(result.displayed)} wallet balances "
            f"({len(result.dropped)} dropped, {len(prices)} prices)"
        )
        return result


__all__ = ["GetWalletBalancesUseCase", "DisplayBalance"]
