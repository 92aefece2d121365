"""Application ports for wallet balance and price data."""

from typing import Protocol

from wallet_dashboard.domain.models import PriceQuote, WalletBalance


class WalletBalancesSourcePort(Protocol):
    """Port exposing the balances held by a wallet."""

    def fetch_wallet_balances(self) -> list[WalletBalance]:
        """Return wallet balances in source order."""


class PriceSourcePort(Protocol):
    """Port exposing raw price quotes."""

    def fetch_price_quotes(self) -> list[PriceQuote]:
        """Return every known price quote, in any order."""


__all__ = ["WalletBalancesSourcePort", "PriceSourcePort"]
