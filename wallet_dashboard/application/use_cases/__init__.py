"""Application use cases package."""

from .get_swap_quote import GetSwapQuoteUseCase, SwapQuote
from .get_wallet_balances import DisplayBalance, GetWalletBalancesUseCase

__all__ = [
    "GetWalletBalancesUseCase",
    "DisplayBalance",
    "GetSwapQuoteUseCase",
    "SwapQuote",
]
