"""Domain models package."""

from .balances import (
    BalanceProcessingResult,
    DisplayBalance,
    DroppedBalance,
    WalletBalance,
)
from .prices import PriceQuote, SwapQuote

__all__ = [
    "WalletBalance",
    "DisplayBalance",
    "DroppedBalance",
    "BalanceProcessingResult",
    "PriceQuote",
    "SwapQuote",
]
