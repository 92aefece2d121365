"""Domain package for wallet balance rules and core models."""

from .constants import (
    CHAIN_PRIORITIES,
    SUPPORTED_CHAINS,
    UNKNOWN_CHAIN_PRIORITY,
)
from .models import (
    BalanceProcessingResult,
    DisplayBalance,
    DroppedBalance,
    PriceQuote,
    SwapQuote,
    WalletBalance,
)
from .services import (
    build_price_table,
    chain_priority,
    compute_swap_quote,
    format_amount,
    partition_balances,
    process_balances,
)

__all__ = [
    "BalanceProcessingResult",
    "CHAIN_PRIORITIES",
    "DisplayBalance",
    "DroppedBalance",
    "PriceQuote",
    "SUPPORTED_CHAINS",
    "SwapQuote",
    "UNKNOWN_CHAIN_PRIORITY",
    "WalletBalance",
    "build_price_table",
    "chain_priority",
    "compute_swap_quote",
    "format_amount",
    "partition_balances",
    "process_balances",
]
