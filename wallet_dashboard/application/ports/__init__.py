"""Application ports package."""

from .database import DatabaseEnginePort
from .wallet_sources import PriceSourcePort, WalletBalancesSourcePort

__all__ = [
    "DatabaseEnginePort",
    "PriceSourcePort",
    "WalletBalancesSourcePort",
]
