"""Domain models for wallet balances."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class WalletBalance:
    """Balance of a single currency held on a chain.

    Attributes:
        currency: Currency symbol (e.g., ETH).
        amount: Amount held, as reported by the balance source.
        chain: Chain the balance originates from.
    """

    currency: str
    amount: Decimal | float
    chain: str


@dataclass(frozen=True)
class DisplayBalance:
    """Display-ready projection of a wallet balance."""

    currency: str
    amount: Decimal
    chain: str
    formatted_amount: str
    usd_value: Decimal

    @property
    def key(self) -> tuple[str, str]:
        """Return the stable (chain, currency) identity used by renderers."""
        return (self.chain, self.currency)


@dataclass(frozen=True)
class DroppedBalance:
    """Balance excluded from display with the reason it was dropped."""

    balance: WalletBalance
    reason: str


@dataclass(frozen=True)
class BalanceProcessingResult:
    """Displayed balances together with the entries that were dropped."""

    displayed: list[DisplayBalance]
    dropped: list[DroppedBalance]


__all__ = [
    "WalletBalance",
    "DisplayBalance",
    "DroppedBalance",
    "BalanceProcessingResult",
]
