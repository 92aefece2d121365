"""Filter, order and format wallet balances for display.

The pipeline is a pure function of its inputs: balances on unknown chains
and balances without a strictly positive amount are dropped, the rest are
ordered by chain priority then amount (both descending, stable) and
projected into DisplayBalance records.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from wallet_dashboard.domain.constants import DISPLAY_DECIMAL_PLACES
from wallet_dashboard.domain.models import (
    BalanceProcessingResult,
    DisplayBalance,
    DroppedBalance,
    WalletBalance,
)
from wallet_dashboard.domain.services.priority import (
    chain_priority,
    is_known_chain,
)
from wallet_dashboard.utils.decimal_utils import (
    coerce_decimal,
    is_positive,
    round_half_up,
)

UNKNOWN_CHAIN = "unknown_chain"
NON_POSITIVE_AMOUNT = "non_positive_amount"


def format_amount(amount: Decimal | float) -> str:
    """Render an amount with exactly two decimals, rounding half up.

    Args:
        amount: Amount to render.

    Returns:
        str: Fixed-point text such as ``"2.01"`` for ``2.005``.
    """
    value = coerce_decimal(amount)
    if not value.is_finite():
        return str(value)
    return f"{round_half_up(value, -DISPLAY_DECIMAL_PLACES):f}"


def drop_reason(balance: WalletBalance) -> str | None:
    """Return why a balance is excluded from display, or None to keep it."""
    if not is_known_chain(balance.chain):
        return UNKNOWN_CHAIN
    # NaN fails the comparison and is dropped like any non-positive amount.
    if not is_positive(coerce_decimal(balance.amount)):
        return NON_POSITIVE_AMOUNT
    return None


def _sort_key(balance: WalletBalance) -> tuple[int, Decimal]:
    return (
        -chain_priority(balance.chain),
        coerce_decimal(balance.amount).copy_negate(),
    )


def _to_display(
    balance: WalletBalance,
    prices: Mapping[str, Decimal | float],
) -> DisplayBalance:
    amount = coerce_decimal(balance.amount)
    price = coerce_decimal(prices.get(balance.currency))
    return DisplayBalance(
        currency=balance.currency,
        amount=amount,
        chain=balance.chain,
        formatted_amount=format_amount(amount),
        usd_value=amount * price if price else Decimal("0"),
    )


def partition_balances(
    balances: Iterable[WalletBalance],
    prices: Mapping[str, Decimal | float],
) -> BalanceProcessingResult:
    """Split balances into display-ready rows and dropped entries.

    Args:
        balances: Wallet balances in source order.
        prices: Unit price per currency; missing currencies price at zero.

    Returns:
        BalanceProcessingResult: Displayed rows in display order and dropped
        entries in source order.
    """
    kept: list[WalletBalance] = []
    dropped: list[DroppedBalance] = []
    for balance in balances:
        reason = drop_reason(balance)
        if reason is None:
            kept.append(balance)
        else:
            dropped.append(DroppedBalance(balance=balance, reason=reason))

    ordered = sorted(kept, key=_sort_key)
    return BalanceProcessingResult(
        displayed=[_to_display(balance, prices) for balance in ordered],
        dropped=dropped,
    )


def process_balances(
    balances: Iterable[WalletBalance],
    prices: Mapping[str, Decimal | float],
) -> list[DisplayBalance]:
    """Return the filtered, ordered and formatted balances.

    Args:
        balances: Wallet balances in source order.
        prices: Unit price per currency; missing currencies price at zero.

    Returns:
        list[DisplayBalance]: Rows sorted by chain priority then amount.
    """
    return partition_balances(balances, prices).displayed


__all__ = [
    "NON_POSITIVE_AMOUNT",
    "UNKNOWN_CHAIN",
    "drop_reason",
    "format_amount",
    "partition_balances",
    "process_balances",
]
