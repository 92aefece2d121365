"""Chain priority lookup."""

from wallet_dashboard.domain.constants import (
    CHAIN_PRIORITIES,
    UNKNOWN_CHAIN_PRIORITY,
)


def chain_priority(chain: str) -> int:
    """Return the display priority of a chain.

    Args:
        chain: Chain label from a wallet balance.

    Returns:
        int: Configured priority, or UNKNOWN_CHAIN_PRIORITY for chains
        outside the supported set.
    """
    return CHAIN_PRIORITIES.get(chain, UNKNOWN_CHAIN_PRIORITY)


def is_known_chain(chain: str) -> bool:
    """Return True when the chain has a priority above the sentinel."""
    return chain_priority(chain) > UNKNOWN_CHAIN_PRIORITY


__all__ = ["chain_priority", "is_known_chain"]
