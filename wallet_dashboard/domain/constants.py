"""Domain constants for wallet balance display."""

from types import MappingProxyType

OSMOSIS = "Osmosis"
ETHEREUM = "Ethereum"
ARBITRUM = "Arbitrum"
ZILLIQA = "Zilliqa"
NEO = "Neo"

SUPPORTED_CHAINS = (
    OSMOSIS,
    ETHEREUM,
    ARBITRUM,
    ZILLIQA,
    NEO,
)

# Higher values are displayed first.
CHAIN_PRIORITIES = MappingProxyType(
    {
        OSMOSIS: 100,
        ETHEREUM: 50,
        ARBITRUM: 30,
        ZILLIQA: 20,
        NEO: 20,
    }
)

UNKNOWN_CHAIN_PRIORITY = -99

DISPLAY_DECIMAL_PLACES = 2


__all__ = [
    "ARBITRUM",
    "CHAIN_PRIORITIES",
    "DISPLAY_DECIMAL_PLACES",
    "ETHEREUM",
    "NEO",
    "OSMOSIS",
    "SUPPORTED_CHAINS",
    "UNKNOWN_CHAIN_PRIORITY",
    "ZILLIQA",
]
