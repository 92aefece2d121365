"""Domain services package."""

from .balances import (
    NON_POSITIVE_AMOUNT,
    UNKNOWN_CHAIN,
    drop_reason,
    format_amount,
    partition_balances,
    process_balances,
)
from .normalization import normalize_currency
from .prices import (
    PriceListFormatError,
    build_price_table,
    parse_price_quotes,
    parse_quote_date,
)
from .priority import chain_priority, is_known_chain
from .swap import compute_swap_quote, format_price, format_swap_amount

__all__ = [
    "NON_POSITIVE_AMOUNT",
    "UNKNOWN_CHAIN",
    "PriceListFormatError",
    "build_price_table",
    "chain_priority",
    "compute_swap_quote",
    "drop_reason",
    "format_amount",
    "format_price",
    "format_swap_amount",
    "is_known_chain",
    "normalize_currency",
    "parse_price_quotes",
    "parse_quote_date",
    "partition_balances",
    "process_balances",
]
