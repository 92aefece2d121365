"""Tests for the wallet balance display pipeline."""

import copy
from decimal import Decimal
import random

from wallet_dashboard.domain.constants import UNKNOWN_CHAIN_PRIORITY
from wallet_dashboard.domain.models import WalletBalance
from wallet_dashboard.domain.services.balances import (
    NON_POSITIVE_AMOUNT,
    UNKNOWN_CHAIN,
    format_amount,
    partition_balances,
    process_balances,
)
from wallet_dashboard.domain.services.priority import chain_priority


def test_process_balances_drops_unknown_chain_and_orders_by_priority() -> None:
    """Osmosis sorts before Ethereum and unknown chains are dropped."""
    balances = [
        WalletBalance(currency="BTC", amount=0.5, chain="Osmosis"),
        WalletBalance(currency="ETH", amount=2, chain="Ethereum"),
        WalletBalance(currency="XYZ", amount=3, chain="UnknownChain"),
    ]
    prices = {"BTC": 20000, "ETH": 1500}

    result = process_balances(balances, prices)

    assert [(item.currency, item.chain) for item in result] == [
        ("BTC", "Osmosis"),
        ("ETH", "Ethereum"),
    ]
    assert result[0].usd_value == Decimal("10000")
    assert result[1].usd_value == Decimal("3000")
    assert result[0].formatted_amount == "0.50"
    assert result[1].formatted_amount == "2.00"


def test_process_balances_excludes_zero_amount() -> None:
    """Zero amounts are dropped even on a supported chain."""
    balances = [WalletBalance(currency="ETH", amount=0, chain="Ethereum")]

    assert process_balances(balances, {"ETH": 1500}) == []


def test_process_balances_excludes_negative_and_nan_amounts() -> None:
    """Negative and NaN amounts fail the positive-amount rule."""
    balances = [
        WalletBalance(currency="ETH", amount=-1, chain="Ethereum"),
        WalletBalance(currency="ATOM", amount=float("nan"), chain="Osmosis"),
        WalletBalance(currency="OSMO", amount=Decimal("NaN"), chain="Osmosis"),
    ]

    assert process_balances(balances, {}) == []


def test_equal_priority_chains_order_by_descending_amount() -> None:
    """Zilliqa and Neo share a priority, so amount decides."""
    balances = [
        WalletBalance(currency="ZIL", amount=5, chain="Zilliqa"),
        WalletBalance(currency="NEO", amount=10, chain="Neo"),
    ]

    result = process_balances(balances, {})

    assert [item.currency for item in result] == ["NEO", "ZIL"]


def test_equal_priority_and_amount_keep_input_order() -> None:
    """Ties on priority and amount preserve the source order."""
    balances = [
        WalletBalance(currency="NEO", amount=7, chain="Neo"),
        WalletBalance(currency="ZIL", amount=7, chain="Zilliqa"),
    ]
    reversed_balances = list(reversed(balances))

    assert [item.currency for item in process_balances(balances, {})] == [
        "NEO",
        "ZIL",
    ]
    assert [
        item.currency for item in process_balances(reversed_balances, {})
    ] == ["ZIL", "NEO"]


def test_missing_price_yields_zero_usd_value() -> None:
    """Currencies absent from the price table are valued at zero."""
    balances = [WalletBalance(currency="ARB", amount=12, chain="Arbitrum")]

    result = process_balances(balances, {"ETH": 1500})

    assert result[0].usd_value == Decimal("0")


def test_format_amount_rounds_half_up() -> None:
    """Two-decimal formatting rounds halves away from zero."""
    assert format_amount(2.005) == "2.01"
    assert format_amount(2.004) == "2.00"
    assert format_amount(Decimal("2.015")) == "2.02"
    assert format_amount(1000) == "1000.00"
    assert format_amount(Decimal("0.001")) == "0.00"


def test_display_balance_key_uses_chain_and_currency() -> None:
    """Rendered rows are identified by (chain, currency)."""
    balances = [WalletBalance(currency="ETH", amount=1, chain="Arbitrum")]

    (row,) = process_balances(balances, {})

    assert row.key == ("Arbitrum", "ETH")


def test_process_balances_does_not_mutate_inputs() -> None:
    """Balances and prices are left untouched."""
    balances = [
        WalletBalance(currency="ETH", amount=1, chain="Ethereum"),
        WalletBalance(currency="BTC", amount=2, chain="Osmosis"),
    ]
    prices = {"ETH": 1500, "BTC": 20000}
    balances_before = copy.deepcopy(balances)
    prices_before = dict(prices)

    process_balances(balances, prices)

    assert balances == balances_before
    assert prices == prices_before


def test_process_balances_is_deterministic() -> None:
    """Repeated calls return structurally equal, independent results."""
    balances = [
        WalletBalance(currency="ETH", amount=1.25, chain="Ethereum"),
        WalletBalance(currency="OSMO", amount=3, chain="Osmosis"),
    ]
    prices = {"ETH": 1500.5}

    first = process_balances(balances, prices)
    second = process_balances(balances, prices)

    assert first == second
    assert first is not second


def test_output_satisfies_filter_and_sort_invariants() -> None:
    """Random inputs always produce filtered, correctly ordered rows."""
    rng = random.Random(1234)
    chains = ["Osmosis", "Ethereum", "Arbitrum", "Zilliqa", "Neo", "Solana"]
    balances = [
        WalletBalance(
            currency=f"C{index}",
            amount=rng.choice([-1, 0, 1, 2, 2, 3.5, 10]),
            chain=rng.choice(chains),
        )
        for index in range(200)
    ]

    result = process_balances(balances, {})

    assert len(result) <= len(balances)
    for item in result:
        assert chain_priority(item.chain) > UNKNOWN_CHAIN_PRIORITY
        assert item.amount > 0
    source_index = {balance.currency: i for i, balance in enumerate(balances)}
    for left, right in zip(result, result[1:]):
        left_priority = chain_priority(left.chain)
        right_priority = chain_priority(right.chain)
        assert left_priority >= right_priority
        if left_priority == right_priority:
            assert left.amount >= right.amount
            if left.amount == right.amount:
                assert (
                    source_index[left.currency]
                    < source_index[right.currency]
                )


def test_partition_balances_reports_dropped_entries() -> None:
    """Dropped entries carry a reason and keep source order."""
    unknown = WalletBalance(currency="XYZ", amount=3, chain="UnknownChain")
    empty = WalletBalance(currency="ETH", amount=0, chain="Ethereum")
    kept = WalletBalance(currency="BTC", amount=1, chain="Osmosis")

    result = partition_balances([unknown, kept, empty], {"BTC": 2})

    assert [item.currency for item in result.displayed] == ["BTC"]
    assert [(item.balance, item.reason) for item in result.dropped] == [
        (unknown, UNKNOWN_CHAIN),
        (empty, NON_POSITIVE_AMOUNT),
    ]
    assert result.displayed == process_balances(
        [unknown, kept, empty],
        {"BTC": 2},
    )


def test_process_balances_accepts_empty_input() -> None:
    """An empty balance list yields an empty result."""
    assert process_balances([], {}) == []


def test_process_balances_formats_very_large_amounts() -> None:
    """Amounts with 27+ integer digits keep every digit when formatted."""
    balances = [
        WalletBalance(
            currency="WEI",
            amount=Decimal("123456789012345678901234567"),
            chain="Ethereum",
        ),
        WalletBalance(currency="ETH", amount=1e27, chain="Ethereum"),
    ]

    result = process_balances(balances, {"WEI": 1})

    assert [item.currency for item in result] == ["ETH", "WEI"]
    assert [item.formatted_amount for item in result] == [
        "1000000000000000000000000000.00",
        "123456789012345678901234567.00",
    ]
    assert result[0].usd_value == Decimal("0")
    assert result[1].usd_value == Decimal("123456789012345678901234567")


def test_amounts_differing_beyond_default_precision_sort_exactly() -> None:
    """Ordering compares the full amount, not a 28-digit rounding of it."""
    smaller = WalletBalance(
        currency="A",
        amount=Decimal("1234567890123456789012345678901"),
        chain="Neo",
    )
    larger = WalletBalance(
        currency="B",
        amount=Decimal("1234567890123456789012345678902"),
        chain="Neo",
    )

    result = process_balances([smaller, larger], {})

    assert [item.currency for item in result] == ["B", "A"]


def test_infinite_amount_is_kept_and_rendered_as_text() -> None:
    """Infinite amounts sort first and format as their text form."""
    balances = [
        WalletBalance(currency="ETH", amount=5, chain="Ethereum"),
        WalletBalance(currency="INF", amount=float("inf"), chain="Ethereum"),
    ]

    result = process_balances(balances, {"INF": 2})

    assert [item.currency for item in result] == ["INF", "ETH"]
    assert result[0].formatted_amount == "Infinity"
    assert result[0].usd_value == Decimal("Infinity")


def test_unpriced_infinite_amount_is_valued_at_zero() -> None:
    """A missing price values even an infinite amount at zero."""
    balances = [
        WalletBalance(currency="INF", amount=float("inf"), chain="Osmosis"),
    ]

    (row,) = process_balances(balances, {})

    assert row.formatted_amount == "Infinity"
    assert row.usd_value == Decimal("0")
    assert not row.usd_value.is_nan()
