"""Tests for the SqlAlchemyWalletRepository."""

from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from wallet_dashboard.domain.models import PriceQuote, WalletBalance
from wallet_dashboard.infrastructure.wallet_repository import (
    SqlAlchemyWalletRepository,
)


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows


def _build_db_port(rows: list[SimpleNamespace]) -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.return_value = _FakeResult(rows)

    db_port = MagicMock()
    db_port.get_wallet_engine.return_value = engine
    return db_port, conn


def test_fetch_wallet_balances_maps_rows() -> None:
    """Rows should become WalletBalance values with Decimal amounts."""
    db_port, conn = _build_db_port(
        [
            SimpleNamespace(currency="ETH", amount=1.5, chain="Ethereum"),
            SimpleNamespace(currency="OSMO", amount=None, chain="Osmosis"),
        ]
    )

    repository = SqlAlchemyWalletRepository(db_port)

    balances = repository.fetch_wallet_balances()

    assert balances == [
        WalletBalance(currency="ETH", amount=Decimal("1.5"), chain="Ethereum"),
        WalletBalance(currency="OSMO", amount=Decimal("0"), chain="Osmosis"),
    ]
    query = conn.execute.call_args.args[0]
    assert "FROM wallet_balances" in query.text


def test_fetch_price_quotes_normalizes_dates() -> None:
    """Naive and string dates should come back as aware UTC datetimes."""
    expected = datetime(2023, 8, 29, 7, 10, tzinfo=timezone.utc)
    db_port, _ = _build_db_port(
        [
            SimpleNamespace(
                currency="ETH",
                price=Decimal("1645.93"),
                date=datetime(2023, 8, 29, 7, 10),
            ),
            SimpleNamespace(
                currency="USD",
                price=1,
                date="2023-08-29T07:10:00.000Z",
            ),
            SimpleNamespace(currency="ATOM", price="7.18", date=expected),
        ]
    )

    repository = SqlAlchemyWalletRepository(db_port)

    quotes = repository.fetch_price_quotes()

    assert quotes == [
        PriceQuote(currency="ETH", price=Decimal("1645.93"), date=expected),
        PriceQuote(currency="USD", price=Decimal("1"), date=expected),
        PriceQuote(currency="ATOM", price=Decimal("7.18"), date=expected),
    ]


def test_fetch_price_quotes_accepts_date_columns() -> None:
    """DATE values become midnight UTC datetimes."""
    db_port, _ = _build_db_port(
        [
            SimpleNamespace(
                currency="ETH",
                price=Decimal("1645.93"),
                date=date(2023, 8, 29),
            ),
        ]
    )

    repository = SqlAlchemyWalletRepository(db_port)

    (quote,) = repository.fetch_price_quotes()

    assert quote.date == datetime(2023, 8, 29, tzinfo=timezone.utc)
