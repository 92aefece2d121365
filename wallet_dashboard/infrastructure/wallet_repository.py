"""SQLAlchemy-backed repository for wallet balances and prices."""

from datetime import date, datetime, time, timezone

from sqlalchemy import text

from wallet_dashboard.application.ports.database import DatabaseEnginePort
from wallet_dashboard.application.ports.wallet_sources import (
    PriceSourcePort,
    WalletBalancesSourcePort,
)
from wallet_dashboard.domain.models import PriceQuote, WalletBalance
from wallet_dashboard.domain.services.prices import parse_quote_date
from wallet_dashboard.utils.decimal_utils import coerce_decimal


class SqlAlchemyWalletRepository(WalletBalancesSourcePort, PriceSourcePort):
    """Repository reading wallet balances and price quotes with SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the wallet engine.
        """
        self._db_port = db_port

    def fetch_wallet_balances(self) -> list[WalletBalance]:
        """Return wallet balances in insertion order.

        Returns:
            list[WalletBalance]: Balances with Decimal amounts; NULL amounts
            read as zero.
        """
        query = text(
            """
            SELECT currency, amount, chain
            FROM wallet_balances
            ORDER BY id
            """
        )
        engine = self._db_port.get_wallet_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            WalletBalance(
                currency=row.currency,
                amount=coerce_decimal(row.amount),
                chain=row.chain,
            )
            for row in rows
        ]

    def fetch_price_quotes(self) -> list[PriceQuote]:
        """Return every stored price quote.

        Returns:
            list[PriceQuote]: Quotes ordered by currency then newest first,
            with dates normalized to aware UTC datetimes.
        """
        query = text(
            """
            SELECT currency, price, date
            FROM token_prices
            ORDER BY currency, date DESC
            """
        )
        engine = self._db_port.get_wallet_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            PriceQuote(
                currency=row.currency,
                price=coerce_decimal(row.price),
                date=self._coerce_datetime(row.date),
            )
            for row in rows
        ]

    @staticmethod
    def _coerce_datetime(value) -> datetime:
        if isinstance(value, str):
            return parse_quote_date(value)
        if not isinstance(value, datetime) and isinstance(value, date):
            return datetime.combine(value, time.min, tzinfo=timezone.utc)
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


__all__ = ["SqlAlchemyWalletRepository"]
