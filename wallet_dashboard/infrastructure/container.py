"""Composition root for wiring infrastructure adapters."""

from wallet_dashboard.application.ports.database import DatabaseEnginePort
from wallet_dashboard.application.ports.wallet_sources import (
    PriceSourcePort,
    WalletBalancesSourcePort,
)
from wallet_dashboard.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.infrastructure.price_file_source import (
    JsonPriceFileSource,
)
from wallet_dashboard.infrastructure.settings import WalletSettings
from wallet_dashboard.infrastructure.wallet_repository import (
    SqlAlchemyWalletRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_wallet_repository(
    db_port: DatabaseEnginePort | None = None,
) -> WalletBalancesSourcePort:
    """Return the wallet balances repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyWalletRepository(resolved_db)


def build_price_source(
    db_port: DatabaseEnginePort | None = None,
) -> PriceSourcePort:
    """Return the configured price source."""
    settings = WalletSettings.from_env()
    if settings.reads_prices_from_file:
        if settings.prices_file is None:
            raise RuntimeError("File price source requires a PRICES_FILE value.")
        return JsonPriceFileSource(
            settings.prices_file,
            logger=get_app_logger(),
        )
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyWalletRepository(resolved_db)


__all__ = [
    "build_database_adapter",
    "build_wallet_repository",
    "build_price_source",
]
