"""Simple CLI to validate the wallet database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the wallet database.
"""

from wallet_dashboard.infrastructure.container import build_database_adapter
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the configured database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_wallet_engine()
    logger.info(f"Wallet DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Wallet database connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
