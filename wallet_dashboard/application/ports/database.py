"""Database ports for the wallet dashboard.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the wallet database engine."""

    def get_wallet_engine(self) -> Engine:
        """Get the engine for the wallet database.

        Returns:
            Engine: SQLAlchemy engine connected to the wallet database.
        """


__all__ = ["DatabaseEnginePort"]
