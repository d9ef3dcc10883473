"""Database ports for the receipt spending dashboard.

This module defines the application-layer protocol for accessing the
receipt store engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the receipt store.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_receipts_engine(self) -> Engine:
        """Get the engine for the receipt store.

        Returns:
            Engine: SQLAlchemy engine connected to the receipts database.
        """


__all__ = ["DatabaseEnginePort"]
