"""Database infrastructure for the receipt spending dashboard.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the receipt store. It belongs to the infrastructure
layer because it deals with external systems (PostgreSQL, SQLite).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    The project ``.env`` file is loaded first when present.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the receipt store.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled. SQLite URLs keep SQLAlchemy's default pool.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_receipts_engine: Optional[Engine] = None


def get_receipts_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the receipt store.

    Returns:
        Engine: Lazily initialized engine connected to the receipts database.
    """
    global _receipts_engine
    if _receipts_engine is None:
        db_url = _get_env_var("RECEIPTS_DB_URL")
        _receipts_engine = _create_engine(db_url)
    return _receipts_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application use cases can depend only on the protocol.
    """

    def get_receipts_engine(self) -> Engine:
        """Get the engine for the receipt store.

        Returns:
            Engine: SQLAlchemy engine connected to the receipts database.
        """
        return get_receipts_engine()


__all__ = [
    "get_receipts_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
