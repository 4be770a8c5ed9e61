"""Database infrastructure for the application.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the application database. It belongs to the
infrastructure layer because it deals with external systems.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from gestion_dj.application.ports.database import DatabaseEnginePort

DB_URL_ENV = "GESTION_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a local ``.env`` file are loaded first.

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
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled. SQLite URLs keep the dialect default pool.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the application database.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _engine
    if _engine is None:
        db_url = _get_env_var(DB_URL_ENV)
        _engine = _create_engine(db_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so the store can depend only on the protocol.
    """

    def __init__(
        self,
        engine: Engine | None = None,
        db_url: str | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine overriding the configured singleton.
            db_url: Optional URL for a dedicated engine, created lazily.
        """
        self._engine = engine
        self._db_url = db_url

    def get_engine(self) -> Engine:
        """Get the engine for the application database.

        Returns:
            Engine: SQLAlchemy engine connected to the configured backend.
        """
        if self._engine is None and self._db_url:
            self._engine = _create_engine(self._db_url)
        if self._engine is not None:
            return self._engine
        return get_engine()


__all__ = [
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
